from collections.abc import Sequence

from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy
from ..tensor_types import Shape


def slice_shape(
    start: Sequence[int],
    limit: Sequence[int],
    stride: Sequence[int],
    *,
    shape: Sequence[int] | None = None,
) -> Shape:
    """Return the shape of a strided slice `[start, limit)` per axis."""
    policy = resolve_op_policy("slice_shape")
    rank = len(start) if shape is None else len(shape)
    if not len(start) == len(limit) == len(stride) == rank:
        raise policy.error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                "invalid slice, start, limit and stride must have one entry per "
                f"axis, got {len(start)}, {len(limit)} and {len(stride)} for "
                f"rank {rank}"
            ),
            data={
                "rank": rank,
                "start": tuple(start),
                "limit": tuple(limit),
                "stride": tuple(stride),
            },
        )

    sliced: list[int] = []
    for axis, (lo, hi, step) in enumerate(zip(start, limit, stride)):
        if step <= 0:
            raise ValueError(f"slice stride must be positive, got {step} for axis {axis}")
        size = -((lo - hi) // step)
        if size <= 0:
            raise policy.error(
                code=ErrorCode.EMPTY_SLICE,
                message=(
                    "start and limit indices would result in 0 or negative "
                    "dimension size, limit indices must be greater than start "
                    "indices"
                ),
                data={"axis": axis, "start": lo, "limit": hi, "stride": step},
            )
        sliced.append(size)
    return tuple(sliced)


__all__ = ["slice_shape"]
