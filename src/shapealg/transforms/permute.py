from collections.abc import Sequence

from ..axis import named_axes
from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy
from ..tensor_types import AxisName, NamedShape


def transpose(
    shape: Sequence[int],
    permutation: Sequence[int],
    names: Sequence[AxisName],
) -> NamedShape:
    """Reorder axes so output axis `i` is input axis `permutation[i]`."""
    rank = len(shape)
    policy = resolve_op_policy("transpose")
    names = named_axes(names, shape)
    if len(permutation) != rank:
        raise policy.error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                f"expected length of permutation ({len(permutation)}) to match "
                f"rank of shape ({rank})"
            ),
            data={"permutation": tuple(permutation), "rank": rank},
        )
    for source_axis in permutation:
        if source_axis < 0 or source_axis >= rank:
            raise policy.error(
                code=ErrorCode.AXIS_OUT_OF_RANGE,
                message=(
                    f"permutation axis ({source_axis}) invalid for shape with "
                    f"rank {rank}"
                ),
                data={"axis": source_axis, "rank": rank},
            )
    return NamedShape.build(
        [shape[source_axis] for source_axis in permutation],
        [names[source_axis] for source_axis in permutation],
    )


def transpose_axes(shape: Sequence[int]) -> tuple[int, ...]:
    """Return the default permutation, which reverses all axes."""
    return tuple(reversed(range(len(shape))))


__all__ = ["transpose", "transpose_axes"]
