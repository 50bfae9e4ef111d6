from collections.abc import Sequence

from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy
from ..tensor_types import AxisName, AxisRef


def normalize_axis(
    shape: Sequence[int],
    axis: AxisRef,
    names: Sequence[AxisName],
) -> int:
    """Resolve one integer or named axis to a non-negative index."""
    rank = len(shape)
    policy = resolve_op_policy("normalize_axis")

    if axis is None:
        raise policy.error(
            code=ErrorCode.NIL_AXIS,
            message="axis name cannot be None",
            help="address unnamed axes by index",
        )
    if isinstance(axis, str):
        for index, name in enumerate(names):
            if name == axis:
                return index
        raise policy.error(
            code=ErrorCode.UNKNOWN_NAME,
            message=f"key {axis!r} not found in tensor with names {list(names)!r}",
            data={"axis": axis, "names": tuple(names)},
        )
    if not isinstance(axis, int) or isinstance(axis, bool):
        raise TypeError(f"axis must be int, str, or None, got {type(axis).__name__}")

    if 0 <= axis < rank:
        return axis
    if axis < 0 and -axis <= rank:
        return rank + axis
    raise policy.error(
        code=ErrorCode.AXIS_OUT_OF_RANGE,
        message=f"given axis ({axis}) invalid for shape with rank {rank}",
        help=f"use an axis in [{-rank}, {rank})",
        data={"axis": axis, "rank": rank},
    )


def normalize_axes(
    shape: Sequence[int],
    axes: Sequence[AxisRef],
    names: Sequence[AxisName],
) -> tuple[int, ...]:
    """Resolve a list of unique axes to non-negative indices."""
    normalized = tuple(normalize_axis(shape, axis, names) for axis in axes)
    if len(set(normalized)) != len(normalized):
        raise resolve_op_policy("normalize_axes").error(
            code=ErrorCode.DUPLICATE_AXES,
            message=(
                f"axes {list(axes)!r} must be unique integers between 0 and "
                f"{len(shape) - 1}"
            ),
            data={"axes": tuple(axes), "normalized": normalized},
        )
    return normalized


__all__ = ["normalize_axes", "normalize_axis"]
