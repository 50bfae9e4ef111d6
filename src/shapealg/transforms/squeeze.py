from collections.abc import Collection, Sequence

from ..axis import named_axes
from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy
from ..tensor_types import AxisName, NamedShape


def squeeze(
    shape: Sequence[int],
    axes: Collection[int],
    names: Sequence[AxisName],
) -> NamedShape:
    """Remove normalized unit axes from a shape."""
    names = named_axes(names, shape)
    dropped = set(axes)
    out_shape: list[int] = []
    out_names: list[AxisName] = []
    for index, (size, name) in enumerate(zip(shape, names)):
        if index not in dropped:
            out_shape.append(size)
            out_names.append(name)
            continue
        if size != 1:
            raise resolve_op_policy("squeeze").error(
                code=ErrorCode.SQUEEZE_NON_UNIT_DIM,
                message=(
                    "cannot squeeze dimensions whose sizes are not 1, "
                    f"got {size} for dimension {index}"
                ),
                data={"axis": index, "size": size},
            )
    return NamedShape.build(out_shape, out_names)


def squeeze_axes(shape: Sequence[int]) -> tuple[int, ...]:
    """Return ascending indices of every unit axis."""
    return tuple(index for index, size in enumerate(shape) if size == 1)


__all__ = ["squeeze", "squeeze_axes"]
