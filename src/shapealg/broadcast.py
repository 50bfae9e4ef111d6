from collections.abc import Sequence

from .axis import merge_names, named_axes
from .diagnostics import ErrorCode, ShapeValidationError
from .policy import resolve_op_policy
from .tensor_types import AxisName, NamedShape, Shape


def broadcast_check(
    old_shape: Sequence[int],
    new_shape: Sequence[int],
    axes: Sequence[int],
) -> None:
    """Validate broadcasting `old_shape` into `new_shape` along `axes`.

    Axis `i` of `old_shape` maps onto axis `axes[i]` of `new_shape`; each
    mapped dimension must be 1 or equal to its target. Axes must be sorted
    ascending, and a target axis may be repeated only by unit dimensions.
    """
    old_shape = tuple(old_shape)
    new_shape = tuple(new_shape)
    axes = tuple(axes)
    old_rank = len(old_shape)
    new_rank = len(new_shape)
    policy = resolve_op_policy("broadcast_check")

    def incompatible() -> ShapeValidationError:
        return policy.error(
            code=ErrorCode.BROADCAST_INCOMPATIBLE,
            message=(
                f"cannot broadcast tensor of dimensions {old_shape} to {new_shape} "
                f"with axes {list(axes)}"
            ),
            data={"old_shape": old_shape, "new_shape": new_shape, "axes": axes},
        )

    if len(axes) != old_rank:
        raise policy.error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                f"expected length of axes ({len(axes)}) to match rank of shape "
                f"({old_rank})"
            ),
            data={"axes": axes, "rank": old_rank},
        )
    if old_rank > new_rank:
        raise incompatible()

    last_axis = -1
    for index, axis in enumerate(axes):
        if axis < 0 or axis >= new_rank:
            raise policy.error(
                code=ErrorCode.AXIS_OUT_OF_RANGE,
                message=(
                    f"broadcast axis ({axis}) invalid for target shape with rank "
                    f"{new_rank}"
                ),
                data={"axis": axis, "rank": new_rank},
            )
        if axis < last_axis:
            raise policy.error(
                code=ErrorCode.UNORDERED_AXES,
                message=f"broadcast axes must be ordered, got {axis} after {last_axis}",
                help="sort broadcast axes ascending",
                data={"axes": axes, "axis": axis, "previous_axis": last_axis},
            )
        old_dim = old_shape[index]
        if axis == last_axis and (old_dim != 1 or old_shape[index - 1] != 1):
            raise incompatible()
        if old_dim != 1 and old_dim != new_shape[axis]:
            raise incompatible()
        last_axis = axis


def default_broadcast_axes(
    shape: Sequence[int],
    new_shape: Sequence[int],
) -> tuple[int, ...]:
    """Return the right-aligned axes mapping `shape` under `new_shape`."""
    rank = len(shape)
    new_rank = len(new_shape)
    if rank > new_rank:
        raise resolve_op_policy("default_broadcast_axes").error(
            code=ErrorCode.RANK_EXCEEDED,
            message=(
                f"cannot broadcast tensor of dimensions {tuple(shape)} to "
                f"{tuple(new_shape)}"
            ),
            data={"shape": tuple(shape), "new_shape": tuple(new_shape)},
        )
    return tuple(range(new_rank - rank, new_rank))


def _right_aligned(
    shape: Shape,
    names: tuple[AxisName, ...],
    rank: int,
) -> tuple[Shape, tuple[AxisName, ...]]:
    """Left-pad one shape with unit unnamed axes up to `rank`."""
    missing = rank - len(shape)
    return (1,) * missing + shape, (None,) * missing + names


def binary_broadcast(
    shape1: Sequence[int],
    names1: Sequence[AxisName],
    shape2: Sequence[int],
    names2: Sequence[AxisName],
) -> NamedShape:
    """Broadcast two shapes against each other, NumPy style.

    Shapes are right-aligned; each aligned pair of dimensions must be equal
    or contain a 1, and the larger one wins. Names of aligned axes are merged
    only once the shapes are known to be compatible.
    """
    lhs_shape = tuple(shape1)
    rhs_shape = tuple(shape2)
    lhs_names = named_axes(names1, lhs_shape)
    rhs_names = named_axes(names2, rhs_shape)

    if lhs_shape == rhs_shape and lhs_names == rhs_names:
        return NamedShape(lhs_shape, lhs_names)

    rank = max(len(lhs_shape), len(rhs_shape))
    lhs_dims, lhs_aligned = _right_aligned(lhs_shape, lhs_names, rank)
    rhs_dims, rhs_aligned = _right_aligned(rhs_shape, rhs_names, rank)

    out_shape: list[int] = []
    for lhs_dim, rhs_dim in zip(lhs_dims, rhs_dims):
        if lhs_dim != 1 and rhs_dim != 1 and lhs_dim != rhs_dim:
            raise resolve_op_policy("binary_broadcast").error(
                code=ErrorCode.BROADCAST_INCOMPATIBLE,
                message=(
                    f"cannot broadcast tensor of dimensions {lhs_shape} to "
                    f"{rhs_shape}"
                ),
                data={"lhs_shape": lhs_shape, "rhs_shape": rhs_shape},
            )
        out_shape.append(max(lhs_dim, rhs_dim))

    out_names = [
        merge_names(lhs_name, rhs_name)
        for lhs_name, rhs_name in zip(lhs_aligned, rhs_aligned)
    ]
    return NamedShape.build(out_shape, out_names)


__all__ = ["binary_broadcast", "broadcast_check", "default_broadcast_axes"]
