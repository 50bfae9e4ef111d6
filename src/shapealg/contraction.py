from collections.abc import Collection, Sequence

from .axis import duplicate_names, named_axes
from .diagnostics import ErrorCode
from .policy import resolve_op_policy
from .tensor_types import AxisName, NamedShape


def contract(
    shape: Sequence[int],
    axes: Collection[int],
    names: Sequence[AxisName],
) -> NamedShape:
    """Drop normalized `axes` from a shape, keeping remaining order."""
    names = named_axes(names, shape)
    dropped = set(axes)
    kept = [index for index in range(len(shape)) if index not in dropped]
    return NamedShape.build(
        [shape[index] for index in kept],
        [names[index] for index in kept],
    )


def zip_reduce(
    shape1: Sequence[int],
    axes1: Sequence[int],
    names1: Sequence[AxisName],
    shape2: Sequence[int],
    axes2: Sequence[int],
    names2: Sequence[AxisName],
) -> NamedShape:
    """Compute the shape of a pairwise contraction (dot) of two shapes.

    `axes1[k]` of the left shape is contracted against `axes2[k]` of the
    right shape; both axes lists must already be normalized. The result
    keeps the left remainder followed by the right remainder.
    """
    policy = resolve_op_policy("zip_reduce")
    if len(axes1) != len(axes2):
        raise policy.error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                f"dot/zip expects the same number of axes on both sides, got "
                f"{len(axes1)} and {len(axes2)}"
            ),
            data={"lhs_axes": tuple(axes1), "rhs_axes": tuple(axes2)},
        )

    for lhs_axis, rhs_axis in zip(axes1, axes2):
        lhs_dim = shape1[lhs_axis]
        rhs_dim = shape2[rhs_axis]
        if lhs_dim != rhs_dim:
            raise policy.error(
                code=ErrorCode.DIMENSION_MISMATCH,
                message=(
                    "dot/zip expects shapes to be compatible, "
                    f"dimension {lhs_axis} of left-side ({lhs_dim}) does not equal "
                    f"dimension {rhs_axis} of right-side ({rhs_dim})"
                ),
                data={
                    "lhs_axis": lhs_axis,
                    "lhs_dim": lhs_dim,
                    "rhs_axis": rhs_axis,
                    "rhs_dim": rhs_dim,
                },
            )

    lhs = contract(shape1, axes1, names1)
    rhs = contract(shape2, axes2, names2)
    out_names = lhs.names + rhs.names
    duplicates = duplicate_names(out_names)
    if duplicates:
        raise policy.error(
            code=ErrorCode.DUPLICATE_NAMES,
            message=(
                f"operation would result in duplicate names {list(out_names)!r}, "
                "please rename your tensors to avoid duplicates"
            ),
            help="rename axes so contracted operands keep distinct names",
            data={"names": out_names, "duplicates": duplicates},
        )
    return NamedShape(lhs.shape + rhs.shape, out_names)


__all__ = ["contract", "zip_reduce"]
