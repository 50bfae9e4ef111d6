from collections.abc import Sequence

from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy
from ..tensor_types import AxisName, Names


def named_axes(names: Sequence[AxisName] | None, shape: Sequence[int]) -> Names:
    """Validate axis names for one shape, defaulting to all-None."""
    rank = len(shape)
    if names is None:
        return (None,) * rank

    validated = tuple(names)
    if len(validated) != rank:
        raise resolve_op_policy("named_axes").error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                f"invalid names for tensor of rank {rank}, when specifying names "
                "every dimension must have a name or be None"
            ),
            data={"rank": rank, "names": validated},
        )
    for name in validated:
        if name is not None and not isinstance(name, str):
            raise TypeError("axis names must be str or None")
    return validated


def merge_names(lhs: AxisName, rhs: AxisName) -> AxisName:
    """Merge two aligned axis names; None yields to any name."""
    if lhs is None:
        return rhs
    if rhs is None or lhs == rhs:
        return lhs
    raise resolve_op_policy("merge_names").error(
        code=ErrorCode.NAME_CONFLICT,
        message=f"cannot merge names {lhs!r}, {rhs!r}",
        data={"lhs_name": lhs, "rhs_name": rhs},
    )


def duplicate_names(names: Sequence[AxisName]) -> tuple[str, ...]:
    """Return names that occur more than once, ignoring None."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in names:
        if name is None:
            continue
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return tuple(duplicates)


__all__ = ["duplicate_names", "merge_names", "named_axes"]
