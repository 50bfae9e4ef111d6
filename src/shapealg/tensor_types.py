from collections.abc import Sequence
from typing import NamedTuple, TypeAlias

try:
    from typing import Self
except ImportError:  # pragma: no cover
    from typing_extensions import Self


Shape: TypeAlias = tuple[int, ...]
AxisName: TypeAlias = str | None
Names: TypeAlias = tuple[AxisName, ...]
AxisRef: TypeAlias = int | str | None
PaddingEntry: TypeAlias = tuple[int, int, int]
EdgePadding: TypeAlias = tuple[int, int]


class NamedShape(NamedTuple):
    """Shape/names pair produced by shape operations."""

    shape: Shape
    names: Names

    @classmethod
    def build(cls, shape: Sequence[int], names: Sequence[AxisName]) -> Self:
        """Freeze one shape/names pair, checking they stay aligned."""
        frozen_shape = tuple(shape)
        frozen_names = tuple(names)
        if len(frozen_shape) != len(frozen_names):
            raise ValueError(
                f"names {frozen_names!r} are not aligned with shape {frozen_shape!r}"
            )
        return cls(frozen_shape, frozen_names)

    @property
    def rank(self) -> int:
        """Return number of axes."""
        return len(self.shape)


__all__ = [
    "AxisName",
    "AxisRef",
    "EdgePadding",
    "NamedShape",
    "Names",
    "PaddingEntry",
    "Shape",
]
