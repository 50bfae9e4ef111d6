from .names import duplicate_names, merge_names, named_axes
from .normalize import normalize_axes, normalize_axis

__all__ = [
    "duplicate_names",
    "merge_names",
    "named_axes",
    "normalize_axes",
    "normalize_axis",
]
