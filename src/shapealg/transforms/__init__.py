from .pad import pad
from .permute import transpose, transpose_axes
from .slicing import slice_shape
from .squeeze import squeeze, squeeze_axes

__all__ = [
    "pad",
    "slice_shape",
    "squeeze",
    "squeeze_axes",
    "transpose",
    "transpose_axes",
]
