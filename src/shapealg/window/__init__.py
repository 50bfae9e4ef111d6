from .conv import conv_output_shape
from .output import same_padding, window_output_shape
from .validate import validate_strides, validate_window

__all__ = [
    "conv_output_shape",
    "same_padding",
    "validate_strides",
    "validate_window",
    "window_output_shape",
]
