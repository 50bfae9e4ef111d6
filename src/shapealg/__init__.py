from .axis import merge_names, named_axes, normalize_axes, normalize_axis
from .broadcast import binary_broadcast, broadcast_check, default_broadcast_axes
from .contraction import contract, zip_reduce
from .diagnostics import ErrorCode, ShapeError, ShapeValidationError
from .tensor_types import AxisName, AxisRef, NamedShape, Names, PaddingEntry, Shape
from .transforms import (
    pad,
    slice_shape,
    squeeze,
    squeeze_axes,
    transpose,
    transpose_axes,
)
from .window import (
    conv_output_shape,
    same_padding,
    validate_strides,
    validate_window,
    window_output_shape,
)

__all__ = [
    "AxisName",
    "AxisRef",
    "ErrorCode",
    "NamedShape",
    "Names",
    "PaddingEntry",
    "Shape",
    "ShapeError",
    "ShapeValidationError",
    "binary_broadcast",
    "broadcast_check",
    "contract",
    "conv_output_shape",
    "default_broadcast_axes",
    "merge_names",
    "named_axes",
    "normalize_axes",
    "normalize_axis",
    "pad",
    "same_padding",
    "slice_shape",
    "squeeze",
    "squeeze_axes",
    "transpose",
    "transpose_axes",
    "validate_strides",
    "validate_window",
    "window_output_shape",
    "zip_reduce",
]
