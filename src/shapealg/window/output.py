from collections.abc import Sequence

from ..tensor_types import EdgePadding, Shape
from .validate import validate_strides, validate_window


def window_output_shape(
    shape: Sequence[int],
    window: Sequence[int],
    strides: Sequence[int],
) -> Shape:
    """Return the output shape of a sliding-window reduction.

    Each axis yields `(dim - window) // stride + 1` positions, never fewer
    than one.
    """
    validate_window(shape, window)
    validate_strides(shape, strides)
    return tuple(
        max((dim - extent) // step + 1, 1)
        for dim, extent, step in zip(shape, window, strides)
    )


def same_padding(
    shape: Sequence[int],
    window: Sequence[int],
    strides: Sequence[int] | None = None,
) -> list[EdgePadding]:
    """Return `(low, high)` edge padding that keeps `ceil(dim / stride)` outputs.

    Without `strides` every stride is 1, so each axis is padded by
    `window - 1` in total. Odd totals put the extra element on the high side.
    """
    validate_window(shape, window)
    if strides is None:
        strides = (1,) * len(shape)
    else:
        validate_strides(shape, strides)

    padding: list[EdgePadding] = []
    for dim, extent, step in zip(shape, window, strides):
        output_dim = -(-dim // step)
        total = max((output_dim - 1) * step + extent - dim, 0)
        padding.append((total // 2, total - total // 2))
    return padding


__all__ = ["same_padding", "window_output_shape"]
