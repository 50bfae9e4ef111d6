from collections.abc import Sequence

from ..axis import named_axes
from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy
from ..tensor_types import AxisName, EdgePadding, NamedShape
from ..transforms import pad


def conv_output_shape(
    input_shape: Sequence[int],
    input_names: Sequence[AxisName],
    kernel_shape: Sequence[int],
    strides: Sequence[int],
    padding: Sequence[EdgePadding],
) -> NamedShape:
    """Return the output shape of a convolution with resolved edge padding.

    `input_shape` is `(batch, in_channels, *spatial)` and `kernel_shape` is
    `(out_channels, in_channels, *filter)`. Only spatial axes are padded.
    Names are passed through from the input as-is; they are not remapped
    for the batch or output-channel axes.
    """
    policy = resolve_op_policy("conv")
    input_shape = tuple(input_shape)
    kernel_shape = tuple(kernel_shape)
    names = named_axes(input_names, input_shape)
    spatial_rank = len(input_shape) - 2

    if len(input_shape) < 2 or len(kernel_shape) != len(input_shape):
        raise policy.error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                f"invalid kernel dimensions {kernel_shape} for input of dimensions "
                f"{input_shape}, both need batch/channel axes and the same rank"
            ),
            data={"input_shape": input_shape, "kernel_shape": kernel_shape},
        )
    for kind, values in (("stride", strides), ("padding", padding)):
        if len(values) != spatial_rank:
            raise policy.error(
                code=ErrorCode.RANK_MISMATCH,
                message=(
                    f"invalid {kind} dimensions, convolution has {spatial_rank} "
                    f"spatial axes but got {len(values)} {kind} entries"
                ),
                data={"kind": kind, "spatial_rank": spatial_rank, "got": len(values)},
            )

    padding_config = [(0, 0, 0), (0, 0, 0)]
    padding_config.extend((low, high, 0) for low, high in padding)
    padded_spatial = pad(input_shape, padding_config)[2:]

    output_spatial = [
        (dim - extent) // step + 1
        for dim, extent, step in zip(padded_spatial, kernel_shape[2:], strides)
    ]
    return NamedShape.build(
        [input_shape[0], kernel_shape[0], *output_spatial],
        names,
    )


__all__ = ["conv_output_shape"]
