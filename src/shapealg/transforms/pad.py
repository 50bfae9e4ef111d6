from collections.abc import Sequence

from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy
from ..tensor_types import PaddingEntry, Shape


def pad(
    shape: Sequence[int],
    padding_config: Sequence[PaddingEntry],
) -> Shape:
    """Return the shape after edge and interior padding.

    Each axis gets one `(low, high, interior)` entry: `low`/`high` elements
    are added at either edge and `interior` elements between neighbours.
    """
    if len(padding_config) != len(shape):
        raise resolve_op_policy("pad").error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                "invalid padding configuration, rank of padding configuration "
                "and shape must match"
            ),
            data={"rank": len(shape), "config_rank": len(padding_config)},
        )

    padded: list[int] = []
    for size, (low, high, interior) in zip(shape, padding_config):
        padded.append(size + (size - 1) * interior + low + high)
    return tuple(padded)


__all__ = ["pad"]
