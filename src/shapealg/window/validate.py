from collections.abc import Sequence

from ..diagnostics import ErrorCode
from ..policy import resolve_op_policy


def _validate_rank(shape: Sequence[int], values: Sequence[int], *, kind: str) -> None:
    """Require one window-like entry per axis of `shape`."""
    if len(values) != len(shape):
        raise resolve_op_policy("window").error(
            code=ErrorCode.RANK_MISMATCH,
            message=(
                f"invalid {kind} dimensions, rank of shape ({len(shape)}) does not "
                f"match rank of {kind} ({len(values)})"
            ),
            help=f"pass one {kind} entry per axis",
            data={"kind": kind, "rank": len(shape), kind: tuple(values)},
        )
    for value in values:
        if value <= 0:
            raise ValueError(f"{kind} entries must be positive, got {tuple(values)}")


def validate_window(shape: Sequence[int], window: Sequence[int]) -> None:
    """Validate that `window` has one positive extent per axis."""
    _validate_rank(shape, window, kind="window")


def validate_strides(shape: Sequence[int], strides: Sequence[int]) -> None:
    """Validate that `strides` has one positive step per axis."""
    _validate_rank(shape, strides, kind="stride")


__all__ = ["validate_strides", "validate_window"]
