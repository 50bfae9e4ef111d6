import logging
from dataclasses import dataclass

from .diagnostics import ErrorCode, ShapeValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OpPolicy:
    """Canonical diagnostic policy for one shape operation."""

    op_name: str
    related: tuple[str, ...] = ()
    help: str | None = None

    def error(
        self,
        *,
        code: ErrorCode,
        message: str,
        help: str | None = None,
        data: dict[str, object] | None = None,
    ) -> ShapeValidationError:
        """Build one validation error tagged with this operation."""
        payload: dict[str, object] = {"operation": self.op_name}
        if data is not None:
            payload.update(data)
        logger.debug("rejected %s (%s): %s", self.op_name, code.value, message)
        return ShapeValidationError(
            code=code,
            message=message,
            help=self.help if help is None else help,
            related=self.related,
            data=payload,
        )


_POLICIES_BY_OP = {
    "named_axes": OpPolicy(
        "named_axes",
        related=("axis names",),
        help="give every dimension a name or None",
    ),
    "normalize_axis": OpPolicy(
        "normalize_axis",
        related=("axis normalization",),
    ),
    "normalize_axes": OpPolicy(
        "normalize_axes",
        related=("axis normalization",),
        help="pass each axis at most once",
    ),
    "merge_names": OpPolicy(
        "merge_names",
        related=("name merge",),
        help="rename one of the tensors so aligned axes agree",
    ),
    "broadcast_check": OpPolicy(
        "broadcast_check",
        related=("broadcast axes mapping",),
        help="each source dimension must be 1 or equal its target dimension",
    ),
    "default_broadcast_axes": OpPolicy(
        "default_broadcast_axes",
        related=("broadcast axes mapping",),
    ),
    "binary_broadcast": OpPolicy(
        "binary_broadcast",
        related=("binary broadcast", "right-aligned dimensions"),
        help="aligned dimensions must be equal or 1",
    ),
    "zip_reduce": OpPolicy(
        "zip_reduce",
        related=("dot/zip contraction",),
    ),
    "transpose": OpPolicy(
        "transpose",
        related=("transpose permutation",),
        help="pass one source axis per output position",
    ),
    "squeeze": OpPolicy(
        "squeeze",
        related=("squeeze axes",),
        help="only axes of size 1 can be squeezed",
    ),
    "pad": OpPolicy(
        "pad",
        related=("padding configuration",),
        help="pass one (low, high, interior) entry per axis",
    ),
    "slice_shape": OpPolicy(
        "slice_shape",
        related=("slice indices",),
        help="limit indices must be greater than start indices",
    ),
    "window": OpPolicy(
        "window",
        related=("window dimensions",),
    ),
    "conv": OpPolicy(
        "conv",
        related=("convolution shape",),
    ),
}


def resolve_op_policy(op_name: str, /) -> OpPolicy:
    """Resolve canonical operation policy by name."""
    return _POLICIES_BY_OP[op_name]


__all__ = ["OpPolicy", "resolve_op_policy"]
