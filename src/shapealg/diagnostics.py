import operator
from enum import Enum
from typing import Literal, TypeAlias

DiagnosticSeverity: TypeAlias = Literal["error"]
DiagnosticScalar: TypeAlias = str | int | bool
DiagnosticValue: TypeAlias = DiagnosticScalar | tuple[int | str | None, ...]


class ErrorCode(str, Enum):
    """Canonical shape-operation diagnostic codes."""

    RANK_MISMATCH = "rank_mismatch"
    RANK_EXCEEDED = "rank_exceeded"
    AXIS_OUT_OF_RANGE = "axis_out_of_range"
    UNKNOWN_NAME = "unknown_name"
    NIL_AXIS = "nil_axis"
    DUPLICATE_AXES = "duplicate_axes"
    UNORDERED_AXES = "unordered_axes"
    BROADCAST_INCOMPATIBLE = "broadcast_incompatible"
    NAME_CONFLICT = "name_conflict"
    DIMENSION_MISMATCH = "dimension_mismatch"
    DUPLICATE_NAMES = "duplicate_names"
    SQUEEZE_NON_UNIT_DIM = "squeeze_non_unit_dim"
    EMPTY_SLICE = "empty_slice"


class ShapeError(ValueError):
    """Structured base error for shape-operation diagnostics."""

    channel = "error"
    severity: DiagnosticSeverity
    code: str
    external_code: str
    help: str | None
    related: tuple[str, ...]
    data: dict[str, DiagnosticValue]
    message: str

    @staticmethod
    def _normalize_related(related: tuple[str, ...]) -> tuple[str, ...]:
        """Validate related notes."""
        normalized_related: list[str] = []
        for note in related:
            if not isinstance(note, str):
                raise TypeError("related diagnostics must be tuple[str, ...]")
            if not note.strip():
                raise ValueError("related diagnostic note cannot be empty")
            normalized_related.append(note)
        return tuple(normalized_related)

    @staticmethod
    def _normalize_item(item: object) -> int | str | None:
        """Freeze one sequence entry; integer-like dims become plain int."""
        if item is None or isinstance(item, str):
            return item
        try:
            return operator.index(item)
        except TypeError as exc:
            raise TypeError(
                "diagnostic data sequences must hold int, str, or None"
            ) from exc

    @classmethod
    def _normalize_value(cls, value: object) -> DiagnosticValue:
        """Validate one payload value, freezing sequences to tuples."""
        if isinstance(value, str | bool):
            return value
        if isinstance(value, tuple | list):
            return tuple(cls._normalize_item(item) for item in value)
        try:
            return operator.index(value)
        except TypeError as exc:
            raise TypeError(
                "diagnostic data values must be str, int, bool, or tuple entries"
            ) from exc

    @classmethod
    def _normalize_data(cls, data: dict[str, object]) -> dict[str, DiagnosticValue]:
        """Validate and copy diagnostic payload data."""
        normalized_data: dict[str, DiagnosticValue] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise TypeError("diagnostic data keys must be strings")
            normalized_data[key] = cls._normalize_value(value)
        return normalized_data

    def __init__(
        self,
        *,
        code: ErrorCode,
        message: str,
        help: str | None = None,
        related: tuple[str, ...] = (),
        data: dict[str, object] | None = None,
    ) -> None:
        """Build one structured shape error."""
        if not isinstance(code, ErrorCode):
            raise TypeError("diagnostic code must be an ErrorCode")
        if not isinstance(message, str):
            raise TypeError("diagnostic message must be a string")
        if not message.strip():
            raise ValueError("diagnostic message cannot be empty")
        if help is not None and not isinstance(help, str):
            raise TypeError("diagnostic help must be a string or None")

        payload_data = {} if data is None else data
        self.code = code.value
        self.external_code = code.value.upper()
        self.severity = "error"
        self.help = help
        self.related = self._normalize_related(related)
        self.data = self._normalize_data(payload_data)
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> ErrorCode:
        """Return the code as its `ErrorCode` member."""
        return ErrorCode(self.code)


class ShapeValidationError(ShapeError):
    """Invalid shape operation."""

    channel = "validation_error"


__all__ = ["ErrorCode", "ShapeError", "ShapeValidationError"]
