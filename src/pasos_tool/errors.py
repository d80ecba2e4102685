"""Errores tipados del parser y de la calculadora."""

from __future__ import annotations

from collections.abc import Sequence


class RecordError(ValueError):
    """Base error for a rejected activity record.

    Attributes:
        field: Name of the offending field or parameter.
        value: Raw value that was rejected.
        expected: Human-readable description of the constraint.
    """

    def __init__(self, field: str, value: object, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"{field} = {value!r}, expected {expected}")


class MalformedRecord(RecordError):
    """Field count after splitting does not match the record arity."""

    def __init__(self, record: str, fields: Sequence[str], arity: int) -> None:
        self.fields = list(fields)
        self.arity = arity
        super().__init__(
            "record",
            record,
            f"{arity} comma-separated fields, got {len(self.fields)}",
        )


class InvalidNumber(RecordError):
    """Steps field is not a base-10 integer literal."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(field, value, "a base-10 integer")


class InvalidDuration(RecordError):
    """Duration field does not follow the duration literal grammar."""

    def __init__(self, value: str) -> None:
        super().__init__("duration", value, "a duration literal such as '3h00m'")


class EmptyField(RecordError):
    """A required text field is blank after trimming."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(field, value, "a non-empty value")


class OutOfRange(RecordError):
    """Well-formed numeric field that is not strictly positive."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(field, value, "a value greater than zero")


class UnknownActivity(RecordError):
    """Activity label is well-formed but not a recognized activity type."""

    def __init__(self, label: str, recognized: Sequence[str]) -> None:
        self.label = label
        self.recognized = list(recognized)
        super().__init__("activity", label, f"one of {self.recognized}")
