"""Error types raised and recorded while decoding, encoding and validating."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class IssueType(Enum):
    """Kinds of non-fatal events recorded during decoding."""

    UNKNOWN_ENUM_CODE = "unknown_enum_code"  # code/name outside the known table
    SKIPPED_VARIANT = "skipped_variant"  # unrecognized tag skipped (lenient)
    NUMERIC_FORMAT = "numeric_format"  # optional numeric leaf dropped
    DROPPED_CHOICE = "dropped_choice"  # choice left empty by skipped arms


class IssueSeverity(Enum):
    """Severity levels for recorded issues."""

    WARNING = "warning"  # data was dropped or could not be normalized
    INFO = "info"  # data was preserved in a degraded form


@dataclass
class DecodeIssue:
    """A non-fatal event found while decoding a document."""

    issue_type: IssueType
    description: str
    path: tuple[str, ...] = ()
    node: str | None = None  # element tag involved
    severity: IssueSeverity = IssueSeverity.WARNING

    @property
    def path_str(self) -> str:
        return "/".join(self.path)

    def __str__(self) -> str:
        return f"[{self.issue_type.value}] {self.path_str}: {self.description}"


def schema_path_of(path: tuple[str, ...]) -> str:
    """Reduce an element path to its type elements.

    NCBI field and arm elements are named ``Type_member``; type elements
    carry no underscore.
    """
    return "/".join(name for name in path if "_" not in name)


class SeqModelError(Exception):
    """Base class for all errors raised by ncbi_seqmodel."""

    def __init__(self, message: str, path: tuple[str, ...] | list[str] = ()):
        super().__init__(message)
        self.message = message
        self.path: tuple[str, ...] = tuple(path)

    @property
    def path_str(self) -> str:
        return "/".join(self.path)

    @property
    def schema_path(self) -> str:
        return schema_path_of(self.path)

    def with_path(self, path: tuple[str, ...] | list[str]) -> SeqModelError:
        """Attach a document path.

        Errors raised during construction only know their own type tag;
        a longer path from the caller replaces it.
        """
        if len(path) > len(self.path):
            self.path = tuple(path)
        return self

    def __str__(self) -> str:
        if self.path:
            return f"{self.path_str}: {self.message}"
        return self.message


class XmlSyntaxError(SeqModelError):
    """Malformed markup, or the byte source failed while being read."""

    def __init__(
        self,
        message: str,
        path: tuple[str, ...] | list[str] = (),
        offset: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message, path)
        self.offset = offset
        self.line = line
        self.column = column

    @property
    def open_elements(self) -> tuple[str, ...]:
        return self.path

    def __str__(self) -> str:
        where = []
        if self.offset is not None:
            where.append(f"byte {self.offset}")
        if self.line is not None:
            where.append(f"line {self.line}, column {self.column}")
        location = f" ({'; '.join(where)})" if where else ""
        return f"{super().__str__()}{location}"


class SchemaViolation(SeqModelError):
    """A document or record does not satisfy the data model."""


class UnknownVariant(SchemaViolation):
    """An element tag is not recognized within its parent context."""

    def __init__(
        self,
        tag: str,
        context: str,
        path: tuple[str, ...] | list[str] = (),
    ):
        super().__init__(f"Unknown element '{tag}' in {context}", path)
        self.tag = tag
        self.context = context


class NumericFormatError(SeqModelError):
    """Leaf text that cannot be read as the required numeric type."""

    def __init__(
        self,
        text: str,
        expected: str = "integer",
        path: tuple[str, ...] | list[str] = (),
    ):
        super().__init__(f"Invalid {expected} value: '{text}'", path)
        self.text = text
        self.expected = expected


@dataclass
class DecodeReport:
    """Issues collected while decoding a single document."""

    issues: list[DecodeIssue] = field(default_factory=list)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == IssueSeverity.WARNING)

    def of_type(self, issue_type: IssueType) -> list[DecodeIssue]:
        return [i for i in self.issues if i.issue_type == issue_type]
