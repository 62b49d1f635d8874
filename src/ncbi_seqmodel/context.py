"""Decode context for tracking state while reading a document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ncbi_seqmodel.errors import DecodeIssue, IssueSeverity, IssueType, SchemaViolation

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256
DEFAULT_CHUNK_SIZE = 64 * 1024


def local_name(tag: str) -> str:
    """Strip a Clark-notation namespace from an element tag."""
    if tag.startswith("{"):
        return tag.split("}")[-1]
    return tag


class DecodeStack:
    """Stack of open element names from the document root."""

    def __init__(self) -> None:
        self._stack: list[str] = []

    def push(self, name: str) -> None:
        self._stack.append(name)

    def pop(self) -> str | None:
        if self._stack:
            return self._stack.pop()
        return None

    @property
    def current(self) -> str | None:
        return self._stack[-1] if self._stack else None

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def __len__(self) -> int:
        return len(self._stack)


@dataclass
class DecodeContext:
    """Options and per-call state for one decode.

    Tracks:
    - Strictness and resource limits
    - Element traversal stack
    - Non-fatal issues found so far
    """

    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    chunk_size: int = DEFAULT_CHUNK_SIZE
    issues: list[DecodeIssue] = field(default_factory=list)
    _stack: DecodeStack = field(default_factory=DecodeStack)

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @property
    def path(self) -> tuple[str, ...]:
        return self._stack.path

    @property
    def depth(self) -> int:
        return self._stack.depth

    def push_element(self, tag: str) -> None:
        """Enter an element.

        Raises:
            SchemaViolation: If nesting exceeds ``max_depth``.
        """
        self._stack.push(local_name(tag))
        if self._stack.depth > self.max_depth:
            raise SchemaViolation(
                f"Nesting depth exceeds the limit of {self.max_depth} elements",
                self._stack.path,
            )

    def pop_element(self) -> None:
        self._stack.pop()

    def add_issue(
        self,
        issue_type: IssueType,
        description: str,
        node: str | None = None,
        severity: IssueSeverity = IssueSeverity.WARNING,
    ) -> None:
        """Record a non-fatal issue at the current path and log it."""
        issue = DecodeIssue(
            issue_type=issue_type,
            description=description,
            path=self.path,
            node=node,
            severity=severity,
        )
        self.issues.append(issue)
        level = logging.WARNING if severity == IssueSeverity.WARNING else logging.INFO
        logger.log(level, "%s: %s", issue.path_str, description)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == IssueSeverity.WARNING)

    def reset(self) -> None:
        """Clear per-call state, keeping the options."""
        self.issues = []
        self._stack = DecodeStack()


class ElementScope:
    """Context manager for element traversal."""

    def __init__(self, context: DecodeContext, tag: str):
        self._context = context
        self._tag = tag

    def __enter__(self) -> ElementScope:
        self._context.push_element(self._tag)
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        # an error keeps the stack so its path can still be reported
        if exc_type is None:
            self._context.pop_element()
