"""Structural validation of model trees built in code.

Constructors already check arity and mandatory fields, but a tree built
programmatically can still hold values of the wrong type, or share a node
so that it becomes its own ancestor. ``validate`` walks a tree without
going through the codec and reports the first such problem; a
``TreeValidator`` collects all of them.

Example:
    from ncbi_seqmodel import validate

    validate(entry)  # raises SchemaViolation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ncbi_seqmodel.context import DEFAULT_MAX_DEPTH
from ncbi_seqmodel.errors import SchemaViolation, SeqModelError
from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.schema.dispatch import fields_of, resolve
from ncbi_seqmodel.schema.fields import FieldKind, FieldSpec
from ncbi_seqmodel.schema.types import get_leaf_codec


@dataclass
class ValidationResult:
    """Result of validating a tree."""

    errors: list[SchemaViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)


class TreeValidator:
    """Walks a model tree checking it against the field descriptors.

    This validator checks:
    - Mandatory fields are present
    - Leaf, enumeration and node values have the declared types
    - Choices have exactly one variant
    - Type-specific rules such as sequence length against data
    - No node is its own ancestor, and nesting stays within ``max_depth``
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, max_errors: int = 100):
        """Initialize the validator.

        Args:
            max_depth: Maximum nesting of model objects.
            max_errors: Stop after this many errors; 0 means no limit.
        """
        self.max_depth = max_depth
        self.max_errors = max_errors
        self._deepest: list[str] = []

    def validate(self, obj: Record) -> ValidationResult:
        result = ValidationResult()
        if not isinstance(obj, Record):
            result.errors.append(SchemaViolation(f"Not a model object: {type(obj).__name__}"))
            return result
        self._deepest = [obj.TAG]
        try:
            self._walk(obj, [obj.TAG], set(), result)
        except RecursionError:
            result.errors.append(
                SchemaViolation(
                    f"Nesting depth {len(self._deepest)} exceeds the interpreter recursion limit",
                    tuple(self._deepest),
                )
            )
        return result

    def _full(self, result: ValidationResult) -> bool:
        return self.max_errors > 0 and result.error_count >= self.max_errors

    def _error(self, result: ValidationResult, message: str, path: list[str]) -> None:
        if not self._full(result):
            result.errors.append(SchemaViolation(message, tuple(path)))

    def _walk(self, obj: Record, path: list[str], ancestors: set[int], result: ValidationResult) -> None:
        self._deepest = path
        if self._full(result):
            return
        if id(obj) in ancestors:
            self._error(result, f"{obj.TAG} is its own ancestor", path)
            return
        if len(path) > self.max_depth:
            self._error(result, f"Nesting depth exceeds the limit of {self.max_depth}", path)
            return
        ancestors.add(id(obj))
        try:
            self._check_fields(obj, path, ancestors, result)
        finally:
            ancestors.discard(id(obj))

    def _check_fields(self, obj: Record, path: list[str], ancestors: set[int], result: ValidationResult) -> None:
        specs = fields_of(type(obj))
        before = result.error_count
        populated = [spec for spec in specs if getattr(obj, spec.name) is not None]
        if isinstance(obj, Choice) and len(populated) != 1:
            self._error(result, f"{obj.TAG}: expected exactly one variant, found {len(populated)}", path)
        for spec in specs:
            value = getattr(obj, spec.name)
            if value is None:
                if spec.required:
                    self._error(result, f"Mandatory field '{spec.tag}' is missing", path)
                continue
            self._check_value(spec, value, path + [spec.tag], ancestors, result)
        # type-specific rules assume well-typed fields
        if result.error_count == before:
            try:
                obj._check()
            except SeqModelError as exc:
                self._error(result, exc.message, path)

    def _check_value(
        self,
        spec: FieldSpec,
        value: Any,
        path: list[str],
        ancestors: set[int],
        result: ValidationResult,
    ) -> None:
        if spec.is_list:
            if not isinstance(value, (tuple, list)):
                self._error(result, f"Field '{spec.tag}' must be a sequence, got {type(value).__name__}", path)
                return
            for item in value:
                self._check_item(spec, item, path, ancestors, result)
        else:
            self._check_item(spec, value, path, ancestors, result)

    def _check_item(
        self,
        spec: FieldSpec,
        value: Any,
        path: list[str],
        ancestors: set[int],
        result: ValidationResult,
    ) -> None:
        kind = spec.kind
        if kind in (FieldKind.NODE, FieldKind.NODE_LIST):
            target = resolve(spec.target)
            if not isinstance(value, target):
                self._error(result, f"Field '{spec.tag}' expects {target.__name__}, got {type(value).__name__}", path)
                return
            node_path = path if spec.inline else path + [target.TAG]
            self._walk(value, node_path, ancestors, result)
        elif kind in (FieldKind.ENUM, FieldKind.ENUM_LIST, FieldKind.FLAGS):
            if not spec.table.accepts(value):
                self._error(result, f"Field '{spec.tag}' has no {spec.table.asn_name} value: {value!r}", path)
        elif not get_leaf_codec(spec.leaf).accepts(value):
            self._error(result, f"Field '{spec.tag}' is not a valid {spec.leaf.value}: {value!r}", path)


def find_violations(obj: Record, max_depth: int = DEFAULT_MAX_DEPTH) -> list[SchemaViolation]:
    """All structural problems in a tree, in document order."""
    return TreeValidator(max_depth=max_depth, max_errors=0).validate(obj).errors


def validate(obj: Record, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Check a tree, raising the first problem found.

    Raises:
        SchemaViolation: With the path to the offending field.
    """
    result = TreeValidator(max_depth=max_depth, max_errors=1).validate(obj)
    if not result.is_valid:
        raise result.errors[0]


def is_valid(obj: Record) -> bool:
    return TreeValidator(max_errors=1).validate(obj).is_valid
