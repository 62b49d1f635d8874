"""Base classes for model records and choices."""

from __future__ import annotations

from typing import Any, ClassVar

from ncbi_seqmodel.errors import SchemaViolation
from ncbi_seqmodel.schema.dispatch import arm_name, field_table, fields_of


class Record:
    """Base class for SEQUENCE types.

    Subclasses are frozen keyword-only dataclasses. Repeated fields given
    as lists are stored as tuples, and a mandatory field set to None fails
    construction.
    """

    TAG: ClassVar[str] = ""

    def __post_init__(self) -> None:
        for spec in fields_of(type(self)):
            value = getattr(self, spec.name)
            if isinstance(value, list):
                object.__setattr__(self, spec.name, tuple(value))
            elif value is None and spec.required:
                raise SchemaViolation(f"Mandatory field '{spec.tag}' is missing", (self.TAG,))
        self._check()

    def _check(self) -> None:
        """Type-specific construction checks."""

    def present_fields(self) -> dict[str, Any]:
        """Fields that are set, keyed by attribute name."""
        return {
            spec.name: getattr(self, spec.name)
            for spec in fields_of(type(self))
            if getattr(self, spec.name) is not None
        }


class Choice(Record):
    """Base class for CHOICE types: exactly one arm must be set."""

    def __post_init__(self) -> None:
        populated = []
        for spec in fields_of(type(self)):
            value = getattr(self, spec.name)
            if isinstance(value, list):
                object.__setattr__(self, spec.name, tuple(value))
            if value is not None:
                populated.append(spec.tag)
        if not populated:
            raise SchemaViolation(f"{self.TAG}: no variant is set", (self.TAG,))
        if len(populated) > 1:
            raise SchemaViolation(
                f"{self.TAG}: conflicting variants {', '.join(populated)}",
                (self.TAG,),
            )
        self._check()

    @property
    def arm(self) -> str:
        """Python attribute name of the populated arm."""
        for spec in fields_of(type(self)):
            if getattr(self, spec.name) is not None:
                return spec.name
        raise AssertionError("choice without a populated arm")

    @property
    def variant(self) -> str:
        """Wire name of the populated arm, e.g. ``genbank``."""
        return arm_name(type(self), field_table(type(self))[self.arm])

    @property
    def value(self) -> Any:
        return getattr(self, self.arm)
