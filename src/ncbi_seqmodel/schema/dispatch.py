"""Tag dispatch for records and choices.

Every model type gets a table mapping child element tags to the field (for
records) or arm (for choices) they populate. Tables are built on first use
and cached for the life of the process; they are never mutated afterwards,
so concurrent readers need no locking.
"""

from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import TYPE_CHECKING, Callable, TypeVar

from ncbi_seqmodel.errors import UnknownVariant
from ncbi_seqmodel.schema.fields import FieldSpec, spec_of

if TYPE_CHECKING:
    from ncbi_seqmodel.model.base import Record

T = TypeVar("T", bound=type)


class TypeRegistry:
    """Registry of model types by class name and by element tag."""

    def __init__(self) -> None:
        self._by_name: dict[str, type] = {}
        self._by_tag: dict[str, type] = {}

    def register(self, cls: type) -> None:
        tag = cls.TAG  # type: ignore[attr-defined]
        existing = self._by_tag.get(tag)
        if existing is not None and existing is not cls:
            raise TypeError(f"Element tag '{tag}' already registered by {existing.__name__}")
        self._by_name[cls.__name__] = cls
        self._by_tag[tag] = cls

    def get(self, name: str) -> type:
        try:
            return self._by_name[name]
        except KeyError:
            raise LookupError(f"Model type '{name}' is not registered") from None

    def get_by_tag(self, tag: str) -> type | None:
        return self._by_tag.get(tag)

    def __iter__(self):
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


MODEL_TYPES = TypeRegistry()


def wire_type(tag: str) -> Callable[[T], T]:
    """Class decorator binding a model dataclass to its element tag."""

    def decorator(cls: T) -> T:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass")
        cls.TAG = tag  # type: ignore[attr-defined]
        MODEL_TYPES.register(cls)
        return cls

    return decorator


def resolve(target: str) -> type[Record]:
    """Resolve a node field target to its model class."""
    return MODEL_TYPES.get(target)  # type: ignore[return-value]


@lru_cache(maxsize=None)
def fields_of(cls: type) -> tuple[FieldSpec, ...]:
    """Field specs of a model type in wire order, with names filled in."""
    specs: list[FieldSpec] = []
    for field in dataclasses.fields(cls):
        spec = spec_of(field)
        if spec is None:
            raise TypeError(f"{cls.__name__}.{field.name} has no wire descriptor")
        required = field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING
        specs.append(dataclasses.replace(spec, name=field.name, required=required))
    return tuple(specs)


@lru_cache(maxsize=None)
def tag_table(cls: type) -> dict[str, FieldSpec]:
    """Child tag to field spec for one model type.

    Raises:
        TypeError: If two fields share a tag or a tag does not belong to
            the type's element namespace (``<Type>_<member>``).
    """
    table: dict[str, FieldSpec] = {}
    prefix = f"{cls.TAG}_"  # type: ignore[attr-defined]
    for spec in fields_of(cls):
        if not spec.tag.startswith(prefix):
            raise TypeError(f"{cls.__name__}.{spec.name}: tag '{spec.tag}' is not under '{prefix}'")
        if spec.tag in table:
            raise TypeError(f"{cls.__name__}: duplicate tag '{spec.tag}'")
        table[spec.tag] = spec
    return table


@lru_cache(maxsize=None)
def field_table(cls: type) -> dict[str, FieldSpec]:
    """Python attribute name to field spec for one model type."""
    return {spec.name: spec for spec in fields_of(cls)}


def dispatch(cls: type, tag: str, path: tuple[str, ...] = ()) -> FieldSpec:
    """Resolve a child element tag within a record or choice.

    Raises:
        UnknownVariant: If the tag is not a field or arm of ``cls``.
    """
    spec = tag_table(cls).get(tag)
    if spec is None:
        raise UnknownVariant(tag, cls.TAG, path)  # type: ignore[attr-defined]
    return spec


def arm_name(cls: type, spec: FieldSpec) -> str:
    """Wire name of a choice arm, e.g. ``named-annot-track``."""
    return spec.tag[len(cls.TAG) + 1:]  # type: ignore[attr-defined]


def check_tables() -> int:
    """Build every table eagerly; returns the number of types checked."""
    for cls in MODEL_TYPES:
        tag_table(cls)
        for spec in fields_of(cls):
            if spec.target is None:
                continue
            target = resolve(spec.target)
            if spec.inline and target.TAG != spec.tag:
                raise TypeError(
                    f"{cls.__name__}.{spec.name}: inline target {target.__name__} "
                    f"must use tag '{spec.tag}'"
                )
    return len(MODEL_TYPES)
