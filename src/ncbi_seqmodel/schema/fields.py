"""Wire descriptors for model fields.

Each dataclass field of a model type carries a ``FieldSpec`` in its
metadata. The spec says which child element holds the field and how the
element content maps to a Python value:

- leaves: ``<Seq-interval_from>10</Seq-interval_from>``
- enums: ``<Seq-inst_mol value="dna"/>``, optionally wrapped in the named
  type: ``<Seq-interval_strand><Na-strand value="plus"/></Seq-interval_strand>``
- nodes: ``<Seq-interval_id><Seq-id>...</Seq-id></Seq-interval_id>``
- node lists: ``<Bioseq_id><Seq-id/>...</Bioseq_id>``, optionally with a
  container type: ``<Bioseq_descr><Seq-descr><Seqdesc/>...</Seq-descr></Bioseq_descr>``
- leaf lists: ``<Int-fuzz_alt><Int-fuzz_alt_E>3</Int-fuzz_alt_E></Int-fuzz_alt>``
"""

from __future__ import annotations

import dataclasses
from dataclasses import MISSING, dataclass
from enum import Enum
from typing import Any

from ncbi_seqmodel.schema.enums import EnumTable, FlagTable
from ncbi_seqmodel.schema.types import LeafKind

WIRE_KEY = "wire"


class FieldKind(Enum):
    """Shapes of field content."""

    LEAF = "leaf"
    ENUM = "enum"
    FLAGS = "flags"
    NODE = "node"
    NODE_LIST = "node_list"
    LEAF_LIST = "leaf_list"
    ENUM_LIST = "enum_list"

    @property
    def is_list(self) -> bool:
        return self in (FieldKind.NODE_LIST, FieldKind.LEAF_LIST, FieldKind.ENUM_LIST)


@dataclass(frozen=True)
class FieldSpec:
    """How one model field is laid out on the wire."""

    tag: str
    kind: FieldKind
    leaf: LeafKind | None = None
    table: EnumTable | FlagTable | None = None
    target: str | None = None  # model class name for nodes
    wrapper: str | None = None  # element between the field tag and content
    item_tag: str | None = None  # element per item in leaf lists
    inline: bool = False  # anonymous type: the field element is the node element
    name: str = ""  # Python attribute, filled in when the type is registered
    required: bool = False

    @property
    def is_list(self) -> bool:
        return self.kind.is_list

    def describe(self) -> str:
        return f"{self.tag} ({self.kind.value})"


def _field(spec: FieldSpec, default: Any, optional: bool) -> Any:
    metadata = {WIRE_KEY: spec}
    if default is not MISSING:
        return dataclasses.field(default=default, metadata=metadata)
    if optional:
        return dataclasses.field(default=None, metadata=metadata)
    return dataclasses.field(metadata=metadata)


def string(tag: str, *, optional: bool = False, default: Any = MISSING, wrapper: str | None = None) -> Any:
    return _field(FieldSpec(tag, FieldKind.LEAF, leaf=LeafKind.STRING, wrapper=wrapper), default, optional)


def integer(tag: str, *, optional: bool = False, default: Any = MISSING, wrapper: str | None = None) -> Any:
    return _field(FieldSpec(tag, FieldKind.LEAF, leaf=LeafKind.INTEGER, wrapper=wrapper), default, optional)


def real(tag: str, *, optional: bool = False, default: Any = MISSING) -> Any:
    return _field(FieldSpec(tag, FieldKind.LEAF, leaf=LeafKind.REAL), default, optional)


def boolean(tag: str, *, optional: bool = False, default: Any = MISSING) -> Any:
    return _field(FieldSpec(tag, FieldKind.LEAF, leaf=LeafKind.BOOLEAN), default, optional)


def null(tag: str) -> Any:
    """A NULL field: True when the element is present, None otherwise."""
    return _field(FieldSpec(tag, FieldKind.LEAF, leaf=LeafKind.NULL), MISSING, True)


def octets(tag: str, *, wrapper: str | None = None, optional: bool = False) -> Any:
    return _field(FieldSpec(tag, FieldKind.LEAF, leaf=LeafKind.OCTETS, wrapper=wrapper), MISSING, optional)


def enum(
    tag: str,
    table: EnumTable,
    *,
    optional: bool = False,
    default: Any = MISSING,
    wrapped: bool = False,
) -> Any:
    """An enumeration field; ``wrapped`` adds the named-type element."""
    wrapper = table.asn_name if wrapped else None
    return _field(FieldSpec(tag, FieldKind.ENUM, table=table, wrapper=wrapper), default, optional)


def enums(tag: str, table: EnumTable, *, optional: bool = False, item_tag: str | None = None) -> Any:
    """A SEQUENCE OF enumerations, one element per item.

    Items of a named type use the type name as their tag; anonymous item
    types give ``item_tag``, e.g. ``Variation-ref_method_E``.
    """
    spec = FieldSpec(tag, FieldKind.ENUM_LIST, table=table, item_tag=item_tag or table.asn_name)
    return _field(spec, MISSING, optional)


def flags(tag: str, table: FlagTable, *, optional: bool = False, default: Any = MISSING) -> Any:
    return _field(FieldSpec(tag, FieldKind.FLAGS, leaf=LeafKind.INTEGER, table=table), default, optional)


def node(tag: str, target: str, *, optional: bool = False, inline: bool = False) -> Any:
    """A nested record or choice.

    ``inline`` marks anonymous ASN.1 types such as ``Int-fuzz.range``, whose
    members sit directly under the field element.
    """
    return _field(FieldSpec(tag, FieldKind.NODE, target=target, inline=inline), MISSING, optional)


def nodes(tag: str, target: str, *, optional: bool = False, wrapper: str | None = None) -> Any:
    return _field(FieldSpec(tag, FieldKind.NODE_LIST, target=target, wrapper=wrapper), MISSING, optional)


def values(
    tag: str,
    kind: LeafKind = LeafKind.STRING,
    *,
    optional: bool = False,
    item_tag: str | None = None,
) -> Any:
    """A SEQUENCE OF primitives; items default to ``<tag>_E`` elements."""
    spec = FieldSpec(tag, FieldKind.LEAF_LIST, leaf=kind, item_tag=item_tag or f"{tag}_E")
    return _field(spec, MISSING, optional)


def spec_of(field: dataclasses.Field) -> FieldSpec | None:
    return field.metadata.get(WIRE_KEY)
