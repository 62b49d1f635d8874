"""Declarative wire schema: leaf codecs, enumeration tables, field descriptors and dispatch."""

from ncbi_seqmodel.schema.dispatch import (
    MODEL_TYPES,
    TypeRegistry,
    check_tables,
    dispatch,
    field_table,
    fields_of,
    resolve,
    tag_table,
    wire_type,
)
from ncbi_seqmodel.schema.enums import (
    EnumTable,
    EnumValue,
    FlagSet,
    FlagTable,
    UnknownCode,
)
from ncbi_seqmodel.schema.fields import FieldKind, FieldSpec
from ncbi_seqmodel.schema.types import (
    LeafCodec,
    LeafKind,
    get_leaf_codec,
    parse_boolean,
    parse_hex,
    parse_integer,
    parse_real,
)

__all__ = [
    # Dispatch
    "MODEL_TYPES",
    "TypeRegistry",
    "check_tables",
    "dispatch",
    "field_table",
    "fields_of",
    "resolve",
    "tag_table",
    "wire_type",
    # Enumerations
    "EnumTable",
    "EnumValue",
    "FlagSet",
    "FlagTable",
    "UnknownCode",
    # Fields
    "FieldKind",
    "FieldSpec",
    # Leaves
    "LeafCodec",
    "LeafKind",
    "get_leaf_codec",
    "parse_boolean",
    "parse_hex",
    "parse_integer",
    "parse_real",
]
