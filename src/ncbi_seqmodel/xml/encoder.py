"""Incremental encoder from model trees to NCBI XML."""

from __future__ import annotations

import io
import logging
import os
from os import PathLike
from typing import IO, Any, Union

from lxml import etree

from ncbi_seqmodel.errors import SchemaViolation
from ncbi_seqmodel.model import Record, SeqEntry
from ncbi_seqmodel.schema.dispatch import fields_of
from ncbi_seqmodel.schema.enums import EnumTable, FlagTable, UnknownCode
from ncbi_seqmodel.schema.fields import FieldKind, FieldSpec
from ncbi_seqmodel.schema.types import LeafKind, get_leaf_codec
from ncbi_seqmodel.validator import validate

logger = logging.getLogger(__name__)

Target = Union[str, PathLike, IO[bytes]]


class Encoder:
    """Writes model trees as NCBI XML.

    A ``SeqEntry`` holding a set is written with a ``Bioseq-set`` root, the
    form efetch publishes; any other object is written under its own tag.
    """

    def __init__(self, validate_first: bool = True, pretty_print: bool = False):
        """Initialize the encoder.

        Args:
            validate_first: Run ``validate`` on the tree before writing.
            pretty_print: Indent the output.
        """
        self.validate_first = validate_first
        self.pretty_print = pretty_print
        self._path: list[str] = []

    def encode(self, obj: Record) -> bytes:
        buffer = io.BytesIO()
        self.encode_to(obj, buffer)
        return buffer.getvalue()

    def encode_to(self, obj: Record, target: Target) -> None:
        """Write ``obj`` to a path or binary stream.

        Raises:
            SchemaViolation: If the tree is invalid or holds text that
                cannot be represented in XML.
        """
        if self.validate_first:
            validate(obj)
        if isinstance(obj, SeqEntry) and obj.set is not None:
            obj = obj.set
        self._path = []
        if isinstance(target, PathLike):
            target = os.fspath(target)
        try:
            with etree.xmlfile(target, encoding="UTF-8") as xf:
                xf.write_declaration()
                self._write_node(xf, obj)
        except RecursionError:
            raise SchemaViolation(
                f"Nesting depth {len(self._path)} exceeds the interpreter recursion limit",
                tuple(self._path),
            ) from None
        logger.debug("Encoded %s", obj.TAG)

    def _write(self, xf: Any, element: etree._Element) -> None:
        xf.write(element, pretty_print=self.pretty_print)

    def _write_node(self, xf: Any, obj: Record) -> None:
        self._path.append(obj.TAG)
        with xf.element(obj.TAG):
            self._write_fields(xf, obj)
        self._path.pop()

    def _write_fields(self, xf: Any, obj: Record) -> None:
        for spec in fields_of(type(obj)):
            value = getattr(obj, spec.name)
            if value is None:
                continue
            self._path.append(spec.tag)
            self._write_field(xf, spec, value)
            self._path.pop()

    def _write_field(self, xf: Any, spec: FieldSpec, value: Any) -> None:
        kind = spec.kind
        if kind == FieldKind.NODE:
            with xf.element(spec.tag):
                if spec.inline:
                    self._write_fields(xf, value)
                else:
                    self._write_node(xf, value)
        elif kind == FieldKind.NODE_LIST:
            with xf.element(spec.tag):
                if spec.wrapper is None:
                    for item in value:
                        self._write_node(xf, item)
                else:
                    with xf.element(spec.wrapper):
                        for item in value:
                            self._write_node(xf, item)
        elif kind == FieldKind.LEAF_LIST:
            with xf.element(spec.tag):
                for item in value:
                    self._write(xf, self._leaf(spec.item_tag, spec.leaf, item))
        elif kind == FieldKind.ENUM_LIST:
            with xf.element(spec.tag):
                for item in value:
                    self._write(xf, self._enum(spec.item_tag, spec.table, item))
        elif spec.wrapper is not None:
            with xf.element(spec.tag):
                self._write(xf, self._value(spec.wrapper, spec, value))
        else:
            self._write(xf, self._value(spec.tag, spec, value))

    def _value(self, tag: str, spec: FieldSpec, value: Any) -> etree._Element:
        if spec.kind == FieldKind.ENUM:
            return self._enum(tag, spec.table, value)
        if spec.kind == FieldKind.FLAGS:
            return self._flags(tag, spec.table, value)
        return self._leaf(tag, spec.leaf, value)

    def _leaf(self, tag: str, kind: LeafKind, value: Any) -> etree._Element:
        element = etree.Element(tag)
        codec = get_leaf_codec(kind)
        try:
            if kind == LeafKind.BOOLEAN:
                element.set("value", codec.format(value))
            elif kind != LeafKind.NULL:
                element.text = codec.format(value)
        except ValueError as exc:
            # lxml rejects control characters
            raise SchemaViolation(f"Cannot encode '{tag}': {exc}", tuple(self._path)) from exc
        return element

    def _enum(self, tag: str, table: EnumTable, value: Any) -> etree._Element:
        element = etree.Element(tag)
        name = table.wire_name(value)
        code = table.encode(value)
        if name is not None:
            element.set("value", name)
        if code is not None and (table.integer_valued or name is None or isinstance(value, UnknownCode)):
            element.text = str(code)
        return element

    def _flags(self, tag: str, table: FlagTable, value: Any) -> etree._Element:
        element = etree.Element(tag)
        name = table.wire_name(value)
        if name is not None:
            element.set("value", name)
        element.text = str(table.encode(value))
        return element


def encode(entry: Record, *, pretty_print: bool = False) -> bytes:
    """Encode a tree as NCBI XML bytes."""
    return Encoder(pretty_print=pretty_print).encode(entry)


def encode_to(entry: Record, target: Target, *, pretty_print: bool = False) -> None:
    """Encode a tree to a path or binary stream."""
    Encoder(pretty_print=pretty_print).encode_to(entry, target)
