"""Streaming decoder from NCBI XML to model trees.

The decoder is a recursive descent over start/end events. Each model type
reads the children of its element through the dispatcher, so the shape of
a type is defined once, by its field descriptors.

Example:
    from ncbi_seqmodel import Decoder

    decoder = Decoder(strict=False)
    entry = decoder.decode("sequences.xml")
    for issue in decoder.issues:
        print(issue)
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, TypeVar

from lxml import etree

from ncbi_seqmodel.context import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_DEPTH,
    DecodeContext,
    ElementScope,
    local_name,
)
from ncbi_seqmodel.errors import (
    DecodeIssue,
    DecodeReport,
    IssueSeverity,
    IssueType,
    NumericFormatError,
    SchemaViolation,
    SeqModelError,
    UnknownVariant,
    XmlSyntaxError,
)
from ncbi_seqmodel.model import BioseqSet, Choice, Record, SeqEntry
from ncbi_seqmodel.schema.dispatch import dispatch, fields_of, resolve
from ncbi_seqmodel.schema.enums import EnumTable, FlagTable, UnknownCode
from ncbi_seqmodel.schema.fields import FieldKind, FieldSpec
from ncbi_seqmodel.schema.types import LeafKind, get_leaf_codec
from ncbi_seqmodel.xml.reader import END, START, EventReader, Source

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


class _Dropped:
    """Marker for a value that was skipped in lenient mode."""

    def __repr__(self) -> str:
        return "DROPPED"


DROPPED = _Dropped()


def _release(element: etree._Element) -> None:
    """Free a fully processed element and its earlier siblings."""
    element.clear()
    parent = element.getparent()
    if parent is not None:
        while element.getprevious() is not None:
            del parent[0]


class Decoder:
    """Decodes NCBI XML documents into frozen model trees.

    In lenient mode (the default) elements the model does not know are
    skipped and recorded in ``issues``; in strict mode they raise
    ``UnknownVariant``.
    """

    def __init__(
        self,
        strict: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """Initialize the decoder.

        Args:
            strict: Raise on unknown elements instead of skipping them.
            max_depth: Maximum element nesting depth.
            chunk_size: Bytes fed to the XML parser per read.
        """
        self._context = DecodeContext(strict=strict, max_depth=max_depth, chunk_size=chunk_size)
        self._events: Iterator[tuple[str, etree._Element]] = iter(())

    @property
    def strict(self) -> bool:
        return self._context.strict

    @property
    def issues(self) -> list[DecodeIssue]:
        """Non-fatal issues recorded during the last decode."""
        return list(self._context.issues)

    @property
    def report(self) -> DecodeReport:
        return DecodeReport(issues=self.issues)

    def decode(self, source: Source) -> SeqEntry:
        """Decode a ``Seq-entry`` or ``Bioseq-set`` document.

        A ``Bioseq-set`` root, the usual form of efetch exports, is wrapped
        as ``SeqEntry(set=...)``.

        Raises:
            XmlSyntaxError: If the markup is malformed or the source fails.
            SchemaViolation: If the document does not fit the model.
        """
        root = self._decode(source, (SeqEntry, BioseqSet))
        if isinstance(root, BioseqSet):
            return SeqEntry(set=root)
        return root

    def decode_as(self, source: Source, cls: type[T]) -> T:
        """Decode a document whose root element is ``cls.TAG``."""
        return self._decode(source, (cls,))

    def _decode(self, source: Source, accepted: tuple[type[Record], ...]) -> Any:
        self._context.reset()
        reader = EventReader(source, chunk_size=self._context.chunk_size)
        self._events = iter(reader)
        try:
            root = self._first_start()
            tag = local_name(root.tag)
            cls = next((c for c in accepted if c.TAG == tag), None)
            if cls is None:
                expected = " or ".join(f"'{c.TAG}'" for c in accepted)
                raise SchemaViolation(f"Unexpected root element '{tag}', expected {expected}", (tag,))
            logger.debug("Decoding %s document", tag)
            with ElementScope(self._context, root.tag):
                value = self._read_type(cls, root)
                if value is DROPPED:
                    raise SchemaViolation(f"Root {tag} has no recognized content", self._context.path)
            for _ in self._events:
                pass
        except RecursionError:
            raise SchemaViolation(
                f"Nesting depth {self._context.depth} exceeds the interpreter recursion limit",
                self._context.path,
            ) from None
        finally:
            close = getattr(self._events, "close", None)
            if close is not None:
                close()
            self._events = iter(())
        logger.debug(
            "Decoded %s with %d issue(s) from %d bytes", tag, len(self._context.issues), reader.offset
        )
        return value

    def _first_start(self) -> etree._Element:
        for event, element in self._events:
            if event == START:
                return element
        raise XmlSyntaxError("Document has no root element", offset=0)

    def _next(self) -> tuple[str, etree._Element]:
        try:
            return next(self._events)
        except StopIteration:
            raise XmlSyntaxError("Unexpected end of document", self._context.path) from None

    def _children(self, element: etree._Element) -> Iterator[etree._Element]:
        """Yield child start elements until ``element`` ends.

        Each child must be read to its end before the next is requested.
        """
        while True:
            event, node = self._next()
            if event == END:
                if node is not element:
                    raise XmlSyntaxError(f"Unbalanced end of '{local_name(node.tag)}'", self._context.path)
                return
            yield node

    def _finish(self, element: etree._Element) -> None:
        """Consume events to the end of ``element``, skipping any content."""
        depth = 1
        while depth:
            event, _ = self._next()
            depth += 1 if event == START else -1

    def _skip(self, element: etree._Element, context: str) -> None:
        """Skip an unknown element, or raise in strict mode."""
        tag = local_name(element.tag)
        if self._context.strict:
            raise UnknownVariant(tag, context, self._context.path + (tag,))
        self._context.add_issue(
            IssueType.SKIPPED_VARIANT,
            f"Skipped unknown element '{tag}' in {context}",
            node=tag,
        )
        self._finish(element)
        _release(element)

    # Records and choices

    def _read_type(self, cls: type[Record], element: etree._Element, droppable: bool = False) -> Any:
        """Read the children of ``element`` as the fields of ``cls``.

        A ``droppable`` record (a list item) whose mandatory field lost all
        its content to skipping is dropped instead of failing.
        """
        is_choice = issubclass(cls, Choice)
        fields: dict[str, Any] = {}
        skipped = False
        lost: str | None = None
        for child in self._children(element):
            tag = local_name(child.tag)
            try:
                spec = dispatch(cls, tag, self._context.path + (tag,))
            except UnknownVariant:
                if self._context.strict:
                    raise
                self._skip(child, cls.TAG)
                skipped = True
                continue
            with ElementScope(self._context, child.tag):
                if is_choice and fields:
                    raise SchemaViolation(
                        f"{cls.TAG}: conflicting variants '{next(iter(fields))}' and '{spec.name}'",
                        self._context.path,
                    )
                if spec.name in fields:
                    raise SchemaViolation(f"Field '{tag}' occurs more than once", self._context.path)
                value = self._read_field(spec, child, required=is_choice or spec.required)
            _release(child)
            if value is DROPPED:
                skipped = True
                if spec.required and not is_choice:
                    lost = tag
                continue
            fields[spec.name] = value
        if is_choice and not fields and skipped:
            self._context.add_issue(
                IssueType.DROPPED_CHOICE,
                f"{cls.TAG} dropped: its only variant was skipped",
                node=cls.TAG,
            )
            return DROPPED
        if lost is not None and droppable:
            self._context.add_issue(
                IssueType.DROPPED_CHOICE,
                f"{cls.TAG} dropped: its mandatory '{lost}' was skipped",
                node=cls.TAG,
            )
            return DROPPED
        # absent mandatory fields fail in the constructor with a SchemaViolation
        for spec in fields_of(cls):
            if spec.required and spec.name not in fields:
                fields[spec.name] = None
        try:
            return cls(**fields)
        except SeqModelError as exc:
            raise exc.with_path(self._context.path) from None

    def _read_field(self, spec: FieldSpec, element: etree._Element, required: bool) -> Any:
        kind = spec.kind
        if kind == FieldKind.NODE:
            return self._read_node(spec, element)
        if kind == FieldKind.NODE_LIST:
            return self._read_node_list(spec, element)
        if spec.wrapper is not None:
            return self._read_wrapped(spec, element, required)
        return self._read_value(spec, element, required)

    def _read_value(self, spec: FieldSpec, element: etree._Element, required: bool) -> Any:
        kind = spec.kind
        if kind == FieldKind.LEAF:
            return self._read_leaf(spec.leaf, element, required)
        if kind == FieldKind.ENUM:
            return self._read_enum(spec.table, element, required)
        if kind == FieldKind.FLAGS:
            return self._read_flags(spec.table, element, required)
        if kind == FieldKind.LEAF_LIST:
            return self._read_leaf_list(spec, element, required)
        if kind == FieldKind.ENUM_LIST:
            return self._read_enum_list(spec, element, required)
        raise AssertionError(f"unhandled field kind {kind}")

    def _read_wrapped(self, spec: FieldSpec, element: etree._Element, required: bool) -> Any:
        """Read a value held in a named-type element inside the field element."""
        value: Any = None
        found = False
        for child in self._children(element):
            if local_name(child.tag) != spec.wrapper or found:
                self._skip(child, spec.tag)
                continue
            with ElementScope(self._context, child.tag):
                value = self._read_value(spec, child, required)
            _release(child)
            found = True
        if not found:
            if required:
                raise SchemaViolation(f"Field '{spec.tag}' has no '{spec.wrapper}' element", self._context.path)
            return DROPPED
        return value

    def _read_node(self, spec: FieldSpec, element: etree._Element) -> Any:
        target = resolve(spec.target)
        if spec.inline:
            return self._read_type(target, element)
        value: Any = None
        found = False
        for child in self._children(element):
            if local_name(child.tag) != target.TAG or found:
                self._skip(child, spec.tag)
                continue
            with ElementScope(self._context, child.tag):
                value = self._read_type(target, child)
            _release(child)
            found = True
        if not found:
            raise SchemaViolation(f"Field '{spec.tag}' has no '{target.TAG}' element", self._context.path)
        return value

    def _read_node_list(self, spec: FieldSpec, element: etree._Element) -> Any:
        if spec.wrapper is None:
            return tuple(self._read_items(spec, element))
        items: list[Any] | None = None
        for child in self._children(element):
            if local_name(child.tag) != spec.wrapper or items is not None:
                self._skip(child, spec.tag)
                continue
            with ElementScope(self._context, child.tag):
                items = list(self._read_items(spec, child))
            _release(child)
        if items is None:
            raise SchemaViolation(f"Field '{spec.tag}' has no '{spec.wrapper}' element", self._context.path)
        return tuple(items)

    def _read_items(self, spec: FieldSpec, container: etree._Element) -> Iterator[Any]:
        target = resolve(spec.target)
        for child in self._children(container):
            if local_name(child.tag) != target.TAG:
                self._skip(child, local_name(container.tag))
                continue
            with ElementScope(self._context, child.tag):
                value = self._read_type(target, child, droppable=True)
            _release(child)
            if value is not DROPPED:
                yield value

    # Leaves

    def _text(self, element: etree._Element) -> str | None:
        """Element text once the element has ended."""
        for child in self._children(element):
            self._skip(child, local_name(element.tag))
        return element.text

    def _read_leaf(self, kind: LeafKind, element: etree._Element, required: bool) -> Any:
        if kind == LeafKind.BOOLEAN:
            text = element.get("value")
            if text is None:
                text = self._text(element)
            else:
                self._text(element)
        else:
            text = self._text(element)
        return self._parse_leaf(kind, text, required)

    def _parse_leaf(self, kind: LeafKind, text: str | None, required: bool) -> Any:
        codec = get_leaf_codec(kind)
        tag = self._context.path[-1] if self._context.path else ""
        try:
            value = codec.parse(text, self._context.path)
        except NumericFormatError as exc:
            if required:
                raise SchemaViolation(
                    f"Mandatory field '{tag}' is not a valid {exc.expected}: '{exc.text}'",
                    self._context.path,
                ) from exc
            self._context.add_issue(
                IssueType.NUMERIC_FORMAT,
                f"Dropped invalid {exc.expected} value '{exc.text}'",
                node=tag,
            )
            return DROPPED
        if value is None:
            if required:
                raise SchemaViolation(f"Mandatory field '{tag}' is empty", self._context.path)
            return DROPPED
        return value

    def _read_code(self, element: etree._Element, required: bool) -> Any:
        """Integer content of an enumeration element; None when there is none."""
        text = self._text(element)
        if text is None or not text.strip():
            return None
        return self._parse_leaf(LeafKind.INTEGER, text, required)

    def _read_enum(self, table: EnumTable, element: etree._Element, required: bool) -> Any:
        name = element.get("value")
        code = self._read_code(element, required)
        if code is DROPPED:
            return DROPPED
        if name is None and code is None:
            if required:
                raise SchemaViolation(
                    f"Enumeration {table.asn_name} has neither a name nor a code", self._context.path
                )
            return DROPPED
        value = table.decode(name, code)
        if isinstance(value, UnknownCode):
            self._context.add_issue(
                IssueType.UNKNOWN_ENUM_CODE,
                f"{table.asn_name}: unknown value {value}",
                node=local_name(element.tag),
                severity=IssueSeverity.INFO,
            )
        return value

    def _read_flags(self, table: FlagTable, element: etree._Element, required: bool) -> Any:
        code = self._read_code(element, required)
        if code is DROPPED:
            return DROPPED
        if code is None:
            if required:
                raise SchemaViolation(f"Mandatory flags '{table.asn_name}' are empty", self._context.path)
            return DROPPED
        flags = table.decode_flags(code)
        if flags.unknown_bits:
            self._context.add_issue(
                IssueType.UNKNOWN_ENUM_CODE,
                f"{table.asn_name}: unknown bits {flags.unknown_bits:#x} preserved",
                node=local_name(element.tag),
                severity=IssueSeverity.INFO,
            )
        return flags

    def _read_leaf_list(self, spec: FieldSpec, element: etree._Element, required: bool) -> tuple[Any, ...]:
        """Read repeated leaves; in an optional list a bad item is dropped alone."""
        items = []
        for child in self._children(element):
            if local_name(child.tag) != spec.item_tag:
                self._skip(child, spec.tag)
                continue
            with ElementScope(self._context, child.tag):
                value = self._read_leaf(spec.leaf, child, required)
            _release(child)
            if value is not DROPPED:
                items.append(value)
        return tuple(items)

    def _read_enum_list(self, spec: FieldSpec, element: etree._Element, required: bool) -> tuple[Any, ...]:
        items = []
        for child in self._children(element):
            if local_name(child.tag) != spec.item_tag:
                self._skip(child, spec.tag)
                continue
            with ElementScope(self._context, child.tag):
                value = self._read_enum(spec.table, child, required)
            _release(child)
            if value is not DROPPED:
                items.append(value)
        return tuple(items)


def decode(
    source: Source,
    *,
    strict: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> SeqEntry:
    """Decode a ``Seq-entry`` or ``Bioseq-set`` document.

    Args:
        source: XML bytes, a file path, or a binary file object.
        strict: Raise ``UnknownVariant`` on unknown elements.
        max_depth: Maximum element nesting depth.
    """
    return Decoder(strict=strict, max_depth=max_depth).decode(source)


def decode_as(source: Source, cls: type[T], *, strict: bool = False) -> T:
    """Decode a document whose root element is the tag of ``cls``."""
    return Decoder(strict=strict).decode_as(source, cls)
