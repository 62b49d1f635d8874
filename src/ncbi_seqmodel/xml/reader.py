"""Incremental XML event source over a byte stream.

The document is fed to lxml's pull parser in fixed-size chunks, so memory
use is bounded by the chunk size plus whatever part of the tree the
consumer has not cleared yet.
"""

from __future__ import annotations

import io
import logging
from os import PathLike
from typing import IO, Iterator, Union

from lxml import etree

from ncbi_seqmodel.context import DEFAULT_CHUNK_SIZE, local_name
from ncbi_seqmodel.errors import XmlSyntaxError

logger = logging.getLogger(__name__)

Source = Union[bytes, str, PathLike, IO[bytes]]

START = "start"
END = "end"


def open_source(source: Source) -> tuple[IO[bytes], bool]:
    """Open a decode source as a binary stream.

    Returns:
        The stream and whether the caller owns it and must close it.

    Raises:
        XmlSyntaxError: If a path cannot be opened.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source)), True
    if isinstance(source, (str, PathLike)):
        try:
            return open(source, "rb"), True
        except OSError as exc:
            raise XmlSyntaxError(f"Cannot open {source}: {exc}", offset=0) from exc
    if hasattr(source, "read"):
        return source, False
    raise TypeError(f"Unsupported source type: {type(source).__name__}")


class EventReader:
    """Yields ``(event, element)`` pairs for start and end tags.

    Tracks the number of bytes fed to the parser and the stack of open
    elements so that syntax and I/O errors can say where they happened.
    """

    def __init__(self, source: Source, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._source = source
        self._chunk_size = chunk_size
        self._open: list[str] = []
        self.offset = 0

    @property
    def open_elements(self) -> tuple[str, ...]:
        return tuple(self._open)

    def _parser(self) -> etree.XMLPullParser:
        return etree.XMLPullParser(
            events=(START, END),
            load_dtd=False,
            no_network=True,
            resolve_entities=False,
            huge_tree=True,
            remove_comments=True,
            remove_pis=True,
        )

    def _syntax_error(self, exc: etree.XMLSyntaxError) -> XmlSyntaxError:
        return XmlSyntaxError(
            f"Malformed XML: {exc.msg}",
            self.open_elements,
            offset=self.offset,
            line=exc.lineno,
            column=exc.offset,
        )

    def _drain(self, parser: etree.XMLPullParser) -> Iterator[tuple[str, etree._Element]]:
        for event, element in parser.read_events():
            if event == START:
                self._open.append(local_name(element.tag))
            else:
                self._open.pop()
            yield event, element

    def __iter__(self) -> Iterator[tuple[str, etree._Element]]:
        stream, owned = open_source(self._source)
        parser = self._parser()
        try:
            while True:
                try:
                    chunk = stream.read(self._chunk_size)
                except (OSError, ValueError) as exc:
                    raise XmlSyntaxError(
                        f"Failed reading source: {exc}", self.open_elements, offset=self.offset
                    ) from exc
                if not chunk:
                    break
                self.offset += len(chunk)
                try:
                    parser.feed(chunk)
                except etree.XMLSyntaxError as exc:
                    raise self._syntax_error(exc) from exc
                yield from self._drain(parser)
            try:
                parser.close()
            except etree.XMLSyntaxError as exc:
                raise self._syntax_error(exc) from exc
            yield from self._drain(parser)
            logger.debug("Read %d bytes", self.offset)
        finally:
            if owned:
                stream.close()
