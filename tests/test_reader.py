"""Tests for the incremental event reader."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from ncbi_seqmodel import Decoder, XmlSyntaxError
from ncbi_seqmodel.xml import EventReader
from tests.fixture_loader import fixture_path

SEQ_ID = b"<Seq-id><Seq-id_gi>5</Seq-id_gi></Seq-id>"


class FailingStream(io.RawIOBase):
    """A stream that fails after its first read."""

    def __init__(self, first: bytes):
        self._first = first

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._first:
            chunk, self._first = self._first, b""
            return chunk
        raise OSError("connection reset")


class TestEventReader:
    """Tests for EventReader."""

    def test_events(self) -> None:
        """Test start and end events in document order."""
        events = [(event, element.tag) for event, element in EventReader(SEQ_ID)]

        assert events == [
            ("start", "Seq-id"),
            ("start", "Seq-id_gi"),
            ("end", "Seq-id_gi"),
            ("end", "Seq-id"),
        ]

    def test_small_chunks(self) -> None:
        """Test the offset counts every byte fed."""
        reader = EventReader(io.BytesIO(SEQ_ID), chunk_size=3)
        tags = [element.tag for event, element in reader if event == "start"]

        assert tags == ["Seq-id", "Seq-id_gi"]
        assert reader.offset == len(SEQ_ID)
        assert reader.open_elements == ()

    def test_path_source(self) -> None:
        """Test a filesystem path is opened and read."""
        reader = EventReader(fixture_path("variant_properties.xml"))
        first = next(iter(reader))

        assert first[0] == "start"
        assert first[1].tag == "VariantProperties"

    def test_caller_stream_left_open(self) -> None:
        """Test a stream passed in is not closed by the reader."""
        stream = io.BytesIO(SEQ_ID)
        list(EventReader(stream))

        assert not stream.closed

    def test_unsupported_source(self) -> None:
        """Test sources that are neither bytes, paths nor streams."""
        with pytest.raises(TypeError):
            list(EventReader(12345))  # type: ignore[arg-type]


class TestReadErrors:
    """Tests for malformed documents and failing sources."""

    def test_truncated_document(self) -> None:
        """Test the error names the elements still open."""
        document = b"<Seq-entry><Seq-entry_seq>\n  "

        with pytest.raises(XmlSyntaxError) as exc_info:
            list(EventReader(document))

        error = exc_info.value
        assert error.open_elements == ("Seq-entry", "Seq-entry_seq")
        assert error.offset == len(document)
        assert "Malformed XML" in error.message

    def test_mismatched_tag(self) -> None:
        """Test mismatched tags carry a line number."""
        with pytest.raises(XmlSyntaxError) as exc_info:
            list(EventReader(b"<Seq-id>\n<Seq-id_gi>5</Seq-id>"))

        assert exc_info.value.line == 2
        assert "line 2" in str(exc_info.value)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test an unreadable path is a syntax error at offset 0."""
        with pytest.raises(XmlSyntaxError) as exc_info:
            list(EventReader(tmp_path / "absent.xml"))

        assert exc_info.value.offset == 0
        assert "Cannot open" in exc_info.value.message

    def test_stream_failure(self) -> None:
        """Test an I/O error mid-document keeps the offset and open elements."""
        reader = EventReader(FailingStream(b"<Seq-entry><Seq-entry_seq>\n  "), chunk_size=64)

        with pytest.raises(XmlSyntaxError) as exc_info:
            list(reader)

        error = exc_info.value
        assert "connection reset" in error.message
        assert error.offset == 29
        assert error.open_elements == ("Seq-entry", "Seq-entry_seq")
        assert isinstance(error.__cause__, OSError)

    def test_empty_document(self) -> None:
        """Test a document without any element."""
        with pytest.raises(XmlSyntaxError):
            Decoder().decode(b"")

    def test_whitespace_only(self) -> None:
        """Test a document holding only whitespace."""
        with pytest.raises(XmlSyntaxError):
            Decoder().decode(b"   \n")
