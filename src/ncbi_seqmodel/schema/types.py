"""Leaf value coercion for ASN.1 primitive types in the XML encoding.

Every leaf field goes through these converters so that integer, real,
boolean and octet-string text has identical tolerance everywhere:
surrounding whitespace is ignored, empty text means "absent", anything
else that does not parse raises ``NumericFormatError``.
"""

from __future__ import annotations

import binascii
import math
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from ncbi_seqmodel.errors import NumericFormatError

INT64_MIN = -9223372036854775808
INT64_MAX = 9223372036854775807


class LeafKind(Enum):
    """ASN.1 primitive types as they appear in NCBI XML."""

    STRING = "VisibleString"
    INTEGER = "INTEGER"
    REAL = "REAL"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    OCTETS = "OCTET STRING"


class LeafCodec(ABC):
    """Base class for leaf converters."""

    kind: LeafKind

    @abstractmethod
    def parse(self, text: str | None, path: tuple[str, ...] = ()) -> Any:
        """Convert element text to a Python value.

        Args:
            text: Element text, ``None`` when the element was empty.
            path: Element path, used for error reporting.

        Returns:
            The parsed value, or None if the text was empty.
        """

    @abstractmethod
    def format(self, value: Any) -> str:
        """Convert a Python value back to element text."""

    def accepts(self, value: Any) -> bool:
        """Check a programmatically supplied value has the right type."""
        return True


class StringCodec(LeafCodec):
    kind = LeafKind.STRING

    def parse(self, text: str | None, path: tuple[str, ...] = ()) -> str:
        return text or ""

    def format(self, value: Any) -> str:
        return str(value)

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)


class IntegerCodec(LeafCodec):
    """64-bit signed integers."""

    kind = LeafKind.INTEGER
    INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

    def __init__(self, min_value: int = INT64_MIN, max_value: int = INT64_MAX):
        self.min_value = min_value
        self.max_value = max_value

    def parse(self, text: str | None, path: tuple[str, ...] = ()) -> int | None:
        stripped = (text or "").strip()
        if not stripped:
            return None
        if not self.INTEGER_PATTERN.match(stripped):
            raise NumericFormatError(stripped, "integer", path)
        parsed = int(stripped)
        if not self.min_value <= parsed <= self.max_value:
            raise NumericFormatError(stripped, "64-bit integer", path)
        return parsed

    def format(self, value: Any) -> str:
        return str(int(value))

    def accepts(self, value: Any) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and self.min_value <= value <= self.max_value
        )


class RealCodec(LeafCodec):
    kind = LeafKind.REAL

    def parse(self, text: str | None, path: tuple[str, ...] = ()) -> float | None:
        stripped = (text or "").strip()
        if not stripped:
            return None
        try:
            parsed = float(stripped)
        except ValueError as exc:
            raise NumericFormatError(stripped, "real", path) from exc
        if math.isnan(parsed):
            raise NumericFormatError(stripped, "real", path)
        return parsed

    def format(self, value: Any) -> str:
        return repr(float(value))

    def accepts(self, value: Any) -> bool:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return False
        return not math.isnan(value)


class BooleanCodec(LeafCodec):
    """BOOLEAN leaves carry their value in the ``value`` attribute."""

    kind = LeafKind.BOOLEAN
    VALID_VALUES = {"true": True, "false": False, "1": True, "0": False}

    def parse(self, text: str | None, path: tuple[str, ...] = ()) -> bool | None:
        stripped = (text or "").strip().lower()
        if not stripped:
            return None
        if stripped not in self.VALID_VALUES:
            raise NumericFormatError(stripped, "boolean", path)
        return self.VALID_VALUES[stripped]

    def format(self, value: Any) -> str:
        return "true" if value else "false"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)


class NullCodec(LeafCodec):
    """NULL leaves are present-or-absent flags."""

    kind = LeafKind.NULL

    def parse(self, text: str | None, path: tuple[str, ...] = ()) -> bool:
        return True

    def format(self, value: Any) -> str:
        return ""

    def accepts(self, value: Any) -> bool:
        return value is True


class OctetsCodec(LeafCodec):
    """OCTET STRING leaves are hex text."""

    kind = LeafKind.OCTETS

    def parse(self, text: str | None, path: tuple[str, ...] = ()) -> bytes:
        stripped = "".join((text or "").split())
        try:
            return binascii.unhexlify(stripped)
        except (binascii.Error, ValueError) as exc:
            raise NumericFormatError(stripped[:32], "hex octet string", path) from exc

    def format(self, value: Any) -> str:
        return binascii.hexlify(bytes(value)).decode("ascii").upper()

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bytes)


# Pre-built codecs for the primitive kinds
BUILTIN_CODECS: dict[LeafKind, LeafCodec] = {
    LeafKind.STRING: StringCodec(),
    LeafKind.INTEGER: IntegerCodec(),
    LeafKind.REAL: RealCodec(),
    LeafKind.BOOLEAN: BooleanCodec(),
    LeafKind.NULL: NullCodec(),
    LeafKind.OCTETS: OctetsCodec(),
}


def get_leaf_codec(kind: LeafKind) -> LeafCodec:
    return BUILTIN_CODECS[kind]


def parse_integer(text: str | None, path: tuple[str, ...] = ()) -> int | None:
    """Parse integer leaf text, returning None for empty text.

    Raises:
        NumericFormatError: If the text is not a 64-bit integer.
    """
    return BUILTIN_CODECS[LeafKind.INTEGER].parse(text, path)


def parse_real(text: str | None, path: tuple[str, ...] = ()) -> float | None:
    """Parse real leaf text, returning None for empty text.

    Raises:
        NumericFormatError: If the text is not a number.
    """
    return BUILTIN_CODECS[LeafKind.REAL].parse(text, path)


def parse_boolean(text: str | None, path: tuple[str, ...] = ()) -> bool | None:
    return BUILTIN_CODECS[LeafKind.BOOLEAN].parse(text, path)


def parse_hex(text: str | None, path: tuple[str, ...] = ()) -> bytes:
    """Parse OCTET STRING hex text; whitespace inside the text is ignored."""
    return BUILTIN_CODECS[LeafKind.OCTETS].parse(text, path)
