"""Enumeration and bit-flag codecs.

NCBI adds enumeration codes between schema releases, so decoding never
fails on a code the tables do not know: the value is kept as an
``UnknownCode`` and written back unchanged on encode.

Two wire forms exist for enumerations:

- ``ENUMERATED`` types carry only the name: ``<Seq-inst_mol value="dna"/>``
- ``INTEGER`` types with named values carry both:
  ``<MolInfo_biomol value="genomic">1</MolInfo_biomol>``
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Union


@dataclass(frozen=True)
class UnknownCode:
    """An enumeration value outside the known table.

    ``code`` is the wire integer when one was present; ``name`` is the
    wire name when one was present. At least one of them is set.
    """

    code: int | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.code is None and self.name is None:
            raise ValueError("UnknownCode needs a code or a name")

    def __str__(self) -> str:
        if self.name is not None:
            return f"Unknown({self.name}={self.code})" if self.code is not None else f"Unknown({self.name})"
        return f"Unknown({self.code})"


EnumValue = Union[IntEnum, UnknownCode]


def default_wire_name(member: IntEnum) -> str:
    return member.name.lower().replace("_", "-")


class EnumTable:
    """Bidirectional mapping between wire codes/names and an IntEnum."""

    def __init__(
        self,
        asn_name: str,
        enum_cls: type[IntEnum],
        names: dict[IntEnum, str] | None = None,
        integer_valued: bool = False,
    ):
        """Create a table.

        Args:
            asn_name: ASN.1 type name, also the wrapper tag for named types.
            enum_cls: The known members.
            names: Wire names that differ from the lower-kebab member name.
            integer_valued: True for INTEGER types with named values, whose
                wire form carries the code as element text.
        """
        self.asn_name = asn_name
        self.enum_cls = enum_cls
        self.integer_valued = integer_valued
        overrides = names or {}
        self._by_code: dict[int, IntEnum] = {int(m): m for m in enum_cls}
        self._name_of: dict[IntEnum, str] = {
            m: overrides.get(m, default_wire_name(m)) for m in enum_cls
        }
        self._by_name: dict[str, IntEnum] = {n: m for m, n in self._name_of.items()}

    def __repr__(self) -> str:
        return f"EnumTable({self.asn_name!r})"

    def decode_code(self, code: int) -> EnumValue:
        """Map a wire integer to a member, or UnknownCode."""
        member = self._by_code.get(code)
        if member is None:
            return UnknownCode(code=code)
        return member

    def decode_name(self, name: str) -> EnumValue:
        """Map a wire name to a member, or UnknownCode."""
        member = self._by_name.get(name)
        if member is None:
            return UnknownCode(name=name)
        return member

    def decode(self, name: str | None, code: int | None) -> EnumValue:
        """Decode a wire pair, preferring the integer code when present."""
        if code is not None:
            value = self.decode_code(code)
            if isinstance(value, UnknownCode) and name is not None:
                return UnknownCode(code=code, name=name)
            return value
        if name is None:
            raise ValueError(f"{self.asn_name}: neither name nor code present")
        return self.decode_name(name)

    def encode(self, value: EnumValue) -> int | None:
        """Map a value back to its wire integer.

        Returns None only for an UnknownCode that arrived without a code.
        """
        if isinstance(value, UnknownCode):
            return value.code
        return int(self.enum_cls(value))

    def wire_name(self, value: EnumValue) -> str | None:
        if isinstance(value, UnknownCode):
            return value.name
        return self._name_of[self.enum_cls(value)]

    def is_known(self, value: EnumValue) -> bool:
        return not isinstance(value, UnknownCode)

    def accepts(self, value: object) -> bool:
        return isinstance(value, (self.enum_cls, UnknownCode))


@dataclass(frozen=True)
class FlagSet:
    """A decoded bit-flag integer; bits outside the table are kept aside."""

    known: IntFlag
    unknown_bits: int = 0

    def __contains__(self, flag: IntFlag) -> bool:
        return bool(self.known & flag)

    def __int__(self) -> int:
        return int(self.known) | self.unknown_bits


class FlagTable:
    """Bidirectional mapping between wire integers and an IntFlag."""

    def __init__(self, asn_name: str, flag_cls: type[IntFlag]):
        self.asn_name = asn_name
        self.flag_cls = flag_cls
        self.mask = 0
        self._by_code: dict[int, IntFlag] = {}
        # __members__ also lists zero-valued members, which iteration skips
        for member in flag_cls.__members__.values():
            self.mask |= int(member)
            self._by_code.setdefault(int(member), member)

    def __repr__(self) -> str:
        return f"FlagTable({self.asn_name!r})"

    def decode_flags(self, code: int) -> FlagSet:
        return FlagSet(
            known=self.flag_cls(code & self.mask),
            unknown_bits=code & ~self.mask,
        )

    def encode(self, flags: FlagSet) -> int:
        return int(flags.known) | flags.unknown_bits

    def accepts(self, value: object) -> bool:
        return isinstance(value, FlagSet) and isinstance(value.known, self.flag_cls)

    def wire_name(self, flags: FlagSet) -> str | None:
        """Name of the single named value equal to ``flags``, if there is one."""
        if flags.unknown_bits:
            return None
        member = self._by_code.get(int(flags.known))
        return None if member is None else default_wire_name(member)
