"""NCBI-General: identifiers, dates, names and user objects shared by all modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ncbi_seqmodel.errors import SchemaViolation
from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.enums import EnumTable, EnumValue
from ncbi_seqmodel.schema.fields import (
    boolean,
    enum,
    integer,
    node,
    nodes,
    octets,
    real,
    string,
    values,
)
from ncbi_seqmodel.schema.types import LeafKind


@wire_type("Object-id")
@dataclass(frozen=True, kw_only=True)
class ObjectId(Choice):
    """Can tag or name anything."""

    id: int | None = integer("Object-id_id", optional=True)
    str: str | None = string("Object-id_str", optional=True)


@wire_type("Dbtag")
@dataclass(frozen=True, kw_only=True)
class Dbtag(Record):
    """Generalized database tag, e.g. ``taxon:9606``."""

    db: str = string("Dbtag_db")
    tag: ObjectId = node("Dbtag_tag", "ObjectId")


@wire_type("Date-std")
@dataclass(frozen=True, kw_only=True)
class DateStd(Record):
    """Structured date. Not a unix ``tm``: month and day are 1-based."""

    year: int = integer("Date-std_year")
    month: int | None = integer("Date-std_month", optional=True)
    day: int | None = integer("Date-std_day", optional=True)
    season: str | None = string("Date-std_season", optional=True)
    hour: int | None = integer("Date-std_hour", optional=True)
    minute: int | None = integer("Date-std_minute", optional=True)
    second: int | None = integer("Date-std_second", optional=True)

    def _check(self) -> None:
        if self.month is not None and not 1 <= self.month <= 12:
            raise SchemaViolation(f"Invalid month {self.month}", (self.TAG,))
        if self.day is not None and not 1 <= self.day <= 31:
            raise SchemaViolation(f"Invalid day {self.day}", (self.TAG,))


@wire_type("Date")
@dataclass(frozen=True, kw_only=True)
class Date(Choice):
    """A structured date, or free text for old data that did not parse."""

    str: str | None = string("Date_str", optional=True)
    std: DateStd | None = node("Date_std", "DateStd", optional=True)


@wire_type("Name-std")
@dataclass(frozen=True, kw_only=True)
class NameStd(Record):
    last: str = string("Name-std_last")
    first: str | None = string("Name-std_first", optional=True)
    middle: str | None = string("Name-std_middle", optional=True)
    full: str | None = string("Name-std_full", optional=True)
    initials: str | None = string("Name-std_initials", optional=True)
    suffix: str | None = string("Name-std_suffix", optional=True)
    title: str | None = string("Name-std_title", optional=True)


@wire_type("Person-id")
@dataclass(frozen=True, kw_only=True)
class PersonId(Choice):
    dbtag: Dbtag | None = node("Person-id_dbtag", "Dbtag", optional=True)
    name: NameStd | None = node("Person-id_name", "NameStd", optional=True)
    ml: str | None = string("Person-id_ml", optional=True)
    str: str | None = string("Person-id_str", optional=True)
    consortium: str | None = string("Person-id_consortium", optional=True)


class FuzzLimit(IntEnum):
    UNK = 0
    GT = 1
    LT = 2
    TR = 3
    TL = 4
    CIRCLE = 5
    OTHER = 255


FUZZ_LIMIT = EnumTable("Int-fuzz.lim", FuzzLimit)


@wire_type("Int-fuzz_range")
@dataclass(frozen=True, kw_only=True)
class FuzzRange(Record):
    max: int = integer("Int-fuzz_range_max")
    min: int = integer("Int-fuzz_range_min")

    def _check(self) -> None:
        if self.min > self.max:
            raise SchemaViolation(f"Fuzz range min {self.min} exceeds max {self.max}", (self.TAG,))


@wire_type("Int-fuzz")
@dataclass(frozen=True, kw_only=True)
class IntFuzz(Choice):
    """Uncertainty in an integer position or length."""

    p_m: int | None = integer("Int-fuzz_p-m", optional=True)
    range: FuzzRange | None = node("Int-fuzz_range", "FuzzRange", optional=True, inline=True)
    pct: int | None = integer("Int-fuzz_pct", optional=True)
    lim: EnumValue | None = enum("Int-fuzz_lim", FUZZ_LIMIT, optional=True)
    alt: tuple[int, ...] | None = values("Int-fuzz_alt", LeafKind.INTEGER, optional=True)


@wire_type("User-field_data")
@dataclass(frozen=True, kw_only=True)
class UserData(Choice):
    str: str | None = string("User-field_data_str", optional=True)
    int: int | None = integer("User-field_data_int", optional=True)
    real: float | None = real("User-field_data_real", optional=True)
    bool: bool | None = boolean("User-field_data_bool", optional=True)
    os: bytes | None = octets("User-field_data_os", optional=True)
    object: UserObject | None = node("User-field_data_object", "UserObject", optional=True)
    strs: tuple[str, ...] | None = values("User-field_data_strs", optional=True)
    ints: tuple[int, ...] | None = values("User-field_data_ints", LeafKind.INTEGER, optional=True)
    reals: tuple[float, ...] | None = values("User-field_data_reals", LeafKind.REAL, optional=True)
    fields: tuple[UserField, ...] | None = nodes("User-field_data_fields", "UserField", optional=True)
    objects: tuple[UserObject, ...] | None = nodes("User-field_data_objects", "UserObject", optional=True)


@wire_type("User-field")
@dataclass(frozen=True, kw_only=True)
class UserField(Record):
    label: ObjectId = node("User-field_label", "ObjectId")
    num: int | None = integer("User-field_num", optional=True)  # required for strs, ints, reals
    data: UserData = node("User-field_data", "UserData", inline=True)


@wire_type("User-object")
@dataclass(frozen=True, kw_only=True)
class UserObject(Record):
    """A user-defined structured data item."""

    class_: str | None = string("User-object_class", optional=True)
    type: ObjectId = node("User-object_type", "ObjectId")
    data: tuple[UserField, ...] = nodes("User-object_data", "UserField")
