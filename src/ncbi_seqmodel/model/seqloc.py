"""NCBI-Seqloc: sequence identifiers and locations.

Every location except ``null`` and ``feat`` names the sequence it lies on
by value (a ``SeqId``), so location data can be exchanged independently of
the ``Bioseq`` it describes. SeqIds are frozen and hashable and serve as
lookup keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from ncbi_seqmodel.errors import SchemaViolation
from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.model.general import Date, Dbtag, IntFuzz, ObjectId
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.enums import EnumTable, EnumValue
from ncbi_seqmodel.schema.fields import enum, integer, node, nodes, null, string, values
from ncbi_seqmodel.schema.types import LeafKind

if TYPE_CHECKING:
    from ncbi_seqmodel.model.biblio import IdPat


@wire_type("Textseq-id")
@dataclass(frozen=True, kw_only=True)
class TextseqId(Record):
    name: str | None = string("Textseq-id_name", optional=True)
    accession: str | None = string("Textseq-id_accession", optional=True)
    release: str | None = string("Textseq-id_release", optional=True)
    version: int | None = integer("Textseq-id_version", optional=True)

    def __str__(self) -> str:
        label = self.accession or self.name or ""
        return f"{label}.{self.version}" if self.version is not None else label


@wire_type("Giimport-id")
@dataclass(frozen=True, kw_only=True)
class GiimportId(Record):
    id: int = integer("Giimport-id_id")
    db: str | None = string("Giimport-id_db", optional=True)
    release: str | None = string("Giimport-id_release", optional=True)


@wire_type("PDB-seq-id")
@dataclass(frozen=True, kw_only=True)
class PDBSeqId(Record):
    mol: str = string("PDB-seq-id_mol", wrapper="PDB-mol-id")  # 4 character PDB code
    chain: int | None = integer("PDB-seq-id_chain", optional=True)  # deprecated, see chain_id
    rel: Date | None = node("PDB-seq-id_rel", "Date", optional=True)
    chain_id: str | None = string("PDB-seq-id_chain-id", optional=True)


@wire_type("Patent-seq-id")
@dataclass(frozen=True, kw_only=True)
class PatentSeqId(Record):
    seqid: int = integer("Patent-seq-id_seqid")  # number of the sequence in the patent
    cit: IdPat = node("Patent-seq-id_cit", "IdPat")


@wire_type("Seq-id")
@dataclass(frozen=True, kw_only=True)
class SeqId(Choice):
    """An identifier in one accession namespace."""

    local: ObjectId | None = node("Seq-id_local", "ObjectId", optional=True)
    gibbsq: int | None = integer("Seq-id_gibbsq", optional=True)
    gibbmt: int | None = integer("Seq-id_gibbmt", optional=True)
    giim: GiimportId | None = node("Seq-id_giim", "GiimportId", optional=True)
    genbank: TextseqId | None = node("Seq-id_genbank", "TextseqId", optional=True)
    embl: TextseqId | None = node("Seq-id_embl", "TextseqId", optional=True)
    pir: TextseqId | None = node("Seq-id_pir", "TextseqId", optional=True)
    swissprot: TextseqId | None = node("Seq-id_swissprot", "TextseqId", optional=True)
    patent: PatentSeqId | None = node("Seq-id_patent", "PatentSeqId", optional=True)
    other: TextseqId | None = node("Seq-id_other", "TextseqId", optional=True)  # RefSeq
    general: Dbtag | None = node("Seq-id_general", "Dbtag", optional=True)
    gi: int | None = integer("Seq-id_gi", optional=True)
    ddbj: TextseqId | None = node("Seq-id_ddbj", "TextseqId", optional=True)
    prf: TextseqId | None = node("Seq-id_prf", "TextseqId", optional=True)
    pdb: PDBSeqId | None = node("Seq-id_pdb", "PDBSeqId", optional=True)
    tpg: TextseqId | None = node("Seq-id_tpg", "TextseqId", optional=True)
    tpe: TextseqId | None = node("Seq-id_tpe", "TextseqId", optional=True)
    tpd: TextseqId | None = node("Seq-id_tpd", "TextseqId", optional=True)
    gpipe: TextseqId | None = node("Seq-id_gpipe", "TextseqId", optional=True)
    named_annot_track: TextseqId | None = node("Seq-id_named-annot-track", "TextseqId", optional=True)

    def __str__(self) -> str:
        value = self.value
        if isinstance(value, TextseqId):
            return f"{self.variant}|{value}"
        if isinstance(value, ObjectId):
            return f"lcl|{value.value}"
        if isinstance(value, Dbtag):
            return f"gnl|{value.db}|{value.tag.value}"
        return f"{self.variant}|{value}"


@wire_type("Feat-id")
@dataclass(frozen=True, kw_only=True)
class FeatId(Choice):
    gibb: int | None = integer("Feat-id_gibb", optional=True)
    giim: GiimportId | None = node("Feat-id_giim", "GiimportId", optional=True)
    local: ObjectId | None = node("Feat-id_local", "ObjectId", optional=True)
    general: Dbtag | None = node("Feat-id_general", "Dbtag", optional=True)


class NaStrand(IntEnum):
    UNKNOWN = 0
    PLUS = 1
    MINUS = 2
    BOTH = 3  # in forward orientation
    BOTH_REV = 4  # in reverse orientation
    OTHER = 255


NA_STRAND = EnumTable("Na-strand", NaStrand)


@wire_type("Seq-interval")
@dataclass(frozen=True, kw_only=True)
class SeqInterval(Record):
    from_: int = integer("Seq-interval_from")
    to: int = integer("Seq-interval_to")
    strand: EnumValue | None = enum("Seq-interval_strand", NA_STRAND, optional=True, wrapped=True)
    id: SeqId = node("Seq-interval_id", "SeqId")
    fuzz_from: IntFuzz | None = node("Seq-interval_fuzz-from", "IntFuzz", optional=True)
    fuzz_to: IntFuzz | None = node("Seq-interval_fuzz-to", "IntFuzz", optional=True)

    def _check(self) -> None:
        if self.from_ < 0:
            raise SchemaViolation(f"Interval start {self.from_} is negative", (self.TAG,))
        if self.from_ > self.to:
            raise SchemaViolation(f"Interval start {self.from_} is after end {self.to}", (self.TAG,))

    @property
    def length(self) -> int:
        return self.to - self.from_ + 1


@wire_type("Seq-point")
@dataclass(frozen=True, kw_only=True)
class SeqPoint(Record):
    point: int = integer("Seq-point_point")
    strand: EnumValue | None = enum("Seq-point_strand", NA_STRAND, optional=True, wrapped=True)
    id: SeqId = node("Seq-point_id", "SeqId")
    fuzz: IntFuzz | None = node("Seq-point_fuzz", "IntFuzz", optional=True)


@wire_type("Packed-seqpnt")
@dataclass(frozen=True, kw_only=True)
class PackedSeqPnt(Record):
    strand: EnumValue | None = enum("Packed-seqpnt_strand", NA_STRAND, optional=True, wrapped=True)
    id: SeqId = node("Packed-seqpnt_id", "SeqId")
    fuzz: IntFuzz | None = node("Packed-seqpnt_fuzz", "IntFuzz", optional=True)
    points: tuple[int, ...] = values("Packed-seqpnt_points", LeafKind.INTEGER)


@wire_type("Seq-bond")
@dataclass(frozen=True, kw_only=True)
class SeqBond(Record):
    """Bond between residues; the other end may be unavailable."""

    a: SeqPoint = node("Seq-bond_a", "SeqPoint")
    b: SeqPoint | None = node("Seq-bond_b", "SeqPoint", optional=True)


@wire_type("Seq-loc")
@dataclass(frozen=True, kw_only=True)
class SeqLoc(Choice):
    """A location on one or more sequences."""

    null: bool | None = null("Seq-loc_null")  # region of unknown length, not placed
    empty: SeqId | None = node("Seq-loc_empty", "SeqId", optional=True)
    whole: SeqId | None = node("Seq-loc_whole", "SeqId", optional=True)
    int: SeqInterval | None = node("Seq-loc_int", "SeqInterval", optional=True)
    packed_int: tuple[SeqInterval, ...] | None = nodes(
        "Seq-loc_packed-int", "SeqInterval", optional=True, wrapper="Packed-seqint"
    )
    pnt: SeqPoint | None = node("Seq-loc_pnt", "SeqPoint", optional=True)
    packed_pnt: PackedSeqPnt | None = node("Seq-loc_packed-pnt", "PackedSeqPnt", optional=True)
    mix: tuple[SeqLoc, ...] | None = nodes("Seq-loc_mix", "SeqLoc", optional=True, wrapper="Seq-loc-mix")
    equiv: tuple[SeqLoc, ...] | None = nodes(
        "Seq-loc_equiv", "SeqLoc", optional=True, wrapper="Seq-loc-equiv"
    )
    bond: SeqBond | None = node("Seq-loc_bond", "SeqBond", optional=True)
    feat: FeatId | None = node("Seq-loc_feat", "FeatId", optional=True)

    def seq_ids(self) -> set[SeqId]:
        """All sequence ids referenced by this location."""
        found: set[SeqId] = set()
        value = self.value
        if isinstance(value, SeqId):
            found.add(value)
        elif isinstance(value, (SeqInterval, SeqPoint, PackedSeqPnt)):
            found.add(value.id)
        elif isinstance(value, SeqBond):
            found.add(value.a.id)
            if value.b is not None:
                found.add(value.b.id)
        elif self.packed_int is not None:
            found.update(interval.id for interval in self.packed_int)
        elif self.mix is not None or self.equiv is not None:
            for loc in value:
                found |= loc.seq_ids()
        return found

