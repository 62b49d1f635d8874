"""NCBI-Seqset: Bioseq-set and Seq-entry, the recursive container types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.model.general import Date, Dbtag, ObjectId
from ncbi_seqmodel.model.seq import Bioseq, SeqAnnot, Seqdesc
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.enums import EnumTable, EnumValue
from ncbi_seqmodel.schema.fields import enum, integer, node, nodes, string


class BioseqSetClass(IntEnum):
    NOT_SET = 0
    NUC_PROT = 1  # nuc acid and coded proteins
    SEGSET = 2  # segmented sequence + parts
    CONSET = 3  # constructed sequence + parts
    PARTS = 4  # parts for 2 or 3
    GIBB = 5  # geninfo backbone
    GI = 6  # geninfo
    GENBANK = 7  # converted genbank
    PIR = 8  # converted pir
    PUB_SET = 9  # all the seqs from a single publication
    EQUIV = 10  # a set of equivalent maps or seqs
    SWISSPROT = 11
    PDB_ENTRY = 12  # a complete PDB entry
    MUT_SET = 13  # set of mutations
    POP_SET = 14  # population study
    PHY_SET = 15  # phylogenetic study
    ECO_SET = 16  # ecological sample study
    GEN_PROD_SET = 17  # genomic products, chrom+mRNA+protein
    WGS_SET = 18  # whole genome shotgun project
    NAMED_ANNOT = 19
    NAMED_ANNOT_PROD = 20
    READ_SET = 21  # read set
    PAIRED_END_READS = 22
    SMALL_GENOME_SET = 23  # viral segments or mitochondrial minicircles
    OTHER = 255


BIOSEQ_SET_CLASS = EnumTable("Bioseq-set.class", BioseqSetClass)


@wire_type("Bioseq-set")
@dataclass(frozen=True, kw_only=True)
class BioseqSet(Record):
    """A set of entries; ``class_`` says how the members relate."""

    id: ObjectId | None = node("Bioseq-set_id", "ObjectId", optional=True)
    coll: Dbtag | None = node("Bioseq-set_coll", "Dbtag", optional=True)  # to identify a collection
    level: int | None = integer("Bioseq-set_level", optional=True)  # nesting level
    class_: EnumValue = enum("Bioseq-set_class", BIOSEQ_SET_CLASS, default=BioseqSetClass.NOT_SET)
    release: str | None = string("Bioseq-set_release", optional=True)
    date: Date | None = node("Bioseq-set_date", "Date", optional=True)
    descr: tuple[Seqdesc, ...] | None = nodes("Bioseq-set_descr", "Seqdesc", optional=True, wrapper="Seq-descr")
    seq_set: tuple[SeqEntry, ...] = nodes("Bioseq-set_seq-set", "SeqEntry")
    annot: tuple[SeqAnnot, ...] | None = nodes("Bioseq-set_annot", "SeqAnnot", optional=True)

    def __len__(self) -> int:
        return len(self.seq_set)

    def bioseqs(self) -> Iterator[Bioseq]:
        """All Bioseqs in the set, depth first, in document order."""
        for entry in self.seq_set:
            yield from entry.bioseqs()


@wire_type("Seq-entry")
@dataclass(frozen=True, kw_only=True)
class SeqEntry(Choice):
    """Either a single sequence or a set of entries."""

    seq: Bioseq | None = node("Seq-entry_seq", "Bioseq", optional=True)
    set: BioseqSet | None = node("Seq-entry_set", "BioseqSet", optional=True)

    def bioseqs(self) -> Iterator[Bioseq]:
        if self.seq is not None:
            yield self.seq
        else:
            yield from self.set.bioseqs()
