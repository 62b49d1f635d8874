"""Mutable helpers for assembling sequence records in code.

The model types are frozen, so a record with many descriptors or a set
with many members is awkward to construct in one expression. A builder
collects the parts, then ``build()`` produces a validated frozen tree.

Example:
    from ncbi_seqmodel import BioseqBuilder, BioseqSetBuilder, SeqId, TextseqId

    seq = (
        BioseqBuilder(SeqId(genbank=TextseqId(accession="U00001", version=1)))
        .title("Example clone")
        .set_sequence("ACGTACGT")
    )
    entry = BioseqSetBuilder().add(seq).build_entry()
"""

from __future__ import annotations

import logging
from typing import Union

from ncbi_seqmodel.errors import SchemaViolation
from ncbi_seqmodel.model.seq import (
    Bioseq,
    Mol,
    Repr,
    SeqAnnot,
    SeqAnnotData,
    SeqData,
    Seqdesc,
    SeqInst,
    Topology,
)
from ncbi_seqmodel.model.seqfeat import SeqFeat
from ncbi_seqmodel.model.seqloc import SeqId
from ncbi_seqmodel.model.seqset import BioseqSet, BioseqSetClass, SeqEntry
from ncbi_seqmodel.schema.enums import EnumValue
from ncbi_seqmodel.validator import validate

logger = logging.getLogger(__name__)

# One character per residue
TEXT_ALPHABETS = frozenset({"iupacna", "iupacaa", "ncbieaa"})
PACKED_ALPHABETS = frozenset({"ncbi2na", "ncbi4na", "ncbi8na", "ncbipna", "ncbi8aa", "ncbipaa", "ncbistdaa"})


class BioseqBuilder:
    """Collects the identifiers, descriptors and residues of one Bioseq."""

    def __init__(self, *ids: SeqId):
        self.ids: list[SeqId] = list(ids)
        self.descriptors: list[Seqdesc] = []
        self.features: list[SeqFeat] = []
        self.topology: EnumValue = Topology.LINEAR
        self._repr: EnumValue | None = None
        self._mol: EnumValue = Mol.NOT_SET
        self._length: int | None = None
        self._data: SeqData | None = None

    def add_id(self, seq_id: SeqId) -> BioseqBuilder:
        self.ids.append(seq_id)
        return self

    def add_descriptor(self, descriptor: Seqdesc) -> BioseqBuilder:
        self.descriptors.append(descriptor)
        return self

    def title(self, text: str) -> BioseqBuilder:
        return self.add_descriptor(Seqdesc(title=text))

    def add_feature(self, feature: SeqFeat) -> BioseqBuilder:
        """Append a feature; all features go into one feature table."""
        self.features.append(feature)
        return self

    def set_sequence(self, residues: str, alphabet: str = "iupacna", mol: EnumValue = Mol.DNA) -> BioseqBuilder:
        """Store residues in a one-letter alphabet as a raw sequence.

        Raises:
            ValueError: If ``alphabet`` is not a one-letter alphabet.
        """
        if alphabet not in TEXT_ALPHABETS:
            raise ValueError(f"Not a one-letter alphabet: {alphabet}")
        self._repr = Repr.RAW
        self._mol = mol
        self._data = SeqData(**{alphabet: residues})
        self._length = len(residues)
        return self

    def set_packed(self, data: bytes, alphabet: str, length: int, mol: EnumValue = Mol.DNA) -> BioseqBuilder:
        """Store residues in a packed alphabet; ``length`` counts residues, not bytes.

        Raises:
            ValueError: If ``alphabet`` is not a packed alphabet.
        """
        if alphabet not in PACKED_ALPHABETS:
            raise ValueError(f"Not a packed alphabet: {alphabet}")
        self._repr = Repr.RAW
        self._mol = mol
        self._data = SeqData(**{alphabet: bytes(data)})
        self._length = length
        return self

    def virtual(self, length: int | None = None, mol: EnumValue = Mol.DNA) -> BioseqBuilder:
        """Describe a sequence without residues, optionally of known length."""
        self._repr = Repr.VIRTUAL
        self._mol = mol
        self._data = None
        self._length = length
        return self

    def build(self) -> Bioseq:
        """Freeze the collected parts into a Bioseq.

        Raises:
            SchemaViolation: If no sequence was set, or the result is invalid.
        """
        if self._repr is None:
            raise SchemaViolation("No sequence was set", ("Bioseq",))
        inst = SeqInst(
            repr=self._repr,
            mol=self._mol,
            length=self._length,
            topology=self.topology,
            seq_data=self._data,
        )
        annot = [SeqAnnot(data=SeqAnnotData(ftable=self.features))] if self.features else None
        bioseq = Bioseq(id=self.ids, descr=self.descriptors or None, inst=inst, annot=annot)
        validate(bioseq)
        logger.debug("Built Bioseq %s", bioseq.id[0])
        return bioseq

    def build_entry(self) -> SeqEntry:
        return SeqEntry(seq=self.build())


Member = Union[Bioseq, BioseqSet, SeqEntry, BioseqBuilder, "BioseqSetBuilder"]


class BioseqSetBuilder:
    """Collects the members of a Bioseq-set.

    Members may be finished records or other builders; builders are built
    when the set is. A set builder cannot become a member of itself,
    directly or through nested builders.
    """

    def __init__(
        self,
        class_: EnumValue = BioseqSetClass.NOT_SET,
        *,
        release: str | None = None,
        level: int | None = None,
    ):
        self.class_ = class_
        self.release = release
        self.level = level
        self.descriptors: list[Seqdesc] = []
        self._members: list[Member] = []

    def __len__(self) -> int:
        return len(self._members)

    def _contains(self, builder: BioseqSetBuilder) -> bool:
        for member in self._members:
            if member is builder:
                return True
            if isinstance(member, BioseqSetBuilder) and member._contains(builder):
                return True
        return False

    def add(self, member: Member) -> BioseqSetBuilder:
        """Append a member.

        Raises:
            SchemaViolation: If the member would make this set its own ancestor.
            TypeError: If the member is not a record or builder.
        """
        if isinstance(member, BioseqSetBuilder) and (member is self or member._contains(self)):
            raise SchemaViolation("Bioseq-set would be its own ancestor", ("Bioseq-set",))
        if not isinstance(member, (Bioseq, BioseqSet, SeqEntry, BioseqBuilder, BioseqSetBuilder)):
            raise TypeError(f"Cannot add {type(member).__name__} to a Bioseq-set")
        self._members.append(member)
        return self

    def add_descriptor(self, descriptor: Seqdesc) -> BioseqSetBuilder:
        self.descriptors.append(descriptor)
        return self

    def _entry(self, member: Member) -> SeqEntry:
        if isinstance(member, SeqEntry):
            return member
        if isinstance(member, Bioseq):
            return SeqEntry(seq=member)
        if isinstance(member, BioseqSet):
            return SeqEntry(set=member)
        return member.build_entry()

    def build(self) -> BioseqSet:
        """Freeze the set and every member builder.

        Raises:
            SchemaViolation: If the set or any member is invalid.
        """
        bioseq_set = BioseqSet(
            class_=self.class_,
            release=self.release,
            level=self.level,
            descr=self.descriptors or None,
            seq_set=[self._entry(member) for member in self._members],
        )
        validate(bioseq_set)
        logger.debug("Built Bioseq-set with %d entries", len(bioseq_set))
        return bioseq_set

    def build_entry(self) -> SeqEntry:
        return SeqEntry(set=self.build())
