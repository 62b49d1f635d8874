"""NCBI-Sequence: Bioseq, its instance data and its descriptors.

A ``SeqInst`` says how a sequence is represented (``repr``), what kind of
molecule it is (``mol``) and how long it is. For the concrete
representations (raw, const) the residues are held in ``seq_data`` in one
of several alphabets, and the declared length must agree with them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from ncbi_seqmodel.errors import SchemaViolation
from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.model.general import Date, Dbtag, IntFuzz, ObjectId, UserObject
from ncbi_seqmodel.model.pub import Pub
from ncbi_seqmodel.model.seqloc import SeqId, SeqLoc
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.enums import EnumTable, EnumValue
from ncbi_seqmodel.schema.fields import (
    boolean,
    enum,
    enums,
    integer,
    node,
    nodes,
    null,
    octets,
    real,
    string,
    values,
)

if TYPE_CHECKING:
    from ncbi_seqmodel.model.seqfeat import SeqFeat


class Repr(IntEnum):
    NOT_SET = 0
    VIRTUAL = 1  # no seq data
    RAW = 2  # continuous sequence
    SEG = 3  # segmented sequence
    CONST = 4  # constructed sequence
    REF = 5  # reference to another sequence
    CONSEN = 6  # consensus sequence or pattern
    MAP = 7  # ordered map of any kind
    DELTA = 8  # sequence made by changes (delta) to others
    OTHER = 255


class Mol(IntEnum):
    NOT_SET = 0
    DNA = 1
    RNA = 2
    AA = 3
    NA = 4  # just a nucleic acid
    OTHER = 255


class Topology(IntEnum):
    NOT_SET = 0
    LINEAR = 1
    CIRCULAR = 2
    TANDEM = 3
    OTHER = 255


class Strand(IntEnum):
    NOT_SET = 0
    SS = 1
    DS = 2
    MIXED = 3
    OTHER = 255


SEQ_INST_REPR = EnumTable("Seq-inst.repr", Repr)
SEQ_INST_MOL = EnumTable("Seq-inst.mol", Mol)
SEQ_INST_TOPOLOGY = EnumTable("Seq-inst.topology", Topology)
SEQ_INST_STRAND = EnumTable("Seq-inst.strand", Strand)

# Residues per byte of packed data, keyed by Seq-data arm
PACKED_PER_BYTE = {"ncbi2na": 4, "ncbi4na": 2, "ncbi8na": 1, "ncbi8aa": 1, "ncbistdaa": 1}
# Bytes per residue for the probability alphabets
BYTES_PER_RESIDUE = {"ncbipna": 5, "ncbipaa": 25}


class GapType(IntEnum):
    UNKNOWN = 0
    FRAGMENT = 1  # AGP 1.1 only
    CLONE = 2  # AGP 1.1 only
    SHORT_ARM = 3
    HETEROCHROMATIN = 4
    CENTROMERE = 5
    TELOMERE = 6
    REPEAT = 7
    CONTIG = 8
    SCAFFOLD = 9
    CONTAMINATION = 10
    OTHER = 255


class GapLinkage(IntEnum):
    UNLINKED = 0
    LINKED = 1
    OTHER = 255


class LinkageEvidenceType(IntEnum):
    PAIRED_ENDS = 0
    ALIGN_GENUS = 1
    ALIGN_XGENUS = 2
    ALIGN_TRNSCPT = 3
    WITHIN_CLONE = 4
    CLONE_CONTIG = 5
    MAP = 6
    STROBE = 7
    UNSPECIFIED = 8
    PCR = 9
    PROXIMITY_LIGATION = 10
    OTHER = 255


SEQ_GAP_TYPE = EnumTable("Seq-gap.type", GapType, integer_valued=True)
SEQ_GAP_LINKAGE = EnumTable("Seq-gap.linkage", GapLinkage, integer_valued=True)
LINKAGE_EVIDENCE_TYPE = EnumTable("Linkage-evidence.type", LinkageEvidenceType, integer_valued=True)


@wire_type("Linkage-evidence")
@dataclass(frozen=True, kw_only=True)
class LinkageEvidence(Record):
    type: EnumValue = enum("Linkage-evidence_type", LINKAGE_EVIDENCE_TYPE)


@wire_type("Seq-gap")
@dataclass(frozen=True, kw_only=True)
class SeqGap(Record):
    type: EnumValue = enum("Seq-gap_type", SEQ_GAP_TYPE)
    linkage: EnumValue | None = enum("Seq-gap_linkage", SEQ_GAP_LINKAGE, optional=True)
    linkage_evidence: tuple[LinkageEvidence, ...] | None = nodes(
        "Seq-gap_linkage-evidence", "LinkageEvidence", optional=True
    )


@wire_type("Seq-data")
@dataclass(frozen=True, kw_only=True)
class SeqData(Choice):
    """Residues in one alphabet.

    The text alphabets hold one letter per residue. The packed alphabets
    hold several residues per byte; the last byte may be padded, so the
    byte count alone only bounds the residue count.
    """

    iupacna: str | None = string("Seq-data_iupacna", optional=True, wrapper="IUPACna")
    iupacaa: str | None = string("Seq-data_iupacaa", optional=True, wrapper="IUPACaa")
    ncbi2na: bytes | None = octets("Seq-data_ncbi2na", optional=True, wrapper="NCBI2na")
    ncbi4na: bytes | None = octets("Seq-data_ncbi4na", optional=True, wrapper="NCBI4na")
    ncbi8na: bytes | None = octets("Seq-data_ncbi8na", optional=True, wrapper="NCBI8na")
    ncbipna: bytes | None = octets("Seq-data_ncbipna", optional=True, wrapper="NCBIpna")
    ncbi8aa: bytes | None = octets("Seq-data_ncbi8aa", optional=True, wrapper="NCBI8aa")
    ncbieaa: str | None = string("Seq-data_ncbieaa", optional=True, wrapper="NCBIeaa")
    ncbipaa: bytes | None = octets("Seq-data_ncbipaa", optional=True, wrapper="NCBIpaa")
    ncbistdaa: bytes | None = octets("Seq-data_ncbistdaa", optional=True, wrapper="NCBIstdaa")
    gap: SeqGap | None = node("Seq-data_gap", "SeqGap", optional=True)

    def holds(self, length: int) -> bool:
        """Whether the data is exactly ``length`` residues long."""
        variant = self.variant
        value = self.value
        if variant == "gap":
            return True
        if variant in PACKED_PER_BYTE:
            per_byte = PACKED_PER_BYTE[variant]
            return len(value) == -(-length // per_byte)
        if variant in BYTES_PER_RESIDUE:
            return len(value) == length * BYTES_PER_RESIDUE[variant]
        return len(value) == length

    def residue_count(self) -> int | None:
        """Residue count implied by the data, or None where padding or gaps make it unknown."""
        variant = self.variant
        if variant == "gap" or PACKED_PER_BYTE.get(variant, 1) > 1:
            return None
        if variant in BYTES_PER_RESIDUE:
            return len(self.value) // BYTES_PER_RESIDUE[variant]
        return len(self.value)


@wire_type("Seq-literal")
@dataclass(frozen=True, kw_only=True)
class SeqLiteral(Record):
    length: int = integer("Seq-literal_length")  # must give a length in residues
    fuzz: IntFuzz | None = node("Seq-literal_fuzz", "IntFuzz", optional=True)
    seq_data: SeqData | None = node("Seq-literal_seq-data", "SeqData", optional=True)

    def _check(self) -> None:
        if self.length < 0:
            raise SchemaViolation(f"Literal length {self.length} is negative", (self.TAG,))
        if self.seq_data is not None and not self.seq_data.holds(self.length):
            raise SchemaViolation(
                f"Literal length {self.length} does not match {self.seq_data.variant} data",
                (self.TAG,),
            )


@wire_type("Delta-seq")
@dataclass(frozen=True, kw_only=True)
class DeltaSeq(Choice):
    loc: SeqLoc | None = node("Delta-seq_loc", "SeqLoc", optional=True)
    literal: SeqLiteral | None = node("Delta-seq_literal", "SeqLiteral", optional=True)


@wire_type("Seq-ext")
@dataclass(frozen=True, kw_only=True)
class SeqExt(Choice):
    """Extensions for the seg, ref and delta representations."""

    seg: tuple[SeqLoc, ...] | None = nodes("Seq-ext_seg", "SeqLoc", optional=True, wrapper="Seg-ext")
    ref: SeqLoc | None = node("Seq-ext_ref", "SeqLoc", optional=True)
    delta: tuple[DeltaSeq, ...] | None = nodes("Seq-ext_delta", "DeltaSeq", optional=True, wrapper="Delta-ext")


@wire_type("Seq-hist-rec")
@dataclass(frozen=True, kw_only=True)
class SeqHistRec(Record):
    date: Date | None = node("Seq-hist-rec_date", "Date", optional=True)
    ids: tuple[SeqId, ...] = nodes("Seq-hist-rec_ids", "SeqId")


@wire_type("Seq-hist_deleted")
@dataclass(frozen=True, kw_only=True)
class SeqHistDeleted(Choice):
    bool: bool | None = boolean("Seq-hist_deleted_bool", optional=True)
    date: Date | None = node("Seq-hist_deleted_date", "Date", optional=True)


@wire_type("Seq-hist")
@dataclass(frozen=True, kw_only=True)
class SeqHist(Record):
    replaces: SeqHistRec | None = node("Seq-hist_replaces", "SeqHistRec", optional=True)
    replaced_by: SeqHistRec | None = node("Seq-hist_replaced-by", "SeqHistRec", optional=True)
    deleted: SeqHistDeleted | None = node("Seq-hist_deleted", "SeqHistDeleted", optional=True, inline=True)


@wire_type("Seq-inst")
@dataclass(frozen=True, kw_only=True)
class SeqInst(Record):
    """Instance of a sequence: representation, molecule type, length and data."""

    repr: EnumValue = enum("Seq-inst_repr", SEQ_INST_REPR)
    mol: EnumValue = enum("Seq-inst_mol", SEQ_INST_MOL)
    length: int | None = integer("Seq-inst_length", optional=True)
    fuzz: IntFuzz | None = node("Seq-inst_fuzz", "IntFuzz", optional=True)
    topology: EnumValue = enum("Seq-inst_topology", SEQ_INST_TOPOLOGY, default=Topology.LINEAR)
    strand: EnumValue | None = enum("Seq-inst_strand", SEQ_INST_STRAND, optional=True)
    seq_data: SeqData | None = node("Seq-inst_seq-data", "SeqData", optional=True)
    ext: SeqExt | None = node("Seq-inst_ext", "SeqExt", optional=True)
    hist: SeqHist | None = node("Seq-inst_hist", "SeqHist", optional=True)

    def _check(self) -> None:
        check_length(self)


def check_length(inst: SeqInst) -> None:
    """Check the declared length against the representation and data.

    Raises:
        SchemaViolation: If the length is missing for a non-virtual
            sequence, negative, or disagrees with ``seq_data``.
    """
    path = (inst.TAG,)
    if inst.length is None:
        if inst.repr != Repr.VIRTUAL:
            raise SchemaViolation("Mandatory field 'Seq-inst_length' is missing", path)
        return
    if inst.length < 0:
        raise SchemaViolation(f"Sequence length {inst.length} is negative", path)
    if inst.repr == Repr.RAW and inst.seq_data is None:
        raise SchemaViolation("Raw sequence has no 'Seq-inst_seq-data'", path)
    if inst.repr in (Repr.RAW, Repr.CONST) and inst.seq_data is not None:
        if not inst.seq_data.holds(inst.length):
            raise SchemaViolation(
                f"Sequence length {inst.length} does not match "
                f"{inst.seq_data.variant} data ({len(inst.seq_data.value)} units)",
                path,
            )


class GIBBMol(IntEnum):
    UNKNOWN = 0
    GENOMIC = 1
    PRE_MRNA = 2  # precursor RNA of any sort really
    MRNA = 3
    RRNA = 4
    TRNA = 5
    SNRNA = 6
    SCRNA = 7
    PEPTIDE = 8
    OTHER_GENETIC = 9  # other genetic material
    GENOMIC_MRNA = 10  # reported a mix of genomic and cdna sequence
    OTHER = 255


class GIBBMod(IntEnum):
    DNA = 0
    RNA = 1
    EXTRACHROM = 2
    PLASMID = 3
    MITOCHONDRIAL = 4
    CHLOROPLAST = 5
    KINETOPLAST = 6
    CYANELLE = 7
    SYNTHETIC = 8
    RECOMBINANT = 9
    PARTIAL = 10
    COMPLETE = 11
    MUTAGEN = 12  # subject of mutagenesis
    NATMUT = 13  # natural mutant
    TRANSPOSON = 14
    INSERTION_SEQ = 15
    NO_LEFT = 16  # missing left end (5' for na, NH2 for aa)
    NO_RIGHT = 17  # missing right end (3' or COOH)
    MACRONUCLEAR = 18
    PROVIRAL = 19
    EST = 20  # expressed sequence tag
    STS = 21  # sequence tagged site
    SURVEY = 22  # one pass survey sequence
    CHROMOPLAST = 23
    GENEMAP = 24
    RESTMAP = 25  # ordered restriction map
    PHYSMAP = 26
    OTHER = 255


class GIBBMethod(IntEnum):
    CONCEPT_TRANS = 1
    SEQ_PEPT = 2
    BOTH = 3
    SEQ_PEPT_OVERLAP = 4
    SEQ_PEPT_HOMOL = 5
    CONCEPT_TRANS_A = 6
    OTHER = 255


GIBB_MOL = EnumTable(
    "GIBB-mol",
    GIBBMol,
    names={
        GIBBMol.PRE_MRNA: "pre-mRNA",
        GIBBMol.MRNA: "mRNA",
        GIBBMol.RRNA: "rRNA",
        GIBBMol.TRNA: "tRNA",
        GIBBMol.SNRNA: "snRNA",
        GIBBMol.SCRNA: "scRNA",
        GIBBMol.GENOMIC_MRNA: "genomic-mRNA",
    },
)
GIBB_MOD = EnumTable("GIBB-mod", GIBBMod)
GIBB_METHOD = EnumTable("GIBB-method", GIBBMethod)


class Biomol(IntEnum):
    UNKNOWN = 0
    GENOMIC = 1
    PRE_RNA = 2  # precursor RNA of any sort
    MRNA = 3
    RRNA = 4
    TRNA = 5
    SNRNA = 6
    SCRNA = 7
    PEPTIDE = 8
    OTHER_GENETIC = 9
    GENOMIC_MRNA = 10
    CRNA = 11  # viral RNA genome copy intermediate
    SNORNA = 12
    TRANSCRIBED_RNA = 13
    NCRNA = 14
    TMRNA = 15
    OTHER = 255


class Tech(IntEnum):
    UNKNOWN = 0
    STANDARD = 1
    EST = 2
    STS = 3
    SURVEY = 4
    GENEMAP = 5
    PHYSMAP = 6
    DERIVED = 7
    CONCEPT_TRANS = 8
    SEQ_PEPT = 9
    BOTH = 10
    SEQ_PEPT_OVERLAP = 11
    SEQ_PEPT_HOMOL = 12
    CONCEPT_TRANS_A = 13
    HTGS_1 = 14  # unordered high throughput sequence contig
    HTGS_2 = 15
    HTGS_3 = 16  # finished high throughput sequence
    FLI_CDNA = 17
    HTGS_0 = 18
    HTC = 19
    WGS = 20  # whole genome shotgun
    BARCODE = 21
    COMPOSITE_WGS_HTGS = 22
    TSA = 23  # transcriptome shotgun assembly
    TARGETED = 24
    OTHER = 255  # use techexp


class Completeness(IntEnum):
    UNKNOWN = 0
    COMPLETE = 1
    PARTIAL = 2
    NO_LEFT = 3
    NO_RIGHT = 4
    NO_ENDS = 5
    HAS_LEFT = 6
    HAS_RIGHT = 7
    OTHER = 255


MOLINFO_BIOMOL = EnumTable(
    "MolInfo.biomol",
    Biomol,
    names={
        Biomol.PRE_RNA: "pre-RNA",
        Biomol.MRNA: "mRNA",
        Biomol.RRNA: "rRNA",
        Biomol.TRNA: "tRNA",
        Biomol.SNRNA: "snRNA",
        Biomol.SCRNA: "scRNA",
        Biomol.GENOMIC_MRNA: "genomic-mRNA",
        Biomol.CRNA: "cRNA",
        Biomol.SNORNA: "snoRNA",
        Biomol.TRANSCRIBED_RNA: "transcribed-RNA",
        Biomol.NCRNA: "ncRNA",
        Biomol.TMRNA: "tmRNA",
    },
    integer_valued=True,
)
MOLINFO_TECH = EnumTable("MolInfo.tech", Tech, integer_valued=True)
MOLINFO_COMPLETENESS = EnumTable("MolInfo.completeness", Completeness, integer_valued=True)


@wire_type("MolInfo")
@dataclass(frozen=True, kw_only=True)
class MolInfo(Record):
    """Molecule type and sequencing technique."""

    biomol: EnumValue = enum("MolInfo_biomol", MOLINFO_BIOMOL, default=Biomol.UNKNOWN)
    tech: EnumValue = enum("MolInfo_tech", MOLINFO_TECH, default=Tech.UNKNOWN)
    techexp: str | None = string("MolInfo_techexp", optional=True)  # explanation if tech not enough
    completeness: EnumValue = enum("MolInfo_completeness", MOLINFO_COMPLETENESS, default=Completeness.UNKNOWN)
    gbmoltype: str | None = string("MolInfo_gbmoltype", optional=True)


@wire_type("Num-cont")
@dataclass(frozen=True, kw_only=True)
class NumCont(Record):
    refnum: int = integer("Num-cont_refnum", default=1)  # number assigned to first residue
    has_zero: bool = boolean("Num-cont_has-zero", default=False)
    ascending: bool = boolean("Num-cont_ascending", default=True)


@wire_type("Num-enum")
@dataclass(frozen=True, kw_only=True)
class NumEnum(Record):
    num: int = integer("Num-enum_num")  # number of tags to follow
    names: tuple[str, ...] = values("Num-enum_names")

    def _check(self) -> None:
        if self.num != len(self.names):
            raise SchemaViolation(f"Num-enum declares {self.num} names but has {len(self.names)}", (self.TAG,))


class NumRefType(IntEnum):
    NOT_SET = 0
    SOURCES = 1  # by segmented or const seq sources
    ALIGNS = 2  # by alignments


NUM_REF_TYPE = EnumTable("Num-ref.type", NumRefType)


@wire_type("Num-ref")
@dataclass(frozen=True, kw_only=True)
class NumRef(Record):
    type: EnumValue = enum("Num-ref_type", NUM_REF_TYPE)


@wire_type("Num-real")
@dataclass(frozen=True, kw_only=True)
class NumReal(Record):
    """Maps integer positions to a float system: ``a * position + b``."""

    a: float = real("Num-real_a")
    b: float = real("Num-real_b")
    units: str | None = string("Num-real_units", optional=True)


@wire_type("Numbering")
@dataclass(frozen=True, kw_only=True)
class Numbering(Choice):
    cont: NumCont | None = node("Numbering_cont", "NumCont", optional=True)
    enum: NumEnum | None = node("Numbering_enum", "NumEnum", optional=True)
    ref: NumRef | None = node("Numbering_ref", "NumRef", optional=True)
    real: NumReal | None = node("Numbering_real", "NumReal", optional=True)


class PubdescRefType(IntEnum):
    SEQ = 0  # refers to sequence
    SITES = 1  # refers to unspecified features
    FEATS = 2  # refers to specified features
    NO_TARGET = 3  # nothing specified (EMBL)


PUBDESC_REFTYPE = EnumTable("Pubdesc.reftype", PubdescRefType, integer_valued=True)


@wire_type("Pubdesc")
@dataclass(frozen=True, kw_only=True)
class Pubdesc(Record):
    """A publication reference attached to a sequence."""

    pub: tuple[Pub, ...] = nodes("Pubdesc_pub", "Pub", wrapper="Pub-equiv")
    name: str | None = string("Pubdesc_name", optional=True)
    fig: str | None = string("Pubdesc_fig", optional=True)
    num: Numbering | None = node("Pubdesc_num", "Numbering", optional=True)  # numbering from paper
    numexc: bool | None = boolean("Pubdesc_numexc", optional=True)
    poly_a: bool | None = boolean("Pubdesc_poly-a", optional=True)
    maploc: str | None = string("Pubdesc_maploc", optional=True)
    seq_raw: str | None = string("Pubdesc_seq-raw", optional=True)
    align_group: int | None = integer("Pubdesc_align-group", optional=True)
    comment: str | None = string("Pubdesc_comment", optional=True)
    reftype: EnumValue = enum("Pubdesc_reftype", PUBDESC_REFTYPE, default=PubdescRefType.SEQ)


@wire_type("BinomialOrgName")
@dataclass(frozen=True, kw_only=True)
class BinomialOrgName(Record):
    genus: str = string("BinomialOrgName_genus")
    species: str | None = string("BinomialOrgName_species", optional=True)
    subspecies: str | None = string("BinomialOrgName_subspecies", optional=True)


class TaxLevel(IntEnum):
    OTHER = 0
    FAMILY = 1
    ORDER = 2
    CLASS = 3


TAX_ELEMENT_LEVEL = EnumTable("TaxElement.fixed-level", TaxLevel, integer_valued=True)


@wire_type("TaxElement")
@dataclass(frozen=True, kw_only=True)
class TaxElement(Record):
    fixed_level: EnumValue = enum("TaxElement_fixed-level", TAX_ELEMENT_LEVEL)
    level: str | None = string("TaxElement_level", optional=True)
    name: str = string("TaxElement_name")


@wire_type("OrgName_name")
@dataclass(frozen=True, kw_only=True)
class OrgNameChoice(Choice):
    binomial: BinomialOrgName | None = node("OrgName_name_binomial", "BinomialOrgName", optional=True)
    virus: str | None = string("OrgName_name_virus", optional=True)
    hybrid: tuple[OrgName, ...] | None = nodes("OrgName_name_hybrid", "OrgName", optional=True, wrapper="MultiOrgName")
    namedhybrid: BinomialOrgName | None = node("OrgName_name_namedhybrid", "BinomialOrgName", optional=True)
    partial: tuple[TaxElement, ...] | None = nodes(
        "OrgName_name_partial", "TaxElement", optional=True, wrapper="PartialOrgName"
    )


class OrgModSubtype(IntEnum):
    STRAIN = 2
    SUBSTRAIN = 3
    TYPE = 4
    SUBTYPE = 5
    VARIETY = 6
    SEROTYPE = 7
    SEROGROUP = 8
    SEROVAR = 9
    CULTIVAR = 10
    PATHOVAR = 11
    CHEMOVAR = 12
    BIOVAR = 13
    BIOTYPE = 14
    GROUP = 15
    SUBGROUP = 16
    ISOLATE = 17
    COMMON = 18
    ACRONYM = 19
    DOSAGE = 20  # chromosome dosage of hybrid
    NAT_HOST = 21  # natural host of this specimen
    SUB_SPECIES = 22
    SPECIMEN_VOUCHER = 23
    AUTHORITY = 24
    FORMA = 25
    FORMA_SPECIALIS = 26
    ECOTYPE = 27
    SYNONYM = 28
    ANAMORPH = 29
    TELEOMORPH = 30
    BREED = 31
    GB_ACRONYM = 32
    GB_ANAMORPH = 33
    GB_SYNONYM = 34
    CULTURE_COLLECTION = 35
    BIO_MATERIAL = 36
    METAGENOME_SOURCE = 37
    TYPE_MATERIAL = 38
    NOMENCLATURE = 39
    OLD_LINEAGE = 253
    OLD_NAME = 254
    OTHER = 255


ORGMOD_SUBTYPE = EnumTable("OrgMod.subtype", OrgModSubtype, integer_valued=True)


@wire_type("OrgMod")
@dataclass(frozen=True, kw_only=True)
class OrgMod(Record):
    subtype: EnumValue = enum("OrgMod_subtype", ORGMOD_SUBTYPE)
    subname: str = string("OrgMod_subname")
    attrib: str | None = string("OrgMod_attrib", optional=True)


@wire_type("OrgName")
@dataclass(frozen=True, kw_only=True)
class OrgName(Record):
    name: OrgNameChoice | None = node("OrgName_name", "OrgNameChoice", optional=True, inline=True)
    attrib: str | None = string("OrgName_attrib", optional=True)
    mod: tuple[OrgMod, ...] | None = nodes("OrgName_mod", "OrgMod", optional=True)
    lineage: str | None = string("OrgName_lineage", optional=True)
    gcode: int | None = integer("OrgName_gcode", optional=True)  # genetic code
    mgcode: int | None = integer("OrgName_mgcode", optional=True)  # mitochondrial genetic code
    div: str | None = string("OrgName_div", optional=True)  # GenBank division code
    pgcode: int | None = integer("OrgName_pgcode", optional=True)  # plastid genetic code


@wire_type("Org-ref")
@dataclass(frozen=True, kw_only=True)
class OrgRef(Record):
    """Reference to an organism, e.g. ``Homo sapiens`` with ``taxon:9606``."""

    taxname: str | None = string("Org-ref_taxname", optional=True)
    common: str | None = string("Org-ref_common", optional=True)
    mod: tuple[str, ...] | None = values("Org-ref_mod", optional=True)
    db: tuple[Dbtag, ...] | None = nodes("Org-ref_db", "Dbtag", optional=True)
    syn: tuple[str, ...] | None = values("Org-ref_syn", optional=True)
    orgname: OrgName | None = node("Org-ref_orgname", "OrgName", optional=True)

    @property
    def taxid(self) -> int | None:
        for tag in self.db or ():
            if tag.db == "taxon" and tag.tag.id is not None:
                return tag.tag.id
        return None


class SubSourceSubtype(IntEnum):
    CHROMOSOME = 1
    MAP = 2
    CLONE = 3
    SUBCLONE = 4
    HAPLOTYPE = 5
    GENOTYPE = 6
    SEX = 7
    CELL_LINE = 8
    CELL_TYPE = 9
    TISSUE_TYPE = 10
    CLONE_LIB = 11
    DEV_STAGE = 12
    FREQUENCY = 13
    GERMLINE = 14
    REARRANGED = 15
    LAB_HOST = 16
    POP_VARIANT = 17
    TISSUE_LIB = 18
    PLASMID_NAME = 19
    TRANSPOSON_NAME = 20
    INSERTION_SEQ_NAME = 21
    PLASTID_NAME = 22
    COUNTRY = 23
    SEGMENT = 24
    ENDOGENOUS_VIRUS_NAME = 25
    TRANSGENIC = 26
    ENVIRONMENTAL_SAMPLE = 27
    ISOLATION_SOURCE = 28
    LAT_LON = 29
    COLLECTION_DATE = 30
    COLLECTED_BY = 31
    IDENTIFIED_BY = 32
    FWD_PRIMER_SEQ = 33
    REV_PRIMER_SEQ = 34
    FWD_PRIMER_NAME = 35
    REV_PRIMER_NAME = 36
    METAGENOMIC = 37
    MATING_TYPE = 38
    LINKAGE_GROUP = 39
    HAPLOGROUP = 40
    WHOLE_REPLICON = 41
    PHENOTYPE = 42
    ALTITUDE = 43
    OTHER = 255


SUBSOURCE_SUBTYPE = EnumTable("SubSource.subtype", SubSourceSubtype, integer_valued=True)


@wire_type("SubSource")
@dataclass(frozen=True, kw_only=True)
class SubSource(Record):
    subtype: EnumValue = enum("SubSource_subtype", SUBSOURCE_SUBTYPE)
    name: str = string("SubSource_name")
    attrib: str | None = string("SubSource_attrib", optional=True)


class Genome(IntEnum):
    UNKNOWN = 0
    GENOMIC = 1
    CHLOROPLAST = 2
    CHROMOPLAST = 3
    KINETOPLAST = 4
    MITOCHONDRION = 5
    PLASTID = 6
    MACRONUCLEAR = 7
    EXTRACHROM = 8
    PLASMID = 9
    TRANSPOSON = 10
    INSERTION_SEQ = 11
    CYANELLE = 12
    PROVIRAL = 13
    VIRION = 14
    NUCLEOMORPH = 15
    APICOPLAST = 16
    LEUCOPLAST = 17
    PROPLASTID = 18
    ENDOGENOUS_VIRUS = 19
    HYDROGENOSOME = 20
    CHROMOSOME = 21
    CHROMATOPHORE = 22
    PLASMID_IN_MITOCHONDRION = 23
    PLASMID_IN_PLASTID = 24


class Origin(IntEnum):
    UNKNOWN = 0
    NATURAL = 1  # normal biological entity
    NATMUT = 2  # naturally occurring mutant
    MUT = 3  # artificially mutagenized
    ARTIFICIAL = 4  # artificially engineered
    SYNTHETIC = 5  # purely synthetic
    OTHER = 255


BIOSOURCE_GENOME = EnumTable("BioSource.genome", Genome, integer_valued=True)
BIOSOURCE_ORIGIN = EnumTable("BioSource.origin", Origin, integer_valued=True)


@wire_type("BioSource")
@dataclass(frozen=True, kw_only=True)
class BioSource(Record):
    """Biological source of the sequenced material."""

    genome: EnumValue = enum("BioSource_genome", BIOSOURCE_GENOME, default=Genome.UNKNOWN)
    origin: EnumValue = enum("BioSource_origin", BIOSOURCE_ORIGIN, default=Origin.UNKNOWN)
    org: OrgRef = node("BioSource_org", "OrgRef")
    subtype: tuple[SubSource, ...] | None = nodes("BioSource_subtype", "SubSource", optional=True)
    is_focus: bool | None = null("BioSource_is-focus")


@wire_type("GB-block")
@dataclass(frozen=True, kw_only=True)
class GBBlock(Record):
    """GenBank-specific descriptor data."""

    extra_accessions: tuple[str, ...] | None = values("GB-block_extra-accessions", optional=True)
    source: str | None = string("GB-block_source", optional=True)
    keywords: tuple[str, ...] | None = values("GB-block_keywords", optional=True)
    origin: str | None = string("GB-block_origin", optional=True)
    date: str | None = string("GB-block_date", optional=True)  # old form, use entry_date
    entry_date: Date | None = node("GB-block_entry-date", "Date", optional=True)
    div: str | None = string("GB-block_div", optional=True)
    taxonomy: str | None = string("GB-block_taxonomy", optional=True)


@wire_type("Seqdesc")
@dataclass(frozen=True, kw_only=True)
class Seqdesc(Choice):
    """A descriptor: annotation that applies to a whole sequence or set.

    ``mol_type``, ``modif``, ``method`` and ``org`` are superseded by
    ``molinfo`` and ``source`` but still appear in older records.
    """

    mol_type: EnumValue | None = enum("Seqdesc_mol-type", GIBB_MOL, optional=True, wrapped=True)
    modif: tuple[EnumValue, ...] | None = enums("Seqdesc_modif", GIBB_MOD, optional=True)
    method: EnumValue | None = enum("Seqdesc_method", GIBB_METHOD, optional=True, wrapped=True)
    name: str | None = string("Seqdesc_name", optional=True)
    title: str | None = string("Seqdesc_title", optional=True)
    org: OrgRef | None = node("Seqdesc_org", "OrgRef", optional=True)
    comment: str | None = string("Seqdesc_comment", optional=True)
    num: Numbering | None = node("Seqdesc_num", "Numbering", optional=True)
    maploc: Dbtag | None = node("Seqdesc_maploc", "Dbtag", optional=True)
    genbank: GBBlock | None = node("Seqdesc_genbank", "GBBlock", optional=True)
    pub: Pubdesc | None = node("Seqdesc_pub", "Pubdesc", optional=True)
    region: str | None = string("Seqdesc_region", optional=True)  # overall region (globin locus)
    user: UserObject | None = node("Seqdesc_user", "UserObject", optional=True)
    dbxref: Dbtag | None = node("Seqdesc_dbxref", "Dbtag", optional=True)
    create_date: Date | None = node("Seqdesc_create-date", "Date", optional=True)
    update_date: Date | None = node("Seqdesc_update-date", "Date", optional=True)
    het: str | None = string("Seqdesc_het", optional=True, wrapper="Heterogen")  # cofactor, etc.
    source: BioSource | None = node("Seqdesc_source", "BioSource", optional=True)
    molinfo: MolInfo | None = node("Seqdesc_molinfo", "MolInfo", optional=True)


@wire_type("Textannot-id")
@dataclass(frozen=True, kw_only=True)
class TextannotId(Record):
    """Text identifier of an annotation; same shape as Textseq-id."""

    name: str | None = string("Textannot-id_name", optional=True)
    accession: str | None = string("Textannot-id_accession", optional=True)
    release: str | None = string("Textannot-id_release", optional=True)
    version: int | None = integer("Textannot-id_version", optional=True)


@wire_type("Annot-id")
@dataclass(frozen=True, kw_only=True)
class AnnotId(Choice):
    local: ObjectId | None = node("Annot-id_local", "ObjectId", optional=True)
    ncbi: int | None = integer("Annot-id_ncbi", optional=True)
    general: Dbtag | None = node("Annot-id_general", "Dbtag", optional=True)
    other: TextannotId | None = node("Annot-id_other", "TextannotId", optional=True)


class AlignType(IntEnum):
    REF = 1  # set of alignments to the same sequence
    ALT = 2  # set of alternate alignments of the same seqs
    BLOCKS = 3  # set of aligned blocks in the same seqs
    OTHER = 255


ALIGN_DEF_TYPE = EnumTable("Align-def.align-type", AlignType, integer_valued=True)


@wire_type("Align-def")
@dataclass(frozen=True, kw_only=True)
class AlignDef(Record):
    align_type: EnumValue = enum("Align-def_align-type", ALIGN_DEF_TYPE)
    ids: tuple[SeqId, ...] | None = nodes("Align-def_ids", "SeqId", optional=True)


@wire_type("Annotdesc")
@dataclass(frozen=True, kw_only=True)
class Annotdesc(Choice):
    """A descriptor of an annotation collection."""

    name: str | None = string("Annotdesc_name", optional=True)
    title: str | None = string("Annotdesc_title", optional=True)
    comment: str | None = string("Annotdesc_comment", optional=True)
    pub: Pubdesc | None = node("Annotdesc_pub", "Pubdesc", optional=True)
    user: UserObject | None = node("Annotdesc_user", "UserObject", optional=True)
    create_date: Date | None = node("Annotdesc_create-date", "Date", optional=True)
    update_date: Date | None = node("Annotdesc_update-date", "Date", optional=True)
    src: SeqId | None = node("Annotdesc_src", "SeqId", optional=True)  # source sequence of the annotation
    align: AlignDef | None = node("Annotdesc_align", "AlignDef", optional=True)
    region: SeqLoc | None = node("Annotdesc_region", "SeqLoc", optional=True)  # all contents cover this region


@wire_type("Seq-annot_data")
@dataclass(frozen=True, kw_only=True)
class SeqAnnotData(Choice):
    """Annotation payload. Alignments, graphs and seq-tables are not modeled."""

    ftable: tuple[SeqFeat, ...] | None = nodes("Seq-annot_data_ftable", "SeqFeat", optional=True)
    ids: tuple[SeqId, ...] | None = nodes("Seq-annot_data_ids", "SeqId", optional=True)
    locs: tuple[SeqLoc, ...] | None = nodes("Seq-annot_data_locs", "SeqLoc", optional=True)


class AnnotDb(IntEnum):
    GENBANK = 1
    EMBL = 2
    DDBJ = 3
    PIR = 4
    SP = 5
    BBONE = 6
    PDB = 7
    OTHER = 255


SEQ_ANNOT_DB = EnumTable("Seq-annot.db", AnnotDb, integer_valued=True)


@wire_type("Seq-annot")
@dataclass(frozen=True, kw_only=True)
class SeqAnnot(Record):
    """A collection of annotations on one or more sequences."""

    id: tuple[AnnotId, ...] | None = nodes("Seq-annot_id", "AnnotId", optional=True)
    db: EnumValue | None = enum("Seq-annot_db", SEQ_ANNOT_DB, optional=True)
    name: str | None = string("Seq-annot_name", optional=True)  # source if db is other
    desc: tuple[Annotdesc, ...] | None = nodes("Seq-annot_desc", "Annotdesc", optional=True, wrapper="Annot-descr")
    data: SeqAnnotData = node("Seq-annot_data", "SeqAnnotData", inline=True)

    @property
    def features(self) -> tuple[SeqFeat, ...]:
        """Features of a feature table; empty for other payloads."""
        return self.data.ftable or ()


@wire_type("Bioseq")
@dataclass(frozen=True, kw_only=True)
class Bioseq(Record):
    """A single continuous biological sequence and its aliases."""

    id: tuple[SeqId, ...] = nodes("Bioseq_id", "SeqId")
    descr: tuple[Seqdesc, ...] | None = nodes("Bioseq_descr", "Seqdesc", optional=True, wrapper="Seq-descr")
    inst: SeqInst = node("Bioseq_inst", "SeqInst")
    annot: tuple[SeqAnnot, ...] | None = nodes("Bioseq_annot", "SeqAnnot", optional=True)

    def _check(self) -> None:
        if not self.id:
            raise SchemaViolation("Bioseq has no Seq-id", (self.TAG,))

    @property
    def length(self) -> int | None:
        return self.inst.length

    def descriptors(self, variant: str) -> list[Seqdesc]:
        """Descriptors whose wire arm is ``variant``, e.g. ``title``."""
        return [desc for desc in self.descr or () if desc.variant == variant]

    def features(self) -> list[SeqFeat]:
        """Features from all feature tables annotating this sequence."""
        return [feat for annot in self.annot or () for feat in annot.features]

    @property
    def title(self) -> str | None:
        found = self.descriptors("title")
        return found[0].title if found else None
