"""NCBI-Seqfeat: sequence features and the references they carry.

A ``SeqFeat`` ties a piece of typed data (``SeqFeatData``: a gene, a coding
region, an RNA, a variation and so on) to a ``SeqLoc``. Features live in
the feature table of a ``SeqAnnot``.

The Txinit, Clone-ref and evidence (``support``, ``cit``) parts are not
modeled; in lenient mode they are skipped like any unknown element.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ncbi_seqmodel.errors import SchemaViolation
from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.model.general import Dbtag, UserObject
from ncbi_seqmodel.model.seq import BioSource, Numbering, OrgRef, Pubdesc
from ncbi_seqmodel.model.seqloc import FeatId, SeqLoc
from ncbi_seqmodel.model.variation import VariationRef
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.enums import EnumTable, EnumValue
from ncbi_seqmodel.schema.fields import boolean, enum, integer, node, nodes, null, octets, string, values
from ncbi_seqmodel.schema.types import LeafKind


@wire_type("Gb-qual")
@dataclass(frozen=True, kw_only=True)
class GbQual(Record):
    qual: str = string("Gb-qual_qual")
    val: str = string("Gb-qual_val")


@wire_type("Imp-feat")
@dataclass(frozen=True, kw_only=True)
class ImpFeat(Record):
    """A feature imported from a GenBank/EMBL feature table by its key."""

    key: str = string("Imp-feat_key")
    loc: str | None = string("Imp-feat_loc", optional=True)  # original location string
    descr: str | None = string("Imp-feat_descr", optional=True)  # text description


class NomenclatureStatus(IntEnum):
    UNKNOWN = 0
    OFFICIAL = 1
    INTERIM = 2


GENE_NOMENCLATURE_STATUS = EnumTable("Gene-nomenclature.status", NomenclatureStatus)


@wire_type("Gene-nomenclature")
@dataclass(frozen=True, kw_only=True)
class GeneNomenclature(Record):
    status: EnumValue = enum("Gene-nomenclature_status", GENE_NOMENCLATURE_STATUS)
    symbol: str | None = string("Gene-nomenclature_symbol", optional=True)
    name: str | None = string("Gene-nomenclature_name", optional=True)
    source: Dbtag | None = node("Gene-nomenclature_source", "Dbtag", optional=True)


@wire_type("Gene-ref")
@dataclass(frozen=True, kw_only=True)
class GeneRef(Record):
    """Reference to a gene by symbol, description or database entry."""

    locus: str | None = string("Gene-ref_locus", optional=True)  # official gene symbol
    allele: str | None = string("Gene-ref_allele", optional=True)
    desc: str | None = string("Gene-ref_desc", optional=True)
    maploc: str | None = string("Gene-ref_maploc", optional=True)
    pseudo: bool = boolean("Gene-ref_pseudo", default=False)
    db: tuple[Dbtag, ...] | None = nodes("Gene-ref_db", "Dbtag", optional=True)
    syn: tuple[str, ...] | None = values("Gene-ref_syn", optional=True)
    locus_tag: str | None = string("Gene-ref_locus-tag", optional=True)
    formal_name: GeneNomenclature | None = node("Gene-ref_formal-name", "GeneNomenclature", optional=True)


class ProtProcessed(IntEnum):
    NOT_SET = 0
    PREPROTEIN = 1
    MATURE = 2
    SIGNAL_PEPTIDE = 3
    TRANSIT_PEPTIDE = 4
    PROPEPTIDE = 5


PROT_REF_PROCESSED = EnumTable("Prot-ref.processed", ProtProcessed)


@wire_type("Prot-ref")
@dataclass(frozen=True, kw_only=True)
class ProtRef(Record):
    name: tuple[str, ...] | None = values("Prot-ref_name", optional=True)
    desc: str | None = string("Prot-ref_desc", optional=True)
    ec: tuple[str, ...] | None = values("Prot-ref_ec", optional=True)  # E.C. numbers
    activity: tuple[str, ...] | None = values("Prot-ref_activity", optional=True)
    db: tuple[Dbtag, ...] | None = nodes("Prot-ref_db", "Dbtag", optional=True)
    processed: EnumValue = enum("Prot-ref_processed", PROT_REF_PROCESSED, default=ProtProcessed.NOT_SET)


@wire_type("Trna-ext_aa")
@dataclass(frozen=True, kw_only=True)
class TrnaAa(Choice):
    """The amino acid a tRNA carries, as a code in one of four alphabets."""

    iupacaa: int | None = integer("Trna-ext_aa_iupacaa", optional=True)
    ncbieaa: int | None = integer("Trna-ext_aa_ncbieaa", optional=True)
    ncbi8aa: int | None = integer("Trna-ext_aa_ncbi8aa", optional=True)
    ncbistdaa: int | None = integer("Trna-ext_aa_ncbistdaa", optional=True)


@wire_type("Trna-ext")
@dataclass(frozen=True, kw_only=True)
class TrnaExt(Record):
    aa: TrnaAa = node("Trna-ext_aa", "TrnaAa", inline=True)
    codon: tuple[int, ...] | None = values("Trna-ext_codon", LeafKind.INTEGER, optional=True)
    anticodon: SeqLoc | None = node("Trna-ext_anticodon", "SeqLoc", optional=True)


@wire_type("RNA-qual")
@dataclass(frozen=True, kw_only=True)
class RnaQual(Record):
    qual: str = string("RNA-qual_qual")
    val: str = string("RNA-qual_val")


@wire_type("RNA-gen")
@dataclass(frozen=True, kw_only=True)
class RnaGen(Record):
    class_: str | None = string("RNA-gen_class", optional=True)  # e.g. "snoRNA"
    product: str | None = string("RNA-gen_product", optional=True)
    quals: tuple[RnaQual, ...] | None = nodes("RNA-gen_quals", "RnaQual", optional=True, wrapper="RNA-qual-set")


@wire_type("RNA-ref_ext")
@dataclass(frozen=True, kw_only=True)
class RnaRefExt(Choice):
    name: str | None = string("RNA-ref_ext_name", optional=True)  # for naming "other" type
    trna: TrnaExt | None = node("RNA-ref_ext_tRNA", "TrnaExt", optional=True)
    gen: RnaGen | None = node("RNA-ref_ext_gen", "RnaGen", optional=True)


class RnaType(IntEnum):
    UNKNOWN = 0
    PREMSG = 1
    MRNA = 2
    TRNA = 3
    RRNA = 4
    SNRNA = 5
    SCRNA = 6
    SNORNA = 7
    NCRNA = 8
    TMRNA = 9
    MISCRNA = 10
    OTHER = 255


RNA_REF_TYPE = EnumTable(
    "RNA-ref.type",
    RnaType,
    names={
        RnaType.MRNA: "mRNA",
        RnaType.TRNA: "tRNA",
        RnaType.RRNA: "rRNA",
        RnaType.SNRNA: "snRNA",
        RnaType.SCRNA: "scRNA",
        RnaType.SNORNA: "snoRNA",
        RnaType.NCRNA: "ncRNA",
        RnaType.TMRNA: "tmRNA",
        RnaType.MISCRNA: "miscRNA",
    },
)


@wire_type("RNA-ref")
@dataclass(frozen=True, kw_only=True)
class RnaRef(Record):
    type: EnumValue = enum("RNA-ref_type", RNA_REF_TYPE)
    pseudo: bool | None = boolean("RNA-ref_pseudo", optional=True)
    ext: RnaRefExt | None = node("RNA-ref_ext", "RnaRefExt", optional=True, inline=True)


@wire_type("Genetic-code_E")
@dataclass(frozen=True, kw_only=True)
class GeneticCodeItem(Choice):
    """One way of naming a genetic code; a Genetic-code lists several."""

    name: str | None = string("Genetic-code_E_name", optional=True)
    id: int | None = integer("Genetic-code_E_id", optional=True)  # NCBI code table number
    ncbieaa: str | None = string("Genetic-code_E_ncbieaa", optional=True)
    ncbi8aa: bytes | None = octets("Genetic-code_E_ncbi8aa", optional=True)
    ncbistdaa: bytes | None = octets("Genetic-code_E_ncbistdaa", optional=True)
    sncbieaa: str | None = string("Genetic-code_E_sncbieaa", optional=True)  # start codons
    sncbi8aa: bytes | None = octets("Genetic-code_E_sncbi8aa", optional=True)
    sncbistdaa: bytes | None = octets("Genetic-code_E_sncbistdaa", optional=True)


@wire_type("Code-break_aa")
@dataclass(frozen=True, kw_only=True)
class CodeBreakAa(Choice):
    ncbieaa: int | None = integer("Code-break_aa_ncbieaa", optional=True)
    ncbi8aa: int | None = integer("Code-break_aa_ncbi8aa", optional=True)
    ncbistdaa: int | None = integer("Code-break_aa_ncbistdaa", optional=True)


@wire_type("Code-break")
@dataclass(frozen=True, kw_only=True)
class CodeBreak(Record):
    """A codon translated against the genetic code, e.g. selenocysteine."""

    loc: SeqLoc = node("Code-break_loc", "SeqLoc")
    aa: CodeBreakAa = node("Code-break_aa", "CodeBreakAa", inline=True)


class CdregionFrame(IntEnum):
    NOT_SET = 0
    ONE = 1
    TWO = 2
    THREE = 3


CDREGION_FRAME = EnumTable("Cdregion.frame", CdregionFrame)


@wire_type("Cdregion")
@dataclass(frozen=True, kw_only=True)
class Cdregion(Record):
    """A coding region: instructions to translate to protein."""

    orf: bool | None = boolean("Cdregion_orf", optional=True)  # just an ORF
    frame: EnumValue = enum("Cdregion_frame", CDREGION_FRAME, default=CdregionFrame.NOT_SET)
    conflict: bool | None = boolean("Cdregion_conflict", optional=True)  # conflict between translation and product
    gaps: int | None = integer("Cdregion_gaps", optional=True)
    mismatch: int | None = integer("Cdregion_mismatch", optional=True)
    code: tuple[GeneticCodeItem, ...] | None = nodes(
        "Cdregion_code", "GeneticCodeItem", optional=True, wrapper="Genetic-code"
    )
    code_break: tuple[CodeBreak, ...] | None = nodes("Cdregion_code-break", "CodeBreak", optional=True)
    stops: int | None = integer("Cdregion_stops", optional=True)

    @property
    def genetic_code(self) -> int | None:
        """The code table number, when the code is given by id."""
        for item in self.code or ():
            if item.id is not None:
                return item.id
        return None


@wire_type("Rsite-ref")
@dataclass(frozen=True, kw_only=True)
class RsiteRef(Choice):
    str: str | None = string("Rsite-ref_str", optional=True)  # may be unparsable
    db: Dbtag | None = node("Rsite-ref_db", "Dbtag", optional=True)


class Bond(IntEnum):
    DISULFIDE = 1
    THIOLESTER = 2
    XLINK = 3
    THIOETHER = 4
    OTHER = 255


class Site(IntEnum):
    ACTIVE = 1
    BINDING = 2
    CLEAVAGE = 3
    INHIBIT = 4
    MODIFIED = 5
    GLYCOSYLATION = 6
    MYRISTOYLATION = 7
    MUTAGENIZED = 8
    METAL_BINDING = 9
    PHOSPHORYLATION = 10
    ACETYLATION = 11
    AMIDATION = 12
    METHYLATION = 13
    HYDROXYLATION = 14
    SULFATATION = 15
    OXIDATIVE_DEAMINATION = 16
    PYRROLIDONE_CARBOXYLIC_ACID = 17
    GAMMA_CARBOXYGLUTAMIC_ACID = 18
    BLOCKED = 19
    LIPID_BINDING = 20
    NP_BINDING = 21
    DNA_BINDING = 22
    SIGNAL_PEPTIDE = 23
    TRANSIT_PEPTIDE = 24
    TRANSMEMBRANE_REGION = 25
    NITROSYLATION = 26
    OTHER = 255


class PSecStr(IntEnum):
    HELIX = 1  # any helix
    SHEET = 2  # beta sheet
    TURN = 3  # beta or gamma turn


SEQFEAT_BOND = EnumTable("SeqFeatData.bond", Bond)
SEQFEAT_SITE = EnumTable("SeqFeatData.site", Site)
SEQFEAT_PSEC_STR = EnumTable("SeqFeatData.psec-str", PSecStr)


@wire_type("SeqFeatData")
@dataclass(frozen=True, kw_only=True)
class SeqFeatData(Choice):
    """What a feature is. The arm name is the feature type."""

    gene: GeneRef | None = node("SeqFeatData_gene", "GeneRef", optional=True)
    org: OrgRef | None = node("SeqFeatData_org", "OrgRef", optional=True)
    cdregion: Cdregion | None = node("SeqFeatData_cdregion", "Cdregion", optional=True)
    prot: ProtRef | None = node("SeqFeatData_prot", "ProtRef", optional=True)
    rna: RnaRef | None = node("SeqFeatData_rna", "RnaRef", optional=True)
    pub: Pubdesc | None = node("SeqFeatData_pub", "Pubdesc", optional=True)  # publication applies to this seq
    seq: SeqLoc | None = node("SeqFeatData_seq", "SeqLoc", optional=True)  # to annotate origin from another seq
    imp: ImpFeat | None = node("SeqFeatData_imp", "ImpFeat", optional=True)
    region: str | None = string("SeqFeatData_region", optional=True)  # named region (globin locus)
    comment: bool | None = null("SeqFeatData_comment")  # just a comment
    bond: EnumValue | None = enum("SeqFeatData_bond", SEQFEAT_BOND, optional=True)
    site: EnumValue | None = enum("SeqFeatData_site", SEQFEAT_SITE, optional=True)
    rsite: RsiteRef | None = node("SeqFeatData_rsite", "RsiteRef", optional=True)
    user: UserObject | None = node("SeqFeatData_user", "UserObject", optional=True)
    num: Numbering | None = node("SeqFeatData_num", "Numbering", optional=True)
    psec_str: EnumValue | None = enum("SeqFeatData_psec-str", SEQFEAT_PSEC_STR, optional=True)
    non_std_residue: str | None = string("SeqFeatData_non-std-residue", optional=True)
    het: str | None = string("SeqFeatData_het", optional=True, wrapper="Heterogen")
    biosrc: BioSource | None = node("SeqFeatData_biosrc", "BioSource", optional=True)
    variation: VariationRef | None = node("SeqFeatData_variation", "VariationRef", optional=True)


@wire_type("SeqFeatXref")
@dataclass(frozen=True, kw_only=True)
class SeqFeatXref(Record):
    """A cross reference to another feature, by id or by its data."""

    id: FeatId | None = node("SeqFeatXref_id", "FeatId", optional=True)
    data: SeqFeatData | None = node("SeqFeatXref_data", "SeqFeatData", optional=True)

    def _check(self) -> None:
        if self.id is None and self.data is None:
            raise SchemaViolation("SeqFeatXref has neither id nor data", (self.TAG,))


class ExpEvidence(IntEnum):
    EXPERIMENTAL = 1  # any reasonable experimental check
    NOT_EXPERIMENTAL = 2  # similarity, pattern, etc


SEQ_FEAT_EXP_EV = EnumTable("Seq-feat.exp-ev", ExpEvidence)


@wire_type("Seq-feat")
@dataclass(frozen=True, kw_only=True)
class SeqFeat(Record):
    """A feature: typed data placed on a sequence location."""

    id: FeatId | None = node("Seq-feat_id", "FeatId", optional=True)
    data: SeqFeatData = node("Seq-feat_data", "SeqFeatData")
    partial: bool | None = boolean("Seq-feat_partial", optional=True)  # incomplete in some way
    except_: bool | None = boolean("Seq-feat_except", optional=True)  # something funny about this
    comment: str | None = string("Seq-feat_comment", optional=True)
    product: SeqLoc | None = node("Seq-feat_product", "SeqLoc", optional=True)  # product of process
    location: SeqLoc = node("Seq-feat_location", "SeqLoc")  # feature made from
    qual: tuple[GbQual, ...] | None = nodes("Seq-feat_qual", "GbQual", optional=True)
    title: str | None = string("Seq-feat_title", optional=True)
    ext: UserObject | None = node("Seq-feat_ext", "UserObject", optional=True)
    exp_ev: EnumValue | None = enum("Seq-feat_exp-ev", SEQ_FEAT_EXP_EV, optional=True)
    xref: tuple[SeqFeatXref, ...] | None = nodes("Seq-feat_xref", "SeqFeatXref", optional=True)
    dbxref: tuple[Dbtag, ...] | None = nodes("Seq-feat_dbxref", "Dbtag", optional=True)
    pseudo: bool | None = boolean("Seq-feat_pseudo", optional=True)
    except_text: str | None = string("Seq-feat_except-text", optional=True)
    ids: tuple[FeatId, ...] | None = nodes("Seq-feat_ids", "FeatId", optional=True)
    exts: tuple[UserObject, ...] | None = nodes("Seq-feat_exts", "UserObject", optional=True)

    @property
    def kind(self) -> str:
        """Feature type by its data arm, e.g. ``gene`` or ``cdregion``."""
        return self.data.variant

    def qualifiers(self, name: str) -> list[str]:
        """Values of the GenBank qualifiers called ``name``."""
        return [q.val for q in self.qual or () if q.qual == name]
