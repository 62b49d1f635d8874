"""Typed model of the NCBI sequence data types.

Importing this package registers every model type with the dispatcher.
"""

from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.model.biblio import (
    Affil,
    AffilStd,
    ArticleId,
    AuthList,
    AuthListNames,
    Author,
    CitArt,
    CitArtFrom,
    CitBook,
    CitGen,
    CitJour,
    CitLet,
    CitPat,
    CitProc,
    CitSub,
    IdPat,
    IdPatId,
    Imprint,
    Meeting,
    PubStatus,
    SubMedium,
    TitleItem,
)
from ncbi_seqmodel.model.general import (
    Date,
    DateStd,
    Dbtag,
    FuzzLimit,
    FuzzRange,
    IntFuzz,
    NameStd,
    ObjectId,
    PersonId,
    UserData,
    UserField,
    UserObject,
)
from ncbi_seqmodel.model.pub import Pub
from ncbi_seqmodel.model.seq import (
    AlignDef,
    AlignType,
    AnnotDb,
    Annotdesc,
    AnnotId,
    BinomialOrgName,
    Biomol,
    BioSource,
    Bioseq,
    Completeness,
    DeltaSeq,
    GapType,
    GBBlock,
    Genome,
    GIBBMethod,
    GIBBMod,
    GIBBMol,
    LinkageEvidence,
    Mol,
    MolInfo,
    NumCont,
    NumEnum,
    Numbering,
    NumReal,
    NumRef,
    OrgMod,
    OrgName,
    OrgNameChoice,
    OrgRef,
    Origin,
    Pubdesc,
    Repr,
    SeqData,
    Seqdesc,
    SeqAnnot,
    SeqAnnotData,
    SeqExt,
    SeqGap,
    SeqHist,
    SeqHistDeleted,
    SeqHistRec,
    SeqInst,
    SeqLiteral,
    Strand,
    SubSource,
    SubSourceSubtype,
    TaxElement,
    Tech,
    TextannotId,
    Topology,
)
from ncbi_seqmodel.model.seqfeat import (
    Bond,
    Cdregion,
    CdregionFrame,
    CodeBreak,
    CodeBreakAa,
    ExpEvidence,
    GbQual,
    GeneNomenclature,
    GeneRef,
    GeneticCodeItem,
    ImpFeat,
    NomenclatureStatus,
    ProtProcessed,
    ProtRef,
    PSecStr,
    RnaGen,
    RnaQual,
    RnaRef,
    RnaRefExt,
    RnaType,
    RsiteRef,
    SeqFeat,
    SeqFeatData,
    SeqFeatXref,
    Site,
    TrnaAa,
    TrnaExt,
)
from ncbi_seqmodel.model.seqloc import (
    FeatId,
    GiimportId,
    NaStrand,
    PackedSeqPnt,
    PatentSeqId,
    PDBSeqId,
    SeqBond,
    SeqId,
    SeqInterval,
    SeqLoc,
    SeqPoint,
    TextseqId,
)
from ncbi_seqmodel.model.seqset import BioseqSet, BioseqSetClass, SeqEntry
from ncbi_seqmodel.model.variation import (
    ClinicalSignificance,
    DataSetType,
    DeltaAction,
    DeltaItem,
    DeltaItemSeq,
    Frameshift,
    LossOfHeterozygosity,
    Observation,
    Phenotype,
    PopulationData,
    SomaticCondition,
    SomaticOrigin,
    VariantProperties,
    VariationConsequence,
    VariationData,
    VariationDataSet,
    VariationInst,
    VariationMethod,
    VariationRef,
    VariationType,
)

__all__ = [
    "Choice",
    "Record",
    # NCBI-General
    "Date",
    "DateStd",
    "Dbtag",
    "FuzzLimit",
    "FuzzRange",
    "IntFuzz",
    "NameStd",
    "ObjectId",
    "PersonId",
    "UserData",
    "UserField",
    "UserObject",
    # NCBI-Biblio
    "Affil",
    "AffilStd",
    "ArticleId",
    "AuthList",
    "AuthListNames",
    "Author",
    "CitArt",
    "CitArtFrom",
    "CitBook",
    "CitGen",
    "CitJour",
    "CitLet",
    "CitPat",
    "CitProc",
    "CitSub",
    "IdPat",
    "IdPatId",
    "Imprint",
    "Meeting",
    "PubStatus",
    "SubMedium",
    "TitleItem",
    # NCBI-Pub
    "Pub",
    # NCBI-Seqloc
    "FeatId",
    "GiimportId",
    "NaStrand",
    "PackedSeqPnt",
    "PatentSeqId",
    "PDBSeqId",
    "SeqBond",
    "SeqId",
    "SeqInterval",
    "SeqLoc",
    "SeqPoint",
    "TextseqId",
    # NCBI-Sequence
    "AlignDef",
    "AlignType",
    "AnnotDb",
    "Annotdesc",
    "AnnotId",
    "BinomialOrgName",
    "Biomol",
    "BioSource",
    "Bioseq",
    "Completeness",
    "DeltaSeq",
    "GapType",
    "GBBlock",
    "Genome",
    "GIBBMethod",
    "GIBBMod",
    "GIBBMol",
    "LinkageEvidence",
    "Mol",
    "MolInfo",
    "NumCont",
    "NumEnum",
    "Numbering",
    "NumReal",
    "NumRef",
    "OrgMod",
    "OrgName",
    "OrgNameChoice",
    "OrgRef",
    "Origin",
    "Pubdesc",
    "Repr",
    "SeqData",
    "Seqdesc",
    "SeqAnnot",
    "SeqAnnotData",
    "SeqExt",
    "SeqGap",
    "SeqHist",
    "SeqHistDeleted",
    "SeqHistRec",
    "SeqInst",
    "SeqLiteral",
    "Strand",
    "SubSource",
    "SubSourceSubtype",
    "TaxElement",
    "Tech",
    "TextannotId",
    "Topology",
    # NCBI-Seqfeat
    "Bond",
    "Cdregion",
    "CdregionFrame",
    "CodeBreak",
    "CodeBreakAa",
    "ExpEvidence",
    "GbQual",
    "GeneNomenclature",
    "GeneRef",
    "GeneticCodeItem",
    "ImpFeat",
    "NomenclatureStatus",
    "ProtProcessed",
    "ProtRef",
    "PSecStr",
    "RnaGen",
    "RnaQual",
    "RnaRef",
    "RnaRefExt",
    "RnaType",
    "RsiteRef",
    "SeqFeat",
    "SeqFeatData",
    "SeqFeatXref",
    "Site",
    "TrnaAa",
    "TrnaExt",
    # NCBI-Seqset
    "BioseqSet",
    "BioseqSetClass",
    "SeqEntry",
    # Variation
    "ClinicalSignificance",
    "DataSetType",
    "DeltaAction",
    "DeltaItem",
    "DeltaItemSeq",
    "Frameshift",
    "LossOfHeterozygosity",
    "Observation",
    "Phenotype",
    "PopulationData",
    "SomaticCondition",
    "SomaticOrigin",
    "VariantProperties",
    "VariationConsequence",
    "VariationData",
    "VariationDataSet",
    "VariationInst",
    "VariationMethod",
    "VariationRef",
    "VariationType",
]
