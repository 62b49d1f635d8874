"""Variation-ref and its parts: instances, properties and population data.

These records come from the variation model (dbSNP); a ``VariationRef``
reaches a sequence as the ``variation`` arm of a feature. Several of their
INTEGER fields are bit sets rather than single codes, e.g. a variant can be
both ``in-gene`` and ``intron``; they decode to ``FlagSet`` so bits added in
newer releases survive a round trip.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.model.general import Dbtag, IntFuzz, ObjectId
from ncbi_seqmodel.model.pub import Pub
from ncbi_seqmodel.model.seq import SeqLiteral, SubSource
from ncbi_seqmodel.model.seqloc import SeqLoc
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.enums import EnumTable, EnumValue, FlagSet, FlagTable
from ncbi_seqmodel.schema.fields import boolean, enum, enums, flags, integer, node, nodes, null, real, string, values
from ncbi_seqmodel.schema.types import LeafKind


class ResourceLink(IntFlag):
    PRESERVED = 1  # clinical, pubmed, cited
    PROVISIONAL = 2  # provisional third party annotations
    HAS3D = 4  # has 3D structure in SNP3D table
    SUBMITTER_LINKOUT = 8
    CLINICAL = 16
    GENOTYPE_KIT = 32


class GeneLocation(IntFlag):
    IN_GENE = 1
    NEAR_GENE_5 = 2
    NEAR_GENE_3 = 4
    INTRON = 8
    DONOR = 16
    ACCEPTOR = 32
    UTR_5 = 64
    UTR_3 = 128
    IN_START_CODON = 256
    IN_STOP_CODON = 512
    INTERGENIC = 1024
    CONSERVED_NONCODING = 2048


class VariantEffect(IntFlag):
    NO_CHANGE = 0
    SYNONYMOUS = 1
    NONSENSE = 2
    MISSENSE = 4
    FRAMESHIFT = 8
    UP_REGULATOR = 16
    DOWN_REGULATOR = 32
    METHYLATION = 64
    STOP_GAIN = 128
    STOP_LOSS = 256


class VariantMapping(IntFlag):
    HAS_OTHER_SNP = 1
    HAS_ASSEMBLY_CONFLICT = 2
    IS_ASSEMBLY_SPECIFIC = 4


class FrequencyValidation(IntFlag):
    IS_MUTATION = 1
    ABOVE_5PCT_ALL = 2
    ABOVE_5PCT_1PLUS = 4
    VALIDATED = 8
    ABOVE_1PCT_ALL = 16
    ABOVE_1PCT_1PLUS = 32


class VariantGenotype(IntFlag):
    IN_HAPLOTYPE_SET = 1
    HAS_GENOTYPES = 2


class QualityCheck(IntFlag):
    CONTIG_ALLELE_MISSING = 1
    WITHDRAWN_BY_SUBMITTER = 2
    NON_OVERLAPPING_ALLELES = 4
    STRAIN_SPECIFIC = 8
    GENOTYPE_CONFLICT = 16


class AlleleOrigin(IntFlag):
    UNKNOWN = 0
    GERMLINE = 1
    SOMATIC = 2
    INHERITED = 4
    PATERNAL = 8
    MATERNAL = 16
    DE_NOVO = 32
    BIPARENTAL = 64
    UNIPARENTAL = 128
    NOT_TESTED = 256
    TESTED_INCONCLUSIVE = 512
    NOT_REPORTED = 1024
    OTHER = 1073741824


class MapWeight(IntEnum):
    IS_UNIQUELY_PLACED = 1
    PLACED_TWICE_ON_SAME_CHROM = 2
    PLACED_TWICE_ON_DIFF_CHROM = 3
    MANY_PLACEMENTS = 10


class Confidence(IntEnum):
    UNKNOWN = 0
    LIKELY_ARTIFACT = 1
    OTHER = 255


class AlleleState(IntEnum):
    UNKNOWN = 0
    HOMOZYGOUS = 1
    HETEROZYGOUS = 2
    HEMIZYGOUS = 3
    NULLIZYGOUS = 4
    OTHER = 255


class PopulationFlags(IntFlag):
    IS_DEFAULT_POPULATION = 1
    IS_MINOR_ALLELE = 2
    IS_RARE_ALLELE = 4


RESOURCE_LINK = FlagTable("VariantProperties.resource-link", ResourceLink)
GENE_LOCATION = FlagTable("VariantProperties.gene-location", GeneLocation)
VARIANT_EFFECT = FlagTable("VariantProperties.effect", VariantEffect)
VARIANT_MAPPING = FlagTable("VariantProperties.mapping", VariantMapping)
FREQUENCY_VALIDATION = FlagTable("VariantProperties.frequency-based-validation", FrequencyValidation)
VARIANT_GENOTYPE = FlagTable("VariantProperties.genotype", VariantGenotype)
QUALITY_CHECK = FlagTable("VariantProperties.quality-check", QualityCheck)
ALLELE_ORIGIN = FlagTable("VariantProperties.allele-origin", AlleleOrigin)
POPULATION_FLAGS = FlagTable("Population-data.flags", PopulationFlags)

MAP_WEIGHT = EnumTable("VariantProperties.map-weight", MapWeight, integer_valued=True)
CONFIDENCE = EnumTable("VariantProperties.confidence", Confidence, integer_valued=True)
ALLELE_STATE = EnumTable("VariantProperties.allele-state", AlleleState, integer_valued=True)


@wire_type("VariantProperties")
@dataclass(frozen=True, kw_only=True)
class VariantProperties(Record):
    version: int = integer("VariantProperties_version")
    resource_link: FlagSet | None = flags("VariantProperties_resource-link", RESOURCE_LINK, optional=True)
    gene_location: FlagSet | None = flags("VariantProperties_gene-location", GENE_LOCATION, optional=True)
    effect: FlagSet | None = flags("VariantProperties_effect", VARIANT_EFFECT, optional=True)
    mapping: FlagSet | None = flags("VariantProperties_mapping", VARIANT_MAPPING, optional=True)
    map_weight: EnumValue | None = enum("VariantProperties_map-weight", MAP_WEIGHT, optional=True)
    frequency_based_validation: FlagSet | None = flags(
        "VariantProperties_frequency-based-validation", FREQUENCY_VALIDATION, optional=True
    )
    genotype: FlagSet | None = flags("VariantProperties_genotype", VARIANT_GENOTYPE, optional=True)
    project_data: tuple[int, ...] | None = values("VariantProperties_project-data", LeafKind.INTEGER, optional=True)
    quality_check: FlagSet | None = flags("VariantProperties_quality-check", QUALITY_CHECK, optional=True)
    confidence: EnumValue | None = enum("VariantProperties_confidence", CONFIDENCE, optional=True)
    other_validation: bool | None = boolean("VariantProperties_other-validation", optional=True)
    allele_origin: FlagSet | None = flags("VariantProperties_allele-origin", ALLELE_ORIGIN, optional=True)
    allele_state: EnumValue | None = enum("VariantProperties_allele-state", ALLELE_STATE, optional=True)
    allele_frequency: float | None = real("VariantProperties_allele-frequency", optional=True)
    is_ancestral_allele: bool | None = boolean("VariantProperties_is-ancestral-allele", optional=True)


@wire_type("Population-data")
@dataclass(frozen=True, kw_only=True)
class PopulationData(Record):
    """Allele frequency data for one population."""

    population: str = string("Population-data_population")
    genotype_frequency: float | None = real("Population-data_genotype-frequency", optional=True)
    chromosomes_tested: int | None = integer("Population-data_chromosomes-tested", optional=True)
    sample_ids: tuple[ObjectId, ...] | None = nodes("Population-data_sample-ids", "ObjectId", optional=True)
    allele_frequency: float | None = real("Population-data_allele-frequency", optional=True)
    flags: FlagSet | None = flags("Population-data_flags", POPULATION_FLAGS, optional=True)


class ClinicalSignificance(IntEnum):
    UNKNOWN = 0
    UNTESTED = 1
    NON_PATHOGENIC = 2
    PROBABLE_NON_PATHOGENIC = 3
    PROBABLE_PATHOGENIC = 4
    PATHOGENIC = 5
    DRUG_RESPONSE = 6
    HISTOCOMPATIBILITY = 7
    OTHER = 255


PHENOTYPE_SIGNIFICANCE = EnumTable("Phenotype.clinical-significance", ClinicalSignificance, integer_valued=True)


@wire_type("Phenotype")
@dataclass(frozen=True, kw_only=True)
class Phenotype(Record):
    source: str | None = string("Phenotype_source", optional=True)
    term: str | None = string("Phenotype_term", optional=True)
    xref: tuple[Dbtag, ...] | None = nodes("Phenotype_xref", "Dbtag", optional=True)
    clinical_significance: EnumValue | None = enum(
        "Phenotype_clinical-significance", PHENOTYPE_SIGNIFICANCE, optional=True
    )


@wire_type("Delta-item_seq")
@dataclass(frozen=True, kw_only=True)
class DeltaItemSeq(Choice):
    literal: SeqLiteral | None = node("Delta-item_seq_literal", "SeqLiteral", optional=True)
    loc: SeqLoc | None = node("Delta-item_seq_loc", "SeqLoc", optional=True)
    this: bool | None = null("Delta-item_seq_this")  # same location as the variation


class DeltaAction(IntEnum):
    MORPH = 0  # replace the location with the sequence
    OFFSET = 1  # go downstream by distance given by multiplier
    DEL_AT = 2  # excise the sequence at the location
    INS_BEFORE = 3  # insert the sequence before the location


DELTA_ITEM_ACTION = EnumTable("Delta-item.action", DeltaAction, integer_valued=True)


@wire_type("Delta-item")
@dataclass(frozen=True, kw_only=True)
class DeltaItem(Record):
    """One edit of a variation instance: a sequence, repeated and placed by ``action``."""

    seq: DeltaItemSeq | None = node("Delta-item_seq", "DeltaItemSeq", optional=True, inline=True)
    multiplier: int | None = integer("Delta-item_multiplier", optional=True)
    multiplier_fuzz: IntFuzz | None = node("Delta-item_multiplier-fuzz", "IntFuzz", optional=True)
    action: EnumValue = enum("Delta-item_action", DELTA_ITEM_ACTION, default=DeltaAction.MORPH)


class VariationType(IntEnum):
    UNKNOWN = 0
    IDENTITY = 1  # no change from the reference
    INV = 2  # inversion
    SNV = 3  # single nucleotide variation
    MNP = 4  # multiple nucleotide polymorphism
    DELINS = 5  # deletion-insertion
    DEL = 6
    INS = 7
    MICROSATELLITE = 8
    TRANSPOSON = 9
    CNV = 10  # copy number variation
    DIRECT_COPY = 11
    REV_DIRECT_COPY = 12
    EVERTED_COPY = 13
    TRANSLOCATION = 14
    PROT_MISSENSE = 15
    PROT_NONSENSE = 16
    PROT_NEUTRAL = 17
    PROT_SILENT = 18
    PROT_OTHER = 19
    OTHER = 255


class Observation(IntFlag):
    ASSERTED = 1  # inst represents the asserted base at a position
    REFERENCE = 2  # inst represents the reference base at the position
    VARIANT = 4  # inst represents the observed variant at a given position


VARIATION_INST_TYPE = EnumTable("Variation-inst.type", VariationType, integer_valued=True)
VARIATION_OBSERVATION = FlagTable("Variation-inst.observation", Observation)


@wire_type("Variation-inst")
@dataclass(frozen=True, kw_only=True)
class VariationInst(Record):
    type: EnumValue = enum("Variation-inst_type", VARIATION_INST_TYPE)
    delta: tuple[DeltaItem, ...] = nodes("Variation-inst_delta", "DeltaItem")
    observation: FlagSet | None = flags("Variation-inst_observation", VARIATION_OBSERVATION, optional=True)


class DataSetType(IntEnum):
    UNKNOWN = 0
    COMPOUND = 1  # complex change expressed in terms of members
    PRODUCTS = 2  # different products arising from the same variation
    HAPLOTYPE = 3  # changes on the same allele
    GENOTYPE = 4  # changes on different alleles in the same genome
    MOSAIC = 5  # different genomes in the same organism
    INDIVIDUAL = 6  # same organism, allele-agnostic
    POPULATION = 7  # population
    ALLELES = 8  # set of alleles observed at the location
    PACKAGE = 9  # set of unrelated variations
    OTHER = 255


VARIATION_SET_TYPE = EnumTable("Variation-ref.data.set.type", DataSetType, integer_valued=True)


@wire_type("Variation-ref_data_set")
@dataclass(frozen=True, kw_only=True)
class VariationDataSet(Record):
    type: EnumValue = enum("Variation-ref_data_set_type", VARIATION_SET_TYPE)
    variations: tuple[VariationRef, ...] = nodes("Variation-ref_data_set_variations", "VariationRef")
    name: str | None = string("Variation-ref_data_set_name", optional=True)


@wire_type("Variation-ref_data")
@dataclass(frozen=True, kw_only=True)
class VariationData(Choice):
    unknown: bool | None = null("Variation-ref_data_unknown")
    note: str | None = string("Variation-ref_data_note", optional=True)  # free-form
    uniparental_disomy: bool | None = null("Variation-ref_data_uniparental-disomy")
    instance: VariationInst | None = node("Variation-ref_data_instance", "VariationInst", optional=True)
    set: VariationDataSet | None = node("Variation-ref_data_set", "VariationDataSet", optional=True, inline=True)
    complex: bool | None = null("Variation-ref_data_complex")  # not describable as instances


@wire_type("Variation-ref_consequence_E_frameshift")
@dataclass(frozen=True, kw_only=True)
class Frameshift(Record):
    phase: int | None = integer("Variation-ref_consequence_E_frameshift_phase", optional=True)
    x_length: int | None = integer("Variation-ref_consequence_E_frameshift_x-length", optional=True)


@wire_type("Variation-ref_consequence_E_loss-of-heterozygosity")
@dataclass(frozen=True, kw_only=True)
class LossOfHeterozygosity(Record):
    # typically the normal tissue
    reference: str | None = string("Variation-ref_consequence_E_loss-of-heterozygosity_reference", optional=True)
    # typically the tumor tissue
    test: str | None = string("Variation-ref_consequence_E_loss-of-heterozygosity_test", optional=True)


@wire_type("Variation-ref_consequence_E")
@dataclass(frozen=True, kw_only=True)
class VariationConsequence(Choice):
    unknown: bool | None = null("Variation-ref_consequence_E_unknown")
    splicing: bool | None = null("Variation-ref_consequence_E_splicing")
    note: str | None = string("Variation-ref_consequence_E_note", optional=True)
    variation: VariationRef | None = node("Variation-ref_consequence_E_variation", "VariationRef", optional=True)
    frameshift: Frameshift | None = node(
        "Variation-ref_consequence_E_frameshift", "Frameshift", optional=True, inline=True
    )
    loss_of_heterozygosity: LossOfHeterozygosity | None = node(
        "Variation-ref_consequence_E_loss-of-heterozygosity", "LossOfHeterozygosity", optional=True, inline=True
    )


@wire_type("Variation-ref_somatic-origin_E_condition")
@dataclass(frozen=True, kw_only=True)
class SomaticCondition(Record):
    description: str | None = string("Variation-ref_somatic-origin_E_condition_description", optional=True)
    object_id: tuple[Dbtag, ...] | None = nodes(
        "Variation-ref_somatic-origin_E_condition_object-id", "Dbtag", optional=True
    )


@wire_type("Variation-ref_somatic-origin_E")
@dataclass(frozen=True, kw_only=True)
class SomaticOrigin(Record):
    source: SubSource | None = node("Variation-ref_somatic-origin_E_source", "SubSource", optional=True)
    condition: SomaticCondition | None = node(
        "Variation-ref_somatic-origin_E_condition", "SomaticCondition", optional=True, inline=True
    )


class VariationMethod(IntEnum):
    UNKNOWN = 0
    BAC_ACGH = 1
    COMPUTATIONAL = 2
    CURATED = 3
    DIGITAL_ARRAY = 4
    EXPRESSION_ARRAY = 5
    FISH = 6
    FLANKING_SEQUENCE = 7
    MAPH = 8
    MCD_ANALYSIS = 9
    MLPA = 10
    OEA_ASSEMBLY = 11
    OLIGO_ACGH = 12
    PAIRED_END = 13
    PCR = 14
    QPCR = 15
    READ_DEPTH = 16
    ROMA = 17
    RT_PCR = 18
    SAGE = 19
    SEQUENCE_ALIGNMENT = 20
    SEQUENCING = 21
    SNP_ARRAY = 22
    SOUTHERN = 23
    WESTERN = 24
    OPTICAL_MAPPING = 25
    OTHER = 255


VARIATION_METHOD = EnumTable("Variation-ref.method", VariationMethod, integer_valued=True)


@wire_type("Variation-ref")
@dataclass(frozen=True, kw_only=True)
class VariationRef(Record):
    """A variation: what changed, how it was observed and what it means."""

    id: Dbtag | None = node("Variation-ref_id", "Dbtag", optional=True)
    parent_id: Dbtag | None = node("Variation-ref_parent-id", "Dbtag", optional=True)
    sample_id: ObjectId | None = node("Variation-ref_sample-id", "ObjectId", optional=True)
    other_ids: tuple[Dbtag, ...] | None = nodes("Variation-ref_other-ids", "Dbtag", optional=True)
    name: str | None = string("Variation-ref_name", optional=True)
    synonyms: tuple[str, ...] | None = values("Variation-ref_synonyms", optional=True)
    description: str | None = string("Variation-ref_description", optional=True)
    phenotype: tuple[Phenotype, ...] | None = nodes("Variation-ref_phenotype", "Phenotype", optional=True)
    method: tuple[EnumValue, ...] | None = enums(
        "Variation-ref_method", VARIATION_METHOD, optional=True, item_tag="Variation-ref_method_E"
    )
    population_data: tuple[PopulationData, ...] | None = nodes(
        "Variation-ref_population-data", "PopulationData", optional=True
    )
    variant_prop: VariantProperties | None = node("Variation-ref_variant-prop", "VariantProperties", optional=True)
    pub: Pub | None = node("Variation-ref_pub", "Pub", optional=True)
    data: VariationData = node("Variation-ref_data", "VariationData", inline=True)
    consequence: tuple[VariationConsequence, ...] | None = nodes(
        "Variation-ref_consequence", "VariationConsequence", optional=True
    )
    somatic_origin: tuple[SomaticOrigin, ...] | None = nodes(
        "Variation-ref_somatic-origin", "SomaticOrigin", optional=True
    )

    def members(self) -> tuple[VariationRef, ...]:
        """Variations of a set; empty for any other kind of data."""
        if self.data.set is None:
            return ()
        return self.data.set.variations
