"""Tests for encoding model trees as NCBI XML."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from lxml import etree

from ncbi_seqmodel import (
    BioSource,
    Bioseq,
    Decoder,
    Encoder,
    FlagSet,
    GbQual,
    Mol,
    MolInfo,
    OrgRef,
    PopulationData,
    Repr,
    RnaRef,
    RnaRefExt,
    RnaType,
    SchemaViolation,
    SeqData,
    SeqEntry,
    SeqFeat,
    SeqFeatData,
    Seqdesc,
    SeqId,
    SeqInst,
    SeqInterval,
    SeqLoc,
    TrnaAa,
    TrnaExt,
    UnknownCode,
    VariantProperties,
    VariationData,
    VariationMethod,
    VariationRef,
    decode,
    decode_as,
    encode,
    encode_to,
)
from ncbi_seqmodel.model.seqloc import NaStrand
from ncbi_seqmodel.model.variation import GeneLocation, PopulationFlags
from tests.fixture_loader import load_fixture_bytes


class TestRoundTrip:
    """Tests that decode(encode(x)) == x."""

    def test_built_entry(self, nuc_prot_entry: SeqEntry) -> None:
        """Test a programmatic nuc-prot set survives a round trip."""
        assert decode(encode(nuc_prot_entry)) == nuc_prot_entry

    def test_fixture_document(self, bioseq_set_xml: bytes) -> None:
        """Test a decoded export re-encodes to the same tree."""
        entry = decode(bioseq_set_xml)
        assert decode(encode(entry)) == entry

    def test_single_bioseq_entry(self, bioseq: Bioseq) -> None:
        """Test a Seq-entry holding one Bioseq keeps its Seq-entry root."""
        entry = SeqEntry(seq=bioseq)
        data = encode(entry)

        assert etree.fromstring(data).tag == "Seq-entry"
        assert decode(data) == entry

    def test_seq_loc(self) -> None:
        """Test nested locations with wrapped lists and enums."""
        loc = SeqLoc(
            mix=[
                SeqLoc(int=SeqInterval(from_=0, to=9, strand=NaStrand.PLUS, id=SeqId(gi=1))),
                SeqLoc(packed_int=[SeqInterval(from_=20, to=29, id=SeqId(gi=1))]),
                SeqLoc(null=True),
            ]
        )
        assert decode_as(encode(loc), SeqLoc) == loc

    def test_null_and_packed_data(self) -> None:
        """Test NULL fields and octet data."""
        bioseq = Bioseq(
            id=[SeqId(gi=5)],
            descr=[Seqdesc(source=BioSource(org=OrgRef(taxname="Escherichia coli"), is_focus=True))],
            inst=SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=7, seq_data=SeqData(ncbi2na=b"\xe4\x1b")),
        )
        entry = SeqEntry(seq=bioseq)
        assert decode(encode(entry)) == entry

    def test_flags(self) -> None:
        """Test flag fields including preserved unknown bits."""
        props = VariantProperties(
            version=2,
            gene_location=FlagSet(GeneLocation.IN_GENE | GeneLocation.UTR_3, unknown_bits=1 << 20),
            project_data=[1, 2, 3],
            is_ancestral_allele=False,
        )
        assert decode_as(encode(props), VariantProperties) == props

    def test_variant_fixture(self) -> None:
        """Test the decoded variation document re-encodes to the same record."""
        props = decode_as(load_fixture_bytes("variant_properties.xml"), VariantProperties)
        assert decode_as(encode(props), VariantProperties) == props

    def test_annotated_fixture(self) -> None:
        """Test a feature table with gene, coding region and variation re-encodes."""
        entry = decode(load_fixture_bytes("annotated_bioseq.xml"))
        assert decode(encode(entry)) == entry

    def test_built_feature(self) -> None:
        """Test a feature built in code, with inline choices and a wrapped list."""
        feat = SeqFeat(
            data=SeqFeatData(
                rna=RnaRef(
                    type=RnaType.TRNA,
                    ext=RnaRefExt(trna=TrnaExt(aa=TrnaAa(ncbieaa=77), codon=[10, 11])),
                )
            ),
            location=SeqLoc(whole=SeqId(gi=7)),
            qual=[GbQual(qual="product", val="tRNA-Met")],
        )
        root = etree.fromstring(encode(feat))

        assert root.find("Seq-feat_data/SeqFeatData/SeqFeatData_rna/RNA-ref/RNA-ref_type").get("value") == "tRNA"
        assert root.find(".//RNA-ref_ext/RNA-ref_ext_tRNA/Trna-ext/Trna-ext_aa/Trna-ext_aa_ncbieaa").text == "77"
        assert decode_as(encode(feat), SeqFeat) == feat


class TestWireForm:
    """Tests for the element layout of encoded values."""

    def test_bioseq_set_root(self, nuc_prot_entry: SeqEntry) -> None:
        """Test a set entry is written with a Bioseq-set root."""
        root = etree.fromstring(encode(nuc_prot_entry))

        assert root.tag == "Bioseq-set"
        assert root.find("Bioseq-set_class").get("value") == "nuc-prot"
        assert len(root.find("Bioseq-set_seq-set")) == 2

    def test_declaration(self, bioseq: Bioseq) -> None:
        """Test output starts with a UTF-8 XML declaration."""
        assert encode(SeqEntry(seq=bioseq)).startswith(b"<?xml")

    def test_integer_valued_enum(self) -> None:
        """Test INTEGER enumerations carry name and code."""
        root = etree.fromstring(encode(MolInfo()))
        biomol = root.find("MolInfo_biomol")

        assert biomol.get("value") == "unknown"
        assert biomol.text == "0"

    def test_unknown_code_reencodes_exactly(self) -> None:
        """Test an unknown code and its name are written back unchanged."""
        document = b"<MolInfo><MolInfo_biomol value='future-rna'>77</MolInfo_biomol></MolInfo>"
        molinfo = decode_as(document, MolInfo)
        biomol = etree.fromstring(encode(molinfo)).find("MolInfo_biomol")

        assert molinfo.biomol == UnknownCode(code=77, name="future-rna")
        assert biomol.get("value") == "future-rna"
        assert biomol.text == "77"

    def test_unknown_enumerated_code_kept(self) -> None:
        """Test an unknown ENUMERATED value keeps its code next to its name."""
        document = (
            b"<Seq-inst><Seq-inst_repr value='virtual'/>"
            b"<Seq-inst_mol value='future-mol'>9</Seq-inst_mol></Seq-inst>"
        )
        inst = decode_as(document, SeqInst)
        mol = etree.fromstring(encode(inst)).find("Seq-inst_mol")

        assert inst.mol == UnknownCode(code=9, name="future-mol")
        assert mol.get("value") == "future-mol"
        assert mol.text == "9"
        assert decode_as(encode(inst), SeqInst) == inst

    def test_anonymous_enum_list_items(self) -> None:
        """Test Variation-ref methods are written as _E items with name and code."""
        variation = VariationRef(
            method=[VariationMethod.SEQUENCING, VariationMethod.PCR],
            data=VariationData(note="unplaced"),
        )
        items = etree.fromstring(encode(variation)).findall("Variation-ref_method/Variation-ref_method_E")

        assert [(item.get("value"), item.text) for item in items] == [("sequencing", "21"), ("pcr", "14")]

    def test_unknown_code_without_name(self) -> None:
        """Test an unknown code without a name is written as text only."""
        biomol = etree.fromstring(encode(MolInfo(biomol=UnknownCode(code=90)))).find("MolInfo_biomol")

        assert biomol.get("value") is None
        assert biomol.text == "90"

    def test_wrapped_enum(self) -> None:
        """Test strand is written inside its Na-strand element."""
        interval = SeqInterval(from_=0, to=1, strand=NaStrand.BOTH_REV, id=SeqId(gi=3))
        root = etree.fromstring(encode(interval))

        assert root.find("Seq-interval_strand/Na-strand").get("value") == "both-rev"

    def test_octets_uppercase_hex(self) -> None:
        """Test octet strings are written as uppercase hex."""
        inst = SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=4, seq_data=SeqData(ncbi4na=b"\x1f\xab"))
        root = etree.fromstring(encode(inst))

        assert root.find("Seq-inst_seq-data/Seq-data/Seq-data_ncbi4na/NCBI4na").text == "1FAB"

    def test_flag_name(self) -> None:
        """Test a single named flag is written with its name."""
        data = PopulationData(population="CEU", flags=FlagSet(PopulationFlags.IS_MINOR_ALLELE))
        element = etree.fromstring(encode(data)).find("Population-data_flags")

        assert element.get("value") == "is-minor-allele"
        assert element.text == "2"

    def test_pretty_print(self, bioseq: Bioseq) -> None:
        """Test indented output decodes to the same tree."""
        entry = SeqEntry(seq=bioseq)
        data = Encoder(pretty_print=True).encode(entry)

        assert b"\n" in data
        assert decode(data) == entry


class TestEncodeTargets:
    """Tests for encode_to targets."""

    def test_stream(self, bioseq: Bioseq) -> None:
        """Test writing to a binary stream."""
        buffer = io.BytesIO()
        encode_to(SeqEntry(seq=bioseq), buffer)

        assert decode(buffer.getvalue()).seq == bioseq

    def test_path(self, tmp_path: Path, nuc_prot_entry: SeqEntry) -> None:
        """Test writing to a pathlib.Path."""
        path = tmp_path / "out.xml"
        encode_to(nuc_prot_entry, path)

        assert Decoder().decode(path) == nuc_prot_entry


class TestEncodeErrors:
    """Tests for trees that cannot be encoded."""

    def test_invalid_tree(self) -> None:
        """Test an ill-typed tree is rejected before writing."""
        inst = SeqInst(repr=Repr.VIRTUAL, mol=Mol.DNA)
        object.__setattr__(inst, "length", "ten")

        with pytest.raises(SchemaViolation) as exc_info:
            encode(inst)

        assert exc_info.value.path == ("Seq-inst", "Seq-inst_length")

    def test_control_characters(self) -> None:
        """Test text that XML cannot carry is reported with its path."""
        desc = Seqdesc(comment="bell\x07")

        with pytest.raises(SchemaViolation) as exc_info:
            Encoder(validate_first=False).encode(desc)

        assert exc_info.value.path[-1] == "Seqdesc_comment"

    def test_nesting_beyond_recursion_limit(self) -> None:
        """Test a tree too deep to write fails with its path."""
        loc = SeqLoc(null=True)
        for _ in range(2000):
            loc = SeqLoc(mix=[loc])

        with pytest.raises(SchemaViolation) as exc_info:
            Encoder(validate_first=False).encode(loc)

        assert "recursion limit" in exc_info.value.message
        assert exc_info.value.path[:3] == ("Seq-loc", "Seq-loc_mix", "Seq-loc")
