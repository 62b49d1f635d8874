"""Tests for model construction rules and helpers."""

from __future__ import annotations

import dataclasses

import pytest

from ncbi_seqmodel import (
    Bioseq,
    BioseqSet,
    BioseqSetClass,
    Date,
    DateStd,
    Dbtag,
    Mol,
    NumEnum,
    ObjectId,
    OrgRef,
    Pub,
    Repr,
    SchemaViolation,
    SeqData,
    SeqEntry,
    Seqdesc,
    SeqGap,
    SeqId,
    SeqInst,
    SeqInterval,
    SeqLoc,
    TextseqId,
)
from ncbi_seqmodel.model import Choice
from ncbi_seqmodel.model.seq import GapType
from ncbi_seqmodel.schema.dispatch import MODEL_TYPES, fields_of

CHOICE_TYPES = sorted((cls for cls in MODEL_TYPES if issubclass(cls, Choice)), key=lambda cls: cls.TAG)


def gi(number: int) -> SeqId:
    return SeqId(gi=number)


class TestChoice:
    """Tests for the exactly-one-variant rule."""

    def test_no_variant(self) -> None:
        """Test a choice with no arm set fails."""
        with pytest.raises(SchemaViolation) as exc_info:
            SeqId()

        assert "no variant" in exc_info.value.message
        assert exc_info.value.path == ("Seq-id",)

    def test_two_variants(self) -> None:
        """Test a choice with two arms set fails."""
        with pytest.raises(SchemaViolation) as exc_info:
            SeqId(gi=1, gibbsq=2)

        assert "conflicting" in exc_info.value.message

    @pytest.mark.parametrize("cls", CHOICE_TYPES, ids=lambda cls: cls.TAG)
    def test_every_choice_needs_a_variant(self, cls: type[Choice]) -> None:
        """Test each registered choice rejects an empty construction."""
        with pytest.raises(SchemaViolation) as exc_info:
            cls()

        assert exc_info.value.path == (cls.TAG,)

    @pytest.mark.parametrize(
        "cls", [cls for cls in CHOICE_TYPES if len(fields_of(cls)) > 1], ids=lambda cls: cls.TAG
    )
    def test_every_choice_rejects_two_variants(self, cls: type[Choice]) -> None:
        """Test each registered choice rejects two populated arms."""
        first, second = fields_of(cls)[:2]

        with pytest.raises(SchemaViolation) as exc_info:
            cls(**{first.name: True, second.name: True})

        assert "conflicting" in exc_info.value.message

    def test_variant_and_value(self) -> None:
        """Test the populated arm is reported by wire name."""
        seq_id = SeqId(named_annot_track=TextseqId(accession="NA000001"))

        assert seq_id.arm == "named_annot_track"
        assert seq_id.variant == "named-annot-track"
        assert seq_id.value == TextseqId(accession="NA000001")

    def test_null_arm(self) -> None:
        """Test a NULL arm is set with True."""
        loc = SeqLoc(null=True)
        assert loc.variant == "null"


class TestRecord:
    """Tests for record construction."""

    def test_mandatory_field_none(self) -> None:
        """Test None in a mandatory field fails."""
        with pytest.raises(SchemaViolation) as exc_info:
            SeqInterval(from_=1, to=None, id=gi(5))

        assert "Seq-interval_to" in exc_info.value.message

    def test_lists_become_tuples(self) -> None:
        """Test repeated fields are stored as tuples."""
        bioseq = Bioseq(
            id=[gi(1), gi(2)],
            inst=SeqInst(repr=Repr.VIRTUAL, mol=Mol.DNA),
        )
        assert bioseq.id == (gi(1), gi(2))

    def test_frozen(self, bioseq: Bioseq) -> None:
        """Test records cannot be modified after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            bioseq.inst = None  # type: ignore[misc]

    def test_defaults(self) -> None:
        """Test DEFAULT values from the data model."""
        inst = SeqInst(repr=Repr.VIRTUAL, mol=Mol.AA)
        assert inst.topology == 1
        assert BioseqSet(seq_set=[]).class_ == BioseqSetClass.NOT_SET

    def test_type_specific_checks(self) -> None:
        """Test _check hooks run on construction."""
        with pytest.raises(SchemaViolation):
            DateStd(year=2020, month=13)
        with pytest.raises(SchemaViolation):
            NumEnum(num=3, names=["a", "b"])
        with pytest.raises(SchemaViolation):
            SeqInterval(from_=20, to=10, id=gi(5))

    def test_present_fields(self) -> None:
        """Test only populated fields are listed."""
        seq_id = TextseqId(accession="U00001", version=1)
        assert seq_id.present_fields() == {"accession": "U00001", "version": 1}


class TestSeqInstLength:
    """Tests for declared length against sequence data."""

    def test_text_alphabet(self) -> None:
        """Test one residue per character."""
        SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=4, seq_data=SeqData(iupacna="ACGT"))

        with pytest.raises(SchemaViolation) as exc_info:
            SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=5, seq_data=SeqData(iupacna="ACGT"))

        assert "does not match iupacna" in exc_info.value.message

    def test_ncbi2na_padding(self) -> None:
        """Test four residues per byte with a padded last byte."""
        data = SeqData(ncbi2na=b"\x1b\x2d\x40")
        for length in (9, 10, 12):
            SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=length, seq_data=data)

        for length in (8, 13):
            with pytest.raises(SchemaViolation):
                SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=length, seq_data=data)

    def test_ncbi4na(self) -> None:
        """Test two residues per byte."""
        data = SeqData(ncbi4na=b"\x12\x48")
        SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=3, seq_data=data)
        with pytest.raises(SchemaViolation):
            SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=5, seq_data=data)

    def test_probability_alphabet(self) -> None:
        """Test ncbipna uses five bytes per residue."""
        data = SeqData(ncbipna=bytes(10))
        assert data.holds(2)
        assert not data.holds(3)
        assert data.residue_count() == 2

    def test_residue_count(self) -> None:
        """Test residue counts where the data determines them."""
        assert SeqData(iupacaa="MKT").residue_count() == 3
        assert SeqData(ncbi8aa=b"\x01\x02").residue_count() == 2
        assert SeqData(ncbi2na=b"\x00").residue_count() is None

    def test_gap_holds_any_length(self) -> None:
        """Test gap data says nothing about length."""
        data = SeqData(gap=SeqGap(type=GapType.SCAFFOLD))
        SeqInst(repr=Repr.CONST, mol=Mol.DNA, length=5000, seq_data=data)

    def test_missing_length(self) -> None:
        """Test length is mandatory unless the sequence is virtual."""
        SeqInst(repr=Repr.VIRTUAL, mol=Mol.DNA)

        with pytest.raises(SchemaViolation) as exc_info:
            SeqInst(repr=Repr.RAW, mol=Mol.DNA, seq_data=SeqData(iupacna="A"))

        assert "Seq-inst_length" in exc_info.value.message

    def test_raw_needs_data(self) -> None:
        """Test a raw sequence must carry residues."""
        with pytest.raises(SchemaViolation):
            SeqInst(repr=Repr.RAW, mol=Mol.DNA, length=10)

    def test_negative_length(self) -> None:
        """Test a negative length fails."""
        with pytest.raises(SchemaViolation):
            SeqInst(repr=Repr.VIRTUAL, mol=Mol.DNA, length=-1)


class TestSeqIdAndLoc:
    """Tests for identifier and location helpers."""

    def test_seq_id_str(self) -> None:
        """Test FASTA-style labels."""
        assert str(SeqId(genbank=TextseqId(accession="U00001", version=1))) == "genbank|U00001.1"
        assert str(SeqId(local=ObjectId(str="contig-7"))) == "lcl|contig-7"
        assert str(SeqId(general=Dbtag(db="TRACE", tag=ObjectId(id=42)))) == "gnl|TRACE|42"
        assert str(gi(1234)) == "gi|1234"

    def test_seq_ids_are_values(self) -> None:
        """Test equal identifiers compare and hash equal."""
        first = SeqId(other=TextseqId(accession="NM_000001", version=2))
        second = SeqId(other=TextseqId(accession="NM_000001", version=2))

        assert first == second
        assert len({first, second}) == 1

    def test_seq_loc_ids(self) -> None:
        """Test ids are collected through nested locations."""
        loc = SeqLoc(
            mix=[
                SeqLoc(int=SeqInterval(from_=0, to=99, id=gi(1))),
                SeqLoc(whole=gi(2)),
                SeqLoc(packed_int=[SeqInterval(from_=5, to=6, id=gi(3))]),
            ]
        )
        assert loc.seq_ids() == {gi(1), gi(2), gi(3)}

    def test_interval_length(self) -> None:
        """Test intervals are inclusive at both ends."""
        assert SeqInterval(from_=10, to=19, id=gi(1)).length == 10


class TestContainers:
    """Tests for Bioseq, Bioseq-set and Seq-entry helpers."""

    def test_bioseq_title(self, bioseq: Bioseq) -> None:
        """Test the title descriptor is found."""
        assert bioseq.title == "U00001 test sequence"
        assert bioseq.length == 10
        assert bioseq.descriptors("molinfo") == []

    def test_bioseq_needs_id(self) -> None:
        """Test a Bioseq must have at least one Seq-id."""
        with pytest.raises(SchemaViolation):
            Bioseq(id=[], inst=SeqInst(repr=Repr.VIRTUAL, mol=Mol.DNA))

    def test_bioseqs_depth_first(self, nuc_prot_entry: SeqEntry, bioseq_factory) -> None:
        """Test sequences are listed in document order through nested sets."""
        outer = SeqEntry(
            set=BioseqSet(
                class_=BioseqSetClass.GENBANK,
                seq_set=[nuc_prot_entry, SeqEntry(seq=bioseq_factory("U00009"))],
            )
        )
        accessions = [b.id[0].genbank.accession for b in outer.bioseqs()]

        assert accessions == ["U00001", "AAA00001", "U00009"]
        assert len(outer.set) == 2

    def test_org_ref_taxid(self) -> None:
        """Test the taxon id is read from the db tags."""
        org = OrgRef(
            taxname="Homo sapiens",
            db=[Dbtag(db="GeneID", tag=ObjectId(id=1)), Dbtag(db="taxon", tag=ObjectId(id=9606))],
        )
        assert org.taxid == 9606
        assert OrgRef(taxname="unknown").taxid is None

    def test_pub_pmids(self) -> None:
        """Test PubMed ids are collected from equivalent citations."""
        pub = Pub(equiv=[Pub(muid=88000001), Pub(pmid=12345), Pub(equiv=[Pub(pmid=67890)])])
        assert pub.pmids() == [12345, 67890]

    def test_descriptor_with_date(self) -> None:
        """Test a nested choice inside a descriptor."""
        desc = Seqdesc(update_date=Date(std=DateStd(year=2024, month=2, day=29)))
        assert desc.variant == "update-date"
