"""Tests for the tree validator."""

from __future__ import annotations

import pytest

from ncbi_seqmodel import (
    Bioseq,
    BioseqSet,
    PopulationData,
    SchemaViolation,
    SeqEntry,
    SeqId,
    SeqInterval,
    SeqLoc,
    TreeValidator,
    ValidationResult,
    find_violations,
    is_valid,
    validate,
)
from ncbi_seqmodel.model.seqloc import NaStrand


def corrupt(obj, name: str, value) -> None:
    """Bypass the frozen dataclass to build an invalid tree."""
    object.__setattr__(obj, name, value)


class TestTreeValidator:
    """Tests for TreeValidator."""

    def test_valid_tree(self, nuc_prot_entry: SeqEntry) -> None:
        """Test a constructed tree has no problems."""
        result = TreeValidator().validate(nuc_prot_entry)

        assert isinstance(result, ValidationResult)
        assert result.is_valid
        assert result.error_count == 0

    def test_not_a_model_object(self) -> None:
        """Test a plain value is reported rather than walked."""
        result = TreeValidator().validate("Seq-entry")  # type: ignore[arg-type]

        assert not result.is_valid
        assert "Not a model object" in result.errors[0].message

    def test_max_errors(self, bioseq: Bioseq) -> None:
        """Test collection stops at max_errors."""
        corrupt(bioseq, "id", ("gi|1", "gi|2", "gi|3"))
        result = TreeValidator(max_errors=2).validate(bioseq)

        assert result.error_count == 2


class TestTypeChecks:
    """Tests for values of the wrong type."""

    def test_wrong_leaf_type(self, bioseq: Bioseq) -> None:
        """Test a string where an integer belongs."""
        corrupt(bioseq.inst, "length", "ten")

        with pytest.raises(SchemaViolation) as exc_info:
            validate(bioseq)

        assert "Seq-inst_length" in exc_info.value.message
        assert exc_info.value.path == ("Bioseq", "Bioseq_inst", "Seq-inst", "Seq-inst_length")

    def test_wrong_node_type(self, bioseq: Bioseq) -> None:
        """Test a plain string where a Seq-id belongs."""
        corrupt(bioseq, "id", ("gi|1",))

        with pytest.raises(SchemaViolation) as exc_info:
            validate(bioseq)

        assert "expects SeqId, got str" in exc_info.value.message
        assert exc_info.value.path == ("Bioseq", "Bioseq_id")

    def test_wrong_enum_table(self, bioseq: Bioseq) -> None:
        """Test a member of another enumeration is rejected."""
        corrupt(bioseq.inst, "mol", NaStrand.PLUS)

        with pytest.raises(SchemaViolation) as exc_info:
            validate(bioseq)

        assert "Seq-inst.mol" in exc_info.value.message

    def test_nan_real_rejected(self) -> None:
        """Test a NaN frequency fails validation instead of encoding unreadable text."""
        population = PopulationData(population="CEU", allele_frequency=float("nan"))

        with pytest.raises(SchemaViolation) as exc_info:
            validate(population)

        assert exc_info.value.path == ("Population-data", "Population-data_allele-frequency")

    def test_infinite_real_accepted(self) -> None:
        """Test infinities stay valid since they decode again."""
        assert is_valid(PopulationData(population="CEU", allele_frequency=float("inf")))

    def test_list_field_not_sequence(self, bioseq: Bioseq) -> None:
        """Test a repeated field holding a single node."""
        corrupt(bioseq, "id", SeqId(gi=1))

        with pytest.raises(SchemaViolation) as exc_info:
            validate(bioseq)

        assert "must be a sequence" in exc_info.value.message


class TestStructure:
    """Tests for arity, mandatory fields and type-specific rules."""

    def test_missing_mandatory(self) -> None:
        """Test a mandatory field cleared after construction."""
        interval = SeqInterval(from_=0, to=9, id=SeqId(gi=1))
        corrupt(interval, "to", None)

        with pytest.raises(SchemaViolation) as exc_info:
            validate(interval)

        assert exc_info.value.message == "Mandatory field 'Seq-interval_to' is missing"

    def test_two_variants(self) -> None:
        """Test a choice given a second arm after construction."""
        seq_id = SeqId(gi=1)
        corrupt(seq_id, "gibbsq", 5)

        with pytest.raises(SchemaViolation) as exc_info:
            validate(seq_id)

        assert "found 2" in exc_info.value.message

    def test_type_specific_rule(self, bioseq: Bioseq) -> None:
        """Test a length that no longer matches the residues."""
        corrupt(bioseq.inst, "length", 11)

        with pytest.raises(SchemaViolation) as exc_info:
            validate(bioseq)

        assert "does not match iupacna" in exc_info.value.message
        assert exc_info.value.path[-1] == "Seq-inst"

    def test_errors_in_document_order(self, bioseq: Bioseq) -> None:
        """Test find_violations reports every problem."""
        corrupt(bioseq, "id", ("gi|1",))
        corrupt(bioseq.inst, "length", "ten")
        errors = find_violations(bioseq)

        assert [e.path[-1] for e in errors] == ["Bioseq_id", "Seq-inst_length"]


class TestCyclesAndDepth:
    """Tests for shared nodes and deep trees."""

    def test_own_ancestor(self, bioseq: Bioseq) -> None:
        """Test a set that contains itself."""
        outer = BioseqSet(seq_set=[SeqEntry(seq=bioseq)])
        corrupt(outer, "seq_set", (SeqEntry(set=outer),))

        with pytest.raises(SchemaViolation) as exc_info:
            validate(outer)

        assert "its own ancestor" in exc_info.value.message
        assert exc_info.value.path == (
            "Bioseq-set",
            "Bioseq-set_seq-set",
            "Seq-entry",
            "Seq-entry_set",
            "Bioseq-set",
        )

    def test_shared_node_is_not_a_cycle(self, bioseq: Bioseq) -> None:
        """Test the same Bioseq may appear twice as siblings."""
        shared = SeqEntry(seq=bioseq)
        assert is_valid(BioseqSet(seq_set=[shared, shared]))

    def test_max_depth(self, nuc_prot_entry: SeqEntry) -> None:
        """Test nesting beyond max_depth is reported for each branch."""
        errors = find_violations(nuc_prot_entry, max_depth=4)

        assert [e.path[-2] for e in errors] == ["Bioseq-set_id", "Bioseq-set_seq-set", "Bioseq-set_seq-set"]
        assert all("depth" in e.message for e in errors)

    def test_nesting_beyond_recursion_limit(self) -> None:
        """Test a raised max_depth reports a too-deep tree instead of crashing."""
        loc = SeqLoc(null=True)
        for _ in range(2000):
            loc = SeqLoc(mix=[loc])

        result = TreeValidator(max_depth=100_000).validate(loc)

        assert result.error_count == 1
        assert "recursion limit" in result.errors[0].message
        assert result.errors[0].path[:3] == ("Seq-loc", "Seq-loc_mix", "Seq-loc")

    def test_is_valid(self, nuc_prot_entry: SeqEntry) -> None:
        """Test the boolean shortcut."""
        assert is_valid(nuc_prot_entry)
