"""Tests for the tag dispatcher and type registry."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from ncbi_seqmodel import Bioseq, SeqId, SeqInterval, UnknownVariant
from ncbi_seqmodel.model.base import Record
from ncbi_seqmodel.schema.dispatch import (
    MODEL_TYPES,
    arm_name,
    check_tables,
    dispatch,
    fields_of,
    resolve,
    tag_table,
    wire_type,
)
from ncbi_seqmodel.schema.fields import FieldKind, integer, string


class TestDispatch:
    """Tests for resolving child tags."""

    def test_record_field(self) -> None:
        """Test a record tag resolves to its field."""
        spec = dispatch(SeqInterval, "Seq-interval_from")

        assert spec.name == "from_"
        assert spec.kind == FieldKind.LEAF
        assert spec.required

    def test_choice_arm(self) -> None:
        """Test a choice tag resolves to its arm."""
        spec = dispatch(SeqId, "Seq-id_named-annot-track")

        assert spec.name == "named_annot_track"
        assert arm_name(SeqId, spec) == "named-annot-track"

    def test_unknown_tag(self) -> None:
        """Test an unknown tag raises UnknownVariant with its context."""
        with pytest.raises(UnknownVariant) as exc_info:
            dispatch(SeqId, "Seq-id_future", ("Seq-id", "Seq-id_future"))

        assert exc_info.value.tag == "Seq-id_future"
        assert exc_info.value.context == "Seq-id"
        assert exc_info.value.path == ("Seq-id", "Seq-id_future")

    def test_optional_flags(self) -> None:
        """Test fields with defaults are not required."""
        specs = {spec.name: spec for spec in fields_of(Bioseq)}

        assert specs["id"].required
        assert specs["inst"].required
        assert not specs["descr"].required
        assert specs["descr"].wrapper == "Seq-descr"


class TestRegistry:
    """Tests for the type registry and table checks."""

    def test_resolve(self) -> None:
        """Test node targets resolve by class name."""
        assert resolve("SeqInterval") is SeqInterval
        assert MODEL_TYPES.get_by_tag("Bioseq") is Bioseq

    def test_resolve_unknown(self) -> None:
        """Test an unregistered name fails."""
        with pytest.raises(LookupError):
            resolve("NoSuchType")

    def test_all_tables_build(self) -> None:
        """Test every registered type has a consistent tag table."""
        assert check_tables() == len(MODEL_TYPES)
        assert {"Seq-entry", "Bioseq-set", "Seq-loc"} <= {cls.TAG for cls in MODEL_TYPES}

    def test_foreign_tag_rejected(self) -> None:
        """Test a field tag outside the type's namespace is rejected."""

        @dataclass(frozen=True, kw_only=True)
        class Misnamed(Record):
            name: str = string("Other_name")

        Misnamed.TAG = "Misnamed-test"
        with pytest.raises(TypeError):
            tag_table(Misnamed)

    def test_duplicate_tag_registration(self) -> None:
        """Test two types cannot claim one element tag."""
        with pytest.raises(TypeError):

            @wire_type("Seq-interval")
            @dataclass(frozen=True, kw_only=True)
            class Duplicate(Record):
                value: int = integer("Seq-interval_value")
