"""pytest configuration and fixtures for ncbi_seqmodel tests."""

from __future__ import annotations

import pytest

from ncbi_seqmodel import (
    Bioseq,
    BioseqSet,
    BioseqSetClass,
    Decoder,
    Mol,
    ObjectId,
    Repr,
    SeqData,
    SeqEntry,
    Seqdesc,
    SeqId,
    SeqInst,
    TextseqId,
)
from tests.fixture_loader import load_fixture_bytes


@pytest.fixture
def decoder() -> Decoder:
    """Provide a lenient Decoder instance."""
    return Decoder()


@pytest.fixture
def strict_decoder() -> Decoder:
    """Provide a strict Decoder instance."""
    return Decoder(strict=True)


@pytest.fixture
def bioseq_set_xml() -> bytes:
    """A Bioseq-set with a raw DNA Bioseq and a nested nuc-prot set."""
    return load_fixture_bytes("bioseq_set.xml")


def make_bioseq(accession: str = "U00001", residues: str = "ACGTACGTAC", mol: Mol = Mol.DNA) -> Bioseq:
    return Bioseq(
        id=[SeqId(genbank=TextseqId(accession=accession, version=1))],
        descr=[Seqdesc(title=f"{accession} test sequence")],
        inst=SeqInst(
            repr=Repr.RAW,
            mol=mol,
            length=len(residues),
            seq_data=SeqData(iupacaa=residues) if mol == Mol.AA else SeqData(iupacna=residues),
        ),
    )


@pytest.fixture
def bioseq() -> Bioseq:
    """Create a small raw DNA Bioseq."""
    return make_bioseq()


@pytest.fixture
def nuc_prot_entry() -> SeqEntry:
    """Create a nuc-prot set holding a DNA and a protein Bioseq."""
    return SeqEntry(
        set=BioseqSet(
            id=ObjectId(id=1),
            class_=BioseqSetClass.NUC_PROT,
            seq_set=[
                SeqEntry(seq=make_bioseq("U00001")),
                SeqEntry(seq=make_bioseq("AAA00001", "MKTAYIAKQR", Mol.AA)),
            ],
        )
    )


@pytest.fixture
def bioseq_factory():
    """Provide the Bioseq factory for tests that need several sequences."""
    return make_bioseq
