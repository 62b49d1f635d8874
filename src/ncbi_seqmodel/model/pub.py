"""NCBI-Pub: the publication choice used by descriptors."""

from __future__ import annotations

from dataclasses import dataclass

from ncbi_seqmodel.model.base import Choice
from ncbi_seqmodel.model.biblio import (
    CitArt,
    CitBook,
    CitGen,
    CitJour,
    CitLet,
    CitPat,
    CitProc,
    CitSub,
    IdPat,
)
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.fields import integer, node, nodes


@wire_type("Pub")
@dataclass(frozen=True, kw_only=True)
class Pub(Choice):
    """A citation in one of several representations.

    ``equiv`` groups different representations of the same publication,
    e.g. a PubMed id alongside the full journal citation.
    """

    gen: CitGen | None = node("Pub_gen", "CitGen", optional=True)  # general or generic unparsed
    sub: CitSub | None = node("Pub_sub", "CitSub", optional=True)  # submission
    muid: int | None = integer("Pub_muid", optional=True)  # medline uid
    article: CitArt | None = node("Pub_article", "CitArt", optional=True)
    journal: CitJour | None = node("Pub_journal", "CitJour", optional=True)
    book: CitBook | None = node("Pub_book", "CitBook", optional=True)
    proc: CitProc | None = node("Pub_proc", "CitProc", optional=True)  # proceedings of a meeting
    patent: CitPat | None = node("Pub_patent", "CitPat", optional=True)
    pat_id: IdPat | None = node("Pub_pat-id", "IdPat", optional=True)  # identify a patent
    man: CitLet | None = node("Pub_man", "CitLet", optional=True)  # manuscript, thesis or letter
    equiv: tuple[Pub, ...] | None = nodes("Pub_equiv", "Pub", optional=True, wrapper="Pub-equiv")
    pmid: int | None = integer("Pub_pmid", optional=True, wrapper="PubMedId")

    def pmids(self) -> list[int]:
        """PubMed ids carried by this publication, including equivalents."""
        if self.pmid is not None:
            return [self.pmid]
        if self.equiv is not None:
            return [pmid for pub in self.equiv for pmid in pub.pmids()]
        return []
