"""NCBI-Biblio: citations, authors and imprints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ncbi_seqmodel.model.base import Choice, Record
from ncbi_seqmodel.model.general import Date, Dbtag, PersonId
from ncbi_seqmodel.schema.dispatch import wire_type
from ncbi_seqmodel.schema.enums import EnumTable, EnumValue
from ncbi_seqmodel.schema.fields import boolean, enum, integer, node, nodes, string, values


@wire_type("Title_E")
@dataclass(frozen=True, kw_only=True)
class TitleItem(Choice):
    """One form of a title; a Title is a set of these."""

    name: str | None = string("Title_E_name", optional=True)  # title, anything
    tsub: str | None = string("Title_E_tsub", optional=True)  # subordinate title
    trans: str | None = string("Title_E_trans", optional=True)  # title, translated
    jta: str | None = string("Title_E_jta", optional=True)  # journal title abbreviation
    iso_jta: str | None = string("Title_E_iso-jta", optional=True)
    ml_jta: str | None = string("Title_E_ml-jta", optional=True)  # medline jta
    coden: str | None = string("Title_E_coden", optional=True)
    issn: str | None = string("Title_E_issn", optional=True)
    abr: str | None = string("Title_E_abr", optional=True)
    isbn: str | None = string("Title_E_isbn", optional=True)


@wire_type("ArticleId")
@dataclass(frozen=True, kw_only=True)
class ArticleId(Choice):
    pubmed: int | None = integer("ArticleId_pubmed", optional=True, wrapper="PubMedId")
    medline: int | None = integer("ArticleId_medline", optional=True, wrapper="MedlineUID")
    doi: str | None = string("ArticleId_doi", optional=True, wrapper="DOI")
    pii: str | None = string("ArticleId_pii", optional=True, wrapper="PII")
    pmcid: int | None = integer("ArticleId_pmcid", optional=True, wrapper="PmcID")
    pmcpid: str | None = string("ArticleId_pmcpid", optional=True, wrapper="PmcPid")
    pmpid: str | None = string("ArticleId_pmpid", optional=True, wrapper="PmPid")
    other: Dbtag | None = node("ArticleId_other", "Dbtag", optional=True)


@wire_type("Affil-std")
@dataclass(frozen=True, kw_only=True)
class AffilStd(Record):
    affil: str | None = string("Affil-std_affil", optional=True)  # institution
    div: str | None = string("Affil-std_div", optional=True)  # division
    city: str | None = string("Affil-std_city", optional=True)
    sub: str | None = string("Affil-std_sub", optional=True)  # subdivision of country
    country: str | None = string("Affil-std_country", optional=True)
    street: str | None = string("Affil-std_street", optional=True)
    email: str | None = string("Affil-std_email", optional=True)
    fax: str | None = string("Affil-std_fax", optional=True)
    phone: str | None = string("Affil-std_phone", optional=True)
    postal_code: str | None = string("Affil-std_postal-code", optional=True)


@wire_type("Affil")
@dataclass(frozen=True, kw_only=True)
class Affil(Choice):
    str: str | None = string("Affil_str", optional=True)
    std: AffilStd | None = node("Affil_std", "AffilStd", optional=True)


class AuthorLevel(IntEnum):
    PRIMARY = 1
    SECONDARY = 2


class AuthorRole(IntEnum):
    COMPILER = 1
    EDITOR = 2
    PATENT_ASSIGNEE = 3
    TRANSLATOR = 4


AUTHOR_LEVEL = EnumTable("Author.level", AuthorLevel)
AUTHOR_ROLE = EnumTable("Author.role", AuthorRole)


@wire_type("Author")
@dataclass(frozen=True, kw_only=True)
class Author(Record):
    name: PersonId = node("Author_name", "PersonId")
    level: EnumValue | None = enum("Author_level", AUTHOR_LEVEL, optional=True)
    role: EnumValue | None = enum("Author_role", AUTHOR_ROLE, optional=True)
    affil: Affil | None = node("Author_affil", "Affil", optional=True)
    is_corr: bool | None = boolean("Author_is-corr", optional=True)  # corresponding author


@wire_type("Auth-list_names")
@dataclass(frozen=True, kw_only=True)
class AuthListNames(Choice):
    std: tuple[Author, ...] | None = nodes("Auth-list_names_std", "Author", optional=True)
    ml: tuple[str, ...] | None = values("Auth-list_names_ml", optional=True)  # MEDLINE, semi-structured
    str: tuple[str, ...] | None = values("Auth-list_names_str", optional=True)  # free for all


@wire_type("Auth-list")
@dataclass(frozen=True, kw_only=True)
class AuthList(Record):
    names: AuthListNames = node("Auth-list_names", "AuthListNames", inline=True)
    affil: Affil | None = node("Auth-list_affil", "Affil", optional=True)


class ImprintPrepub(IntEnum):
    SUBMITTED = 1
    IN_PRESS = 2
    OTHER = 255


class PubStatus(IntEnum):
    RECEIVED = 1
    ACCEPTED = 2
    EPUBLISH = 3
    PPUBLISH = 4
    REVISED = 5
    PMC = 6
    PMCR = 7
    PUBMED = 8
    PUBMEDR = 9
    AHEADOFPRINT = 10
    PREMEDLINE = 11
    MEDLINE = 12
    OTHER = 255


IMPRINT_PREPUB = EnumTable("Imprint.prepub", ImprintPrepub)
PUB_STATUS = EnumTable("PubStatus", PubStatus, integer_valued=True)


@wire_type("Imprint")
@dataclass(frozen=True, kw_only=True)
class Imprint(Record):
    """Publication details: date, volume, pages."""

    date: Date = node("Imprint_date", "Date")
    volume: str | None = string("Imprint_volume", optional=True)
    issue: str | None = string("Imprint_issue", optional=True)
    pages: str | None = string("Imprint_pages", optional=True)
    section: str | None = string("Imprint_section", optional=True)
    pub: Affil | None = node("Imprint_pub", "Affil", optional=True)  # publisher
    cprt: Date | None = node("Imprint_cprt", "Date", optional=True)  # copyright date
    part_sup: str | None = string("Imprint_part-sup", optional=True)
    language: str | None = string("Imprint_language", optional=True)
    prepub: EnumValue | None = enum("Imprint_prepub", IMPRINT_PREPUB, optional=True)
    part_supi: str | None = string("Imprint_part-supi", optional=True)
    pubstatus: EnumValue | None = enum("Imprint_pubstatus", PUB_STATUS, optional=True, wrapped=True)


@wire_type("Cit-jour")
@dataclass(frozen=True, kw_only=True)
class CitJour(Record):
    title: tuple[TitleItem, ...] = nodes("Cit-jour_title", "TitleItem", wrapper="Title")
    imp: Imprint = node("Cit-jour_imp", "Imprint")


@wire_type("Cit-book")
@dataclass(frozen=True, kw_only=True)
class CitBook(Record):
    title: tuple[TitleItem, ...] = nodes("Cit-book_title", "TitleItem", wrapper="Title")
    coll: tuple[TitleItem, ...] | None = nodes("Cit-book_coll", "TitleItem", optional=True, wrapper="Title")
    authors: AuthList = node("Cit-book_authors", "AuthList")
    imp: Imprint = node("Cit-book_imp", "Imprint")


@wire_type("Meeting")
@dataclass(frozen=True, kw_only=True)
class Meeting(Record):
    number: str = string("Meeting_number")
    date: Date = node("Meeting_date", "Date")
    place: Affil | None = node("Meeting_place", "Affil", optional=True)


@wire_type("Cit-proc")
@dataclass(frozen=True, kw_only=True)
class CitProc(Record):
    """Meeting proceedings."""

    book: CitBook = node("Cit-proc_book", "CitBook")
    meet: Meeting = node("Cit-proc_meet", "Meeting")


@wire_type("Cit-art_from")
@dataclass(frozen=True, kw_only=True)
class CitArtFrom(Choice):
    journal: CitJour | None = node("Cit-art_from_journal", "CitJour", optional=True)
    book: CitBook | None = node("Cit-art_from_book", "CitBook", optional=True)
    proc: CitProc | None = node("Cit-art_from_proc", "CitProc", optional=True)


@wire_type("Cit-art")
@dataclass(frozen=True, kw_only=True)
class CitArt(Record):
    """Article in a journal, book or proceedings."""

    title: tuple[TitleItem, ...] | None = nodes("Cit-art_title", "TitleItem", optional=True, wrapper="Title")
    authors: AuthList | None = node("Cit-art_authors", "AuthList", optional=True)
    from_: CitArtFrom = node("Cit-art_from", "CitArtFrom", inline=True)
    ids: tuple[ArticleId, ...] | None = nodes("Cit-art_ids", "ArticleId", optional=True, wrapper="ArticleIdSet")


@wire_type("Id-pat_id")
@dataclass(frozen=True, kw_only=True)
class IdPatId(Choice):
    number: str | None = string("Id-pat_id_number", optional=True)  # patent document number
    app_number: str | None = string("Id-pat_id_app-number", optional=True)  # application number


@wire_type("Id-pat")
@dataclass(frozen=True, kw_only=True)
class IdPat(Record):
    """Identifies a patent."""

    country: str = string("Id-pat_country")
    id: IdPatId = node("Id-pat_id", "IdPatId", inline=True)
    doc_type: str | None = string("Id-pat_doc-type", optional=True)


@wire_type("Cit-pat")
@dataclass(frozen=True, kw_only=True)
class CitPat(Record):
    title: str = string("Cit-pat_title")
    authors: AuthList = node("Cit-pat_authors", "AuthList")  # author/inventor
    country: str = string("Cit-pat_country")
    doc_type: str = string("Cit-pat_doc-type")
    number: str | None = string("Cit-pat_number", optional=True)
    date_issue: Date | None = node("Cit-pat_date-issue", "Date", optional=True)
    class_: tuple[str, ...] | None = values("Cit-pat_class", optional=True)
    app_number: str | None = string("Cit-pat_app-number", optional=True)
    app_date: Date | None = node("Cit-pat_app-date", "Date", optional=True)
    applicants: AuthList | None = node("Cit-pat_applicants", "AuthList", optional=True)
    assignees: AuthList | None = node("Cit-pat_assignees", "AuthList", optional=True)
    abstract: str | None = string("Cit-pat_abstract", optional=True)


class LetType(IntEnum):
    MANUSCRIPT = 1
    LETTER = 2
    THESIS = 3


LET_TYPE = EnumTable("Cit-let.type", LetType)


@wire_type("Cit-let")
@dataclass(frozen=True, kw_only=True)
class CitLet(Record):
    """Letter, thesis or manuscript."""

    cit: CitBook = node("Cit-let_cit", "CitBook")
    man_id: str | None = string("Cit-let_man-id", optional=True)
    type: EnumValue | None = enum("Cit-let_type", LET_TYPE, optional=True)


class SubMedium(IntEnum):
    PAPER = 1
    TAPE = 2
    FLOPPY = 3
    EMAIL = 4
    OTHER = 255


SUB_MEDIUM = EnumTable("Cit-sub.medium", SubMedium)


@wire_type("Cit-sub")
@dataclass(frozen=True, kw_only=True)
class CitSub(Record):
    """Direct submission to a database."""

    authors: AuthList = node("Cit-sub_authors", "AuthList")  # not necessarily authors of the paper
    imp: Imprint | None = node("Cit-sub_imp", "Imprint", optional=True)
    medium: EnumValue = enum("Cit-sub_medium", SUB_MEDIUM, default=SubMedium.PAPER)
    date: Date | None = node("Cit-sub_date", "Date", optional=True)
    descr: str | None = string("Cit-sub_descr", optional=True)


@wire_type("Cit-gen")
@dataclass(frozen=True, kw_only=True)
class CitGen(Record):
    """Catch-all citation, e.g. unpublished GenBank references."""

    cit: str | None = string("Cit-gen_cit", optional=True)
    authors: AuthList | None = node("Cit-gen_authors", "AuthList", optional=True)
    muid: int | None = integer("Cit-gen_muid", optional=True)
    journal: tuple[TitleItem, ...] | None = nodes("Cit-gen_journal", "TitleItem", optional=True, wrapper="Title")
    volume: str | None = string("Cit-gen_volume", optional=True)
    issue: str | None = string("Cit-gen_issue", optional=True)
    pages: str | None = string("Cit-gen_pages", optional=True)
    date: Date | None = node("Cit-gen_date", "Date", optional=True)
    serial_number: int | None = integer("Cit-gen_serial-number", optional=True)
    title: str | None = string("Cit-gen_title", optional=True)
    pmid: int | None = integer("Cit-gen_pmid", optional=True, wrapper="PubMedId")
