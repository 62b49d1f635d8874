"""NCBI seqmodel - typed NCBI sequence records and their XML encoding.

Decode Entrez efetch exports (``rettype=native``, ``retmode=xml``) into
frozen dataclasses, build records in code, and write them back.

Example:
    from ncbi_seqmodel import Decoder, decode, encode

    # Quick decode
    entry = decode("sequences.xml")
    for bioseq in entry.bioseqs():
        print(bioseq.id[0], bioseq.length, bioseq.title)

    # Lenient decoding (the default) records what it skipped
    decoder = Decoder(max_depth=128)
    entry = decoder.decode("sequences.xml")
    for issue in decoder.issues:
        print(issue)

    # Write back
    data = encode(entry)
"""

from ncbi_seqmodel.builders import BioseqBuilder, BioseqSetBuilder
from ncbi_seqmodel.errors import (
    DecodeIssue,
    DecodeReport,
    IssueSeverity,
    IssueType,
    NumericFormatError,
    SchemaViolation,
    SeqModelError,
    UnknownVariant,
    XmlSyntaxError,
)
from ncbi_seqmodel.model import *  # noqa: F401,F403
from ncbi_seqmodel.model import __all__ as _model_all
from ncbi_seqmodel.schema.enums import EnumValue, FlagSet, UnknownCode
from ncbi_seqmodel.validator import (
    TreeValidator,
    ValidationResult,
    find_violations,
    is_valid,
    validate,
)
from ncbi_seqmodel.xml import Decoder, Encoder, decode, decode_as, encode, encode_to

__version__ = "0.1.0"

__all__ = [
    # Main API
    "decode",
    "decode_as",
    "encode",
    "encode_to",
    "validate",
    "is_valid",
    "find_violations",
    "Decoder",
    "Encoder",
    "TreeValidator",
    "ValidationResult",
    # Builders
    "BioseqBuilder",
    "BioseqSetBuilder",
    # Errors and issues
    "SeqModelError",
    "XmlSyntaxError",
    "SchemaViolation",
    "UnknownVariant",
    "NumericFormatError",
    "DecodeIssue",
    "DecodeReport",
    "IssueType",
    "IssueSeverity",
    # Enumeration values
    "EnumValue",
    "FlagSet",
    "UnknownCode",
    # Model types
    *_model_all,
]
