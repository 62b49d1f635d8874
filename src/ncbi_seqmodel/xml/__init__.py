"""NCBI XML codec: incremental event reader, decoder and encoder."""

from ncbi_seqmodel.xml.decoder import Decoder, decode, decode_as
from ncbi_seqmodel.xml.encoder import Encoder, encode, encode_to
from ncbi_seqmodel.xml.reader import EventReader

__all__ = [
    "Decoder",
    "Encoder",
    "EventReader",
    "decode",
    "decode_as",
    "encode",
    "encode_to",
]
