"""Python client for the HanLP RESTful NLP service.

Architectural role:
    Sends text to the HanLP web API (parsing, grammatical error correction,
    keyphrase extraction, similarity, classification, sentiment,
    summarization, style transfer) and decodes `/parse` responses into typed,
    immutable `Document` objects.

Package split:
    - `client`: options, request model, HTTP transport, endpoint facade.
    - `document`: response decoding into typed records.
    - `api`: command-line entrypoint.
    - `errors`: exception hierarchy.
"""

from hanlp_client.client.hanlp import HanLPClient, OutputMode
from hanlp_client.client.options import POS_863, POS_CTB, POS_PKU, ClientOptions
from hanlp_client.document import (
    ConTuple,
    DepTuple,
    Document,
    NerTuple,
    SrlTuple,
    decode_document,
)
from hanlp_client.errors import ConfigError, DecodeError, HanLPError, HTTPError

__version__ = "0.1.0"

__all__ = [
    "ClientOptions",
    "ConTuple",
    "ConfigError",
    "DecodeError",
    "DepTuple",
    "Document",
    "HTTPError",
    "HanLPClient",
    "HanLPError",
    "NerTuple",
    "OutputMode",
    "POS_863",
    "POS_CTB",
    "POS_PKU",
    "SrlTuple",
    "decode_document",
]
