"""Typed decoding of `/parse` responses.

Module split:
    - `types`: immutable result records and the `Document` container.
    - `normalizers`: positional-array converters for tok/pos/ner/srl/dep/sdp.
    - `constituency`: recursive decoder for the `con` tree grammar.
    - `decoder`: top-level JSON envelope decoding and section dispatch.
"""

from hanlp_client.document.constituency import (
    decode_constituency_forest,
    decode_constituency_tree,
)
from hanlp_client.document.decoder import decode_document
from hanlp_client.document.types import ConTuple, DepTuple, Document, NerTuple, SrlTuple

__all__ = [
    "ConTuple",
    "DepTuple",
    "Document",
    "NerTuple",
    "SrlTuple",
    "decode_constituency_forest",
    "decode_constituency_tree",
    "decode_document",
]
