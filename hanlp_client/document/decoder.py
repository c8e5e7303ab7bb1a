"""Generic decoder from `/parse` response bytes to a typed `Document`.

Architectural role:
    Sits between the transport layer (`hanlp_client.client`) and the per-family
    normalizers. The client hands over the raw body; this module returns a
    fully-built immutable `Document` or raises `DecodeError`.

Processing flow:
    1. `json.loads` the body into plain Python values.
    2. Require a JSON object at the top level.
    3. For every recognised wire key that is present and not `null`, run the
       family normalizer. Unknown keys are ignored for forward compatibility.
    4. Build the `Document` in one step.

Failure handling:
    Invalid JSON, a non-object envelope or an envelope-level shape problem
    aborts the decode; no partial document is returned. Tuple-level problems are
    handled leniently inside the normalizers.

Side effects:
    None beyond WARNING/DEBUG logging.
"""

import json
import logging

from hanlp_client.document.constituency import decode_constituency_forest
from hanlp_client.document.normalizers import (
    normalize_dep,
    normalize_ner,
    normalize_sdp,
    normalize_srl,
    normalize_tokens,
)
from hanlp_client.document.types import WIRE_KEYS, Document
from hanlp_client.errors import DecodeError

logger = logging.getLogger(__name__)


# Document field -> normalizer(section, wire_key).
NORMALIZERS = {
    "tok_fine": normalize_tokens,
    "tok_coarse": normalize_tokens,
    "pos_ctb": normalize_tokens,
    "pos_pku": normalize_tokens,
    "pos_863": normalize_tokens,
    "ner_pku": normalize_ner,
    "ner_msra": normalize_ner,
    "ner_ontonotes": normalize_ner,
    "srl": normalize_srl,
    "dep": normalize_dep,
    "sdp": normalize_sdp,
    "con": lambda section, key: decode_constituency_forest(section),
}


def load_json(raw: bytes | str):
    """Deserialize a response body, converting failures to `DecodeError`."""
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as err:
        raise DecodeError(f"response is not valid JSON: {err}") from err


def decode_document(raw: bytes | str) -> Document:
    """Decode a `/parse` response body.

    Args:
        raw: Response body as bytes or text.

    Returns:
        A `Document` whose absent sections are `None`.

    Raises:
        DecodeError: Invalid JSON, a top level that is not an object, or a
            section whose sentence layer is not a list.
    """
    payload = load_json(raw)
    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")

    known = set(WIRE_KEYS.values())
    unknown = [key for key in payload if key not in known]
    if unknown:
        logger.debug("Ignoring unrecognised response keys: %s", unknown)

    sections = {}
    for field_name, normalize in NORMALIZERS.items():
        key = WIRE_KEYS[field_name]
        value = payload.get(key)
        if value is None:
            continue
        sections[field_name] = normalize(value, key)

    return Document(**sections)
