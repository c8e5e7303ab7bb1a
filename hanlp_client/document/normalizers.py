"""Positional-array normalizers for tuple-encoded `/parse` sections.

Architectural role:
    Converts the loosely-typed lists produced by `json.loads` into the named
    records of `hanlp_client.document.types`. Called per section by
    `hanlp_client.document.decoder.decode_document`.

Wire shapes:
    - NER  : sentences -> [entity, type, begin, end]
    - dep  : sentences -> [head, relation]
    - srl  : sentences -> predicates -> [arg_pred, label, begin, end]
    - sdp  : sentences -> tokens -> [head, relation]

Validation policy:
    Envelope problems (a section or a sentence that is not a list) raise
    `DecodeError`. Problems inside a sentence are tolerated: a tuple with the
    wrong arity or field types, or a grouping that is not a list, is logged at
    WARNING and skipped. The rest of the sentence, the section and the document
    are still decoded.

Numeric fields:
    Indices arrive as JSON numbers (possibly floats) and are truncated with
    `int()`. Booleans and non-finite values (`NaN`, `Infinity`, `1e400`) are
    rejected like any other malformed field.
"""

import logging
import math

from hanlp_client.document.types import DepTuple, NerTuple, SrlTuple
from hanlp_client.errors import DecodeError

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _sentences(section, key: str) -> list:
    """Return the per-sentence lists of a section or raise `DecodeError`."""
    if not isinstance(section, list):
        raise DecodeError(f"{key}: expected a list of sentences, got {type(section).__name__}")
    for i, sentence in enumerate(section):
        if not isinstance(sentence, list):
            raise DecodeError(
                f"{key}: sentence {i} is {type(sentence).__name__}, expected a list"
            )
    return section


def span_tuple(value, key: str, record):
    """Build a 4-field span record or return `None` for a malformed tuple.

    Args:
        value: Candidate `[text, label, begin, end]` array.
        key: Wire key, used only for the log message.
        record: `NerTuple` or `SrlTuple`.

    Returns:
        The record, or `None` when `value` fails shape/type validation.
    """
    if not isinstance(value, list) or len(value) != 4:
        logger.warning("%s: skipping malformed tuple %r (expected 4 fields)", key, value)
        return None

    text, label, begin, end = value
    if not isinstance(text, str) or not isinstance(label, str):
        logger.warning("%s: skipping tuple %r with non-string text/label", key, value)
        return None
    if not _is_number(begin) or not _is_number(end):
        logger.warning("%s: skipping tuple %r with non-numeric span", key, value)
        return None

    begin, end = int(begin), int(end)
    if begin > end:
        logger.warning("%s: skipping tuple %r with begin > end", key, value)
        return None

    return record(text, label, begin, end)


def edge_tuple(value, key: str) -> DepTuple | None:
    """Build a `DepTuple` from `[head, relation]` or return `None`."""
    if not isinstance(value, list) or len(value) != 2:
        logger.warning("%s: skipping malformed edge %r (expected 2 fields)", key, value)
        return None

    head, relation = value
    if not _is_number(head) or not isinstance(relation, str):
        logger.warning("%s: skipping edge %r with bad field types", key, value)
        return None

    head = int(head)
    if head < 0:
        logger.warning("%s: skipping edge %r with negative head", key, value)
        return None

    return DepTuple(head, relation)


def _collect(items, build) -> tuple:
    out = []
    for item in items:
        built = build(item)
        if built is not None:
            out.append(built)
    return tuple(out)


def normalize_tokens(section, key: str) -> tuple[tuple[str, ...], ...]:
    """Normalize a `tok/*` or `pos/*` section.

    Tokens and tags have no positional structure to tolerate, so any
    non-string entry is an envelope error.
    """
    result = []
    for i, sentence in enumerate(_sentences(section, key)):
        for token in sentence:
            if not isinstance(token, str):
                raise DecodeError(f"{key}: sentence {i} holds non-string token {token!r}")
        result.append(tuple(sentence))
    return tuple(result)


def normalize_ner(section, key: str) -> tuple[tuple[NerTuple, ...], ...]:
    return tuple(
        _collect(sentence, lambda v: span_tuple(v, key, NerTuple))
        for sentence in _sentences(section, key)
    )


def normalize_dep(section, key: str) -> tuple[tuple[DepTuple, ...], ...]:
    return tuple(
        _collect(sentence, lambda v: edge_tuple(v, key))
        for sentence in _sentences(section, key)
    )


def normalize_srl(section, key: str) -> tuple[tuple[tuple[SrlTuple, ...], ...], ...]:
    """Normalize `srl`: one group of role spans per predicate per sentence."""

    def predicate(group):
        if not isinstance(group, list):
            logger.warning("%s: skipping predicate group %r (not a list)", key, group)
            return None
        return _collect(group, lambda v: span_tuple(v, key, SrlTuple))

    return tuple(_collect(sentence, predicate) for sentence in _sentences(section, key))


def normalize_sdp(section, key: str) -> tuple[tuple[tuple[DepTuple, ...], ...], ...]:
    """Normalize `sdp`: per token, every incoming semantic edge.

    A token whose grouping is malformed is skipped like a tuple, so the
    sentence may come out shorter than its token count.
    """

    def token(group):
        if not isinstance(group, list):
            logger.warning("%s: skipping token edges %r (not a list)", key, group)
            return None
        return _collect(group, lambda v: edge_tuple(v, key))

    return tuple(_collect(sentence, token) for sentence in _sentences(section, key))
