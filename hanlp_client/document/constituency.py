"""Recursive-descent decoder for the `con` section of `/parse` responses.

Grammar (applied to a JSON array `A`):
    - `[]`                   -> no node.
    - `[label]`              -> leaf node, `children is None`.
    - `[label, [ ... ]]`     -> node whose children are the decoded inner array.
    - `[[...], [...], ...]`  -> sequence of sibling subtrees. A labeled element
                                yields its own node; a nested sibling group
                                yields an unlabeled node (`key == ""`).

Failure handling:
    Anything else (numbers, objects, a non-list children slot, extra fields) is
    malformed. It is logged at WARNING and decodes to nothing. The decoder never
    raises for content inside the section.
"""

import logging

from hanlp_client.document.types import ConTuple
from hanlp_client.errors import DecodeError

logger = logging.getLogger(__name__)


# Shape of one grammar position.
EMPTY = "empty"
LABELED = "labeled"
GROUP = "group"
MALFORMED = "malformed"


def position_kind(value) -> str:
    """Classify a grammar position as empty, labeled node, sibling group or malformed."""
    if not isinstance(value, list):
        return MALFORMED
    if not value:
        return EMPTY
    if isinstance(value[0], str):
        return LABELED
    if isinstance(value[0], list):
        return GROUP
    return MALFORMED


def decode_node(value) -> ConTuple | None:
    """Decode one position into a single node.

    A labeled position yields its node, a sibling group yields an unlabeled
    node over its members. Empty or malformed positions yield `None`.
    """
    kind = position_kind(value)

    if kind == LABELED:
        if len(value) == 1:
            return ConTuple(value[0])
        if len(value) == 2 and isinstance(value[1], list):
            return ConTuple(value[0], tuple(decode_nodes(value[1])))
        logger.warning("con: skipping malformed node %r", value)
        return None

    if kind == GROUP:
        nodes = decode_nodes(value)
        return ConTuple("", tuple(nodes)) if nodes else None

    if kind == MALFORMED:
        logger.warning("con: skipping malformed subtree %r", value)
    return None


def decode_nodes(value) -> list[ConTuple]:
    """Decode one position into zero or more nodes.

    A sibling group expands into its members; any other position gives at
    most one node.
    """
    if position_kind(value) == GROUP:
        return [node for node in map(decode_node, value) if node is not None]
    node = decode_node(value)
    return [] if node is None else [node]


def decode_constituency_tree(value) -> ConTuple | None:
    """Decode one sentence's parse.

    Returns:
        The root node, `None` for an empty or malformed parse. A sentence
        encoded as a bare sibling group is returned under an unlabeled root.
    """
    return decode_node(value)


def decode_constituency_forest(section) -> tuple[ConTuple | None, ...]:
    """Decode the whole `con` section into one tree per sentence.

    A section whose first element is a string is a single tree rather than a
    list of sentences and is returned as a one-sentence forest.

    Raises:
        DecodeError: If the section itself is not a list.
    """
    if not isinstance(section, list):
        raise DecodeError(f"con: expected a list of trees, got {type(section).__name__}")
    if position_kind(section) == LABELED:
        return (decode_constituency_tree(section),)
    return tuple(decode_constituency_tree(sentence) for sentence in section)
