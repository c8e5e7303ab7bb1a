"""Typed result records for decoded `/parse` responses.

Architectural role:
    Defines the immutable structures produced by `hanlp_client.document.decoder`
    and returned to callers of `HanLPClient.parse_obj`.

Span convention:
    `begin` is inclusive and `end` exclusive, both token offsets within the
    owning sentence. Dependency heads are 1-based token indices, 0 for root.

Determinism:
    Records are plain value objects. Equality is structural, so decoding the
    same payload twice yields equal documents.
"""

from dataclasses import dataclass, fields
from typing import NamedTuple


class NerTuple(NamedTuple):
    """Named entity span: surface text, entity type, [begin, end)."""

    entity: str
    type: str
    begin: int
    end: int


class SrlTuple(NamedTuple):
    """Semantic role span: predicate or argument text, role label, [begin, end)."""

    arg_pred: str
    label: str
    begin: int
    end: int


class DepTuple(NamedTuple):
    """Incoming dependency edge of one token."""

    head: int
    relation: str


class ConTuple(NamedTuple):
    """Constituency node.

    `children is None` marks a leaf; an internal node holds a tuple of child
    nodes, which may be empty when the wire format carried an empty list.
    `key` is `""` for unlabeled sibling groupings.
    """

    key: str
    children: "tuple[ConTuple, ...] | None" = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def leaves(self) -> list[str]:
        """Return leaf labels in left-to-right order."""
        if self.children is None:
            return [self.key]
        out: list[str] = []
        for child in self.children:
            out.extend(child.leaves())
        return out

    def pformat(self) -> str:
        """Render the subtree in bracketed form, e.g. `(NP (DT) (NN))`."""
        if self.children is None:
            return f"({self.key})"
        parts = [self.key] if self.key else []
        parts.extend(child.pformat() for child in self.children)
        return "(" + " ".join(parts) + ")"


Sentences = tuple[tuple[str, ...], ...]


# Field name -> wire key of the `/parse` response object.
WIRE_KEYS = {
    "tok_fine": "tok/fine",
    "tok_coarse": "tok/coarse",
    "pos_ctb": "pos/ctb",
    "pos_pku": "pos/pku",
    "pos_863": "pos/863",
    "ner_pku": "ner/pku",
    "ner_msra": "ner/msra",
    "ner_ontonotes": "ner/ontonotes",
    "srl": "srl",
    "dep": "dep",
    "sdp": "sdp",
    "con": "con",
}


@dataclass(frozen=True)
class Document:
    """Decoded result of one `/parse` request.

    Every section is optional. `None` means the task was not requested or the
    service did not return it; a present section has one entry per sentence.

    Attributes:
        tok_fine: Fine-grained tokens per sentence.
        tok_coarse: Coarse-grained tokens per sentence.
        pos_ctb: CTB part-of-speech tags per sentence.
        pos_pku: PKU part-of-speech tags per sentence.
        pos_863: 863 part-of-speech tags per sentence.
        ner_pku: PKU named entities per sentence.
        ner_msra: MSRA named entities per sentence.
        ner_ontonotes: OntoNotes named entities per sentence.
        srl: Per sentence, one group of role spans per predicate.
        dep: Per sentence, one incoming edge per token.
        sdp: Per sentence, per token, all incoming semantic edges.
        con: Per sentence, the constituency tree or `None` if there is no parse.
    """

    tok_fine: Sentences | None = None
    tok_coarse: Sentences | None = None
    pos_ctb: Sentences | None = None
    pos_pku: Sentences | None = None
    pos_863: Sentences | None = None
    ner_pku: tuple[tuple[NerTuple, ...], ...] | None = None
    ner_msra: tuple[tuple[NerTuple, ...], ...] | None = None
    ner_ontonotes: tuple[tuple[NerTuple, ...], ...] | None = None
    srl: tuple[tuple[tuple[SrlTuple, ...], ...], ...] | None = None
    dep: tuple[tuple[DepTuple, ...], ...] | None = None
    sdp: tuple[tuple[tuple[DepTuple, ...], ...], ...] | None = None
    con: tuple[ConTuple | None, ...] | None = None

    def sections(self) -> dict:
        """Return present sections keyed by their wire name."""
        return {
            WIRE_KEYS[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def count_sentences(self) -> int:
        """Return the sentence count implied by the longest present section."""
        return max((len(value) for value in self.sections().values()), default=0)

    def to_dict(self) -> dict:
        """Return a JSON-compatible dict using wire keys, present sections only."""
        return {key: _plain(value) for key, value in self.sections().items()}


def _plain(value):
    if isinstance(value, ConTuple):
        if value.children is None:
            return [value.key]
        return [value.key, [_plain(child) for child in value.children]]
    if isinstance(value, tuple):
        return [_plain(item) for item in value]
    return value
