"""Client facade for the HanLP RESTful service.

Architectural role:
    Exposes one method per service endpoint. Each method resolves the effective
    options for the call, composes a `HanLPRequest`, sends it through
    `hanlp_client.client.transport`, and returns either the raw body text or a
    decoded structure.

Call flow:
    method(text, **overrides) -> `ClientOptions.with_overrides` ->
    `build_request` -> `transport.post_json` -> body -> str / `Document`.

Output paths:
    - Untyped: every endpoint method returns the response body as `str`.
    - Typed: `parse_obj` decodes into a `Document`.
    - `parse_any` selects the output through `OutputMode`.

Failure handling:
    - Transport errors from `requests` propagate unchanged.
    - Status >= 400 raises `HTTPError`.
    - Invalid JSON on a typed path raises `DecodeError`.

Concurrency:
    The client holds only a frozen `ClientOptions`; calls share no mutable
    state and each call is one blocking round trip.
"""

import enum
import logging

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from hanlp_client.client import transport
from hanlp_client.client.options import TOK_COARSE, TOK_FINE, ClientOptions
from hanlp_client.client.request import build_request
from hanlp_client.document.decoder import decode_document
from hanlp_client.document.types import Document
from hanlp_client.errors import DecodeError

logger = logging.getLogger(__name__)


class OutputMode(enum.Enum):
    """Output shapes supported by `HanLPClient.parse_any`."""

    STRING = "string"
    BYTES = "bytes"
    DOCUMENT = "document"
    MODEL = "model"


class HanLPClient:
    """Blocking client for the HanLP RESTful API.

    Args:
        options: Base options; defaults to `ClientOptions()`.
        **overrides: Fields replacing those of `options`, e.g. `auth=...`.

    Examples::

        client = HanLPClient(auth="...")
        doc = client.parse_obj("阿婆主来到北京立方庭参观自然语义科技公司。",
                               tasks=["tok/fine", "ner/pku"])
        doc.ner_pku[0]
    """

    def __init__(self, options: ClientOptions | None = None, **overrides):
        base = options or ClientOptions()
        self.options = base.with_overrides(**overrides)

    def __repr__(self):
        return f"HanLPClient(url={self.options.url!r}, language={self.options.language!r})"

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    def _resolve(self, overrides: dict) -> ClientOptions:
        return self.options.with_overrides(**overrides)

    def _post(self, path: str, request, options: ClientOptions) -> bytes:
        return transport.post_json(options.url + path, request.to_body(), options)

    def _post_text(self, path: str, request, options: ClientOptions) -> str:
        return self._post(path, request, options).decode("utf-8")

    def _parse_raw(self, text, tokens, overrides: dict) -> bytes:
        if text is None and tokens is None:
            raise ValueError("parse requires either text or tokens")
        options = self._resolve(overrides)
        request = build_request(text, options, parse=True, tokens=tokens)
        logger.debug("parse: tasks=%s skip_tasks=%s", options.tasks, options.skip_tasks)
        return self._post("/parse", request, options)

    # ------------------------------------------------------------------
    # /parse
    # ------------------------------------------------------------------

    def parse(self, text=None, tokens=None, **overrides) -> str:
        """Parse a document and return the raw JSON body.

        Args:
            text: A document (str) or a list of sentences.
            tokens: Pre-tokenized sentences, sent instead of `text`.
            **overrides: Per-call options such as `tasks`, `skip_tasks`,
                `language`.

        Use ``tasks=[...]`` to run selected tasks only; dependent tasks are
        selected by the service. ``skip_tasks="tok/fine"`` switches every task
        to coarse tokenization.
        """
        return self._parse_raw(text, tokens, overrides).decode("utf-8")

    def parse_obj(self, text=None, tokens=None, **overrides) -> Document:
        """Parse a document and decode the response into a `Document`."""
        return decode_document(self._parse_raw(text, tokens, overrides))

    def parse_any(self, text=None, output: OutputMode = OutputMode.STRING, into=None,
                  tokens=None, **overrides):
        """Parse a document and return the body in the requested shape.

        Args:
            text: A document (str) or a list of sentences.
            output: `STRING` (str), `BYTES` (bytes), `DOCUMENT` (`Document`) or
                `MODEL` (generic deserialization into `into`).
            into: Target type for `MODEL`, anything pydantic's `TypeAdapter`
                accepts (dataclass, `BaseModel`, `TypedDict`, `dict`...).
                Defaults to `dict`.
            tokens: Pre-tokenized sentences, sent instead of `text`.

        Raises:
            DecodeError: Body is not valid JSON or does not fit `into`.
            ValueError: `into` is given for a mode other than `MODEL`.
        """
        if into is not None and output is not OutputMode.MODEL:
            raise ValueError(f"'into' is only valid with OutputMode.MODEL, got {output}")

        adapter = None
        if output is OutputMode.MODEL:
            try:
                adapter = TypeAdapter(into or dict)
            except PydanticSchemaGenerationError as err:
                raise ValueError(f"Cannot decode into {into!r}") from err

        body = self._parse_raw(text, tokens, overrides)

        if output is OutputMode.STRING:
            return body.decode("utf-8")
        if output is OutputMode.BYTES:
            return body
        if output is OutputMode.DOCUMENT:
            return decode_document(body)
        if output is OutputMode.MODEL:
            try:
                return adapter.validate_json(body)
            except ValidationError as err:
                raise DecodeError(f"response does not match {into or dict!r}: {err}") from err
        raise ValueError(f"Unsupported output mode: {output!r}")

    def tokenize(self, text, coarse: bool = False, **overrides) -> tuple[tuple[str, ...], ...]:
        """Split text into sentences of tokens.

        Args:
            text: A document or a list of sentences.
            coarse: Use coarse-grained tokenization instead of fine.
        """
        task = TOK_COARSE if coarse else TOK_FINE
        overrides.update(tasks=(task,), skip_tasks=(TOK_FINE,) if coarse else ())
        doc = self.parse_obj(text, **overrides)
        tokens = doc.tok_coarse if coarse else doc.tok_fine
        return tokens or ()

    # ------------------------------------------------------------------
    # Other endpoints (raw JSON body)
    # ------------------------------------------------------------------

    def grammatical_error_correction(self, text, **overrides) -> str:
        """Correct spelling, punctuation, grammar and word choice errors.

        Examples::

            client.grammatical_error_correction(['每个青年都应当有远大的报复。',
                                                 '有的同学对语言很兴趣。'])
            # '["每个青年都应当有远大的抱负。", "有的同学对语言很有兴趣。"]'
        """
        options = self._resolve(overrides)
        return self._post_text("/grammatical_error_correction", build_request(text, options), options)

    def keyphrase_extraction(self, text: str, topk: int | None = None, **overrides) -> str:
        """Extract the top-k keyphrases with their ranking scores in [0, 1]."""
        options = self._resolve(overrides)
        request = build_request(text, options, topk=topk or options.topk or 10)
        return self._post_text("/keyphrase_extraction", request, options)

    def semantic_textual_similarity(self, text, topk: int | None = None, **overrides) -> str:
        """Score how similar each pair of texts is.

        Args:
            text: A pair or a list of pairs of strings.
        """
        options = self._resolve(overrides)
        if isinstance(text, tuple) and len(text) == 2 and all(isinstance(t, str) for t in text):
            text = [text]
        request = build_request(text, options, topk=topk or options.topk or 10)
        return self._post_text("/semantic_textual_similarity", request, options)

    def extractive_summarization(self, text: str, topk: int | None = None, **overrides) -> str:
        """Select the top-k most representative sentences with their scores."""
        options = self._resolve(overrides)
        request = build_request(text, options, topk=topk or options.topk or 3)
        return self._post_text("/extractive_summarization", request, options)

    def abstractive_summarization(self, text: str, **overrides) -> str:
        options = self._resolve(overrides)
        return self._post_text("/abstractive_summarization", build_request(text, options), options)

    def text_classification(self, text, model: str, topk: int | bool | None = None, **overrides) -> str:
        """Classify text with the given server-side model.

        `topk=False` omits the field so only the best label is returned;
        `None` falls back to `ClientOptions.topk`, else `False`;
        `topk=True` returns every label; an int returns that many.
        """
        options = self._resolve(overrides)
        if topk is None:
            topk = options.topk or False
        request = build_request(text, options, model=model, topk=topk)
        return self._post_text("/text_classification", request, options)

    def sentiment_analysis(self, text, **overrides) -> str:
        """Return a polarity score in [-1, 1] for each input text."""
        options = self._resolve(overrides)
        return self._post_text("/sentiment_analysis", build_request(text, options), options)

    def text_style_transfer(self, text, target_style: str, **overrides) -> str:
        """Rewrite text in `target_style` (e.g. `gov_doc`, `modern_poetry`)."""
        options = self._resolve(overrides)
        request = build_request(text, options, target_style=target_style)
        return self._post_text("/text_style_transfer", request, options)

    def about(self, **overrides) -> str:
        """Return service metadata from `GET /about`."""
        options = self._resolve(overrides)
        return transport.get(options.url + "/about", options).decode("utf-8")
