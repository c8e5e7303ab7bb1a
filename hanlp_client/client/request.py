"""Wire request model shared by all endpoints.

Serialization rule:
    Fields that are `None`, empty or `False` are left out of the JSON body so
    the service falls back to its own defaults. `text` and `tokens` are kept
    whenever they are set, even if empty.
"""

from pydantic import BaseModel

from hanlp_client.client.options import ClientOptions

TextInput = str | list[str] | list[tuple[str, str]] | list[list[str]]

_ALWAYS_SENT = ("text", "tokens")


class HanLPRequest(BaseModel):
    text: TextInput | None = None
    tokens: list[list[str]] | None = None
    language: str | None = None
    tasks: list[str] | None = None
    skip_tasks: list[str] | None = None
    topk: int | bool | None = None
    model: str | None = None
    target_style: str | None = None

    def to_body(self) -> dict:
        """Return the JSON-ready body with zero-value fields omitted."""
        body = {}
        for name, value in self.model_dump(mode="json").items():
            if name in _ALWAYS_SENT:
                if value is not None:
                    body[name] = value
            elif value not in (None, False, 0, "", []):
                body[name] = value
        return body


def build_request(text, options: ClientOptions, *, parse: bool = False, **fields) -> HanLPRequest:
    """Compose a request from call arguments and effective options.

    Args:
        text: Endpoint input (document, sentences or sentence pairs).
        options: Effective options for this call.
        parse: Attach `tasks` / `skip_tasks`, only meaningful for `/parse`.
        **fields: Endpoint-specific fields (`topk`, `model`, `target_style`,
            `tokens`).
    """
    if parse:
        fields.setdefault("tasks", list(options.tasks))
        fields.setdefault("skip_tasks", list(options.skip_tasks))
    return HanLPRequest(text=text, language=options.language, **fields)
