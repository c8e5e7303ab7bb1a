"""Client configuration for `HanLPClient`.

Architectural role:
    Holds the construction-time defaults (endpoint, credentials, language,
    task selection) consumed by `hanlp_client.client.hanlp` when building
    requests.

Override model:
    `ClientOptions` is frozen. Per-call overrides and the `with_*` helpers
    return derived copies, so one options instance can be shared by concurrent
    callers without locking.

Environment:
    `ClientOptions.from_env()` calls `load_dotenv()` and reads:
        - `HANLP_URL`
        - `HANLP_AUTH` (or `HANLP_AUTH_FILE` naming a key file)
        - `HANLP_LANGUAGE`
        - `HANLP_TIMEOUT`
"""

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

from hanlp_client.errors import ConfigError

DEFAULT_URL = "https://www.hanlp.com/api"
DEFAULT_LANGUAGE = "zh"

# Task names accepted by `/parse` (`tasks` / `skip_tasks`).
POS_PKU = "pos/pku"
POS_CTB = "pos/ctb"
POS_863 = "pos/863"
TOK_FINE = "tok/fine"
TOK_COARSE = "tok/coarse"


def load_auth(path):
    """Load the auth credential from environment override or key file.

    Resolution order:
        1. `HANLP_AUTH` environment variable.
        2. Raw file contents at `path`.

    Args:
        path: Key file path or `None`.

    Returns:
        Credential string or `None` when neither source is set.

    Raises:
        ConfigError: `path` was given but the file is missing or empty.
    """
    env_value = os.getenv("HANLP_AUTH")
    if env_value:
        return env_value.strip()
    if not path:
        return None
    if not os.path.exists(path):
        raise ConfigError(f"Auth key file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        content = f.read().strip()
    if not content:
        raise ConfigError(f"Auth key file is empty: {path}")
    return content


@dataclass(frozen=True)
class ClientOptions:
    """Immutable defaults applied to every request.

    Attributes:
        url: Base URL of the RESTful service, without trailing slash.
        auth: Credential sent as `Authorization: Basic <auth>`; `None` for
            anonymous access.
        language: Default language of input text.
        topk: Default top-k for ranking endpoints; `None` uses each endpoint's
            own default.
        tasks: Tasks to run on `/parse`.
        skip_tasks: Tasks to skip on `/parse`.
        timeout: Seconds handed to `requests`; `None` keeps its default.
    """

    url: str = DEFAULT_URL
    auth: str | None = None
    language: str = DEFAULT_LANGUAGE
    topk: int | None = None
    tasks: tuple[str, ...] = ()
    skip_tasks: tuple[str, ...] = ()
    timeout: float | None = None

    def __post_init__(self):
        # Accept lists or a single task name from callers.
        object.__setattr__(self, "url", self.url.rstrip("/"))
        object.__setattr__(self, "tasks", _as_tuple(self.tasks))
        object.__setattr__(self, "skip_tasks", _as_tuple(self.skip_tasks))

    @classmethod
    def from_env(cls, **overrides) -> "ClientOptions":
        """Build options from `.env` / process environment plus overrides."""
        load_dotenv()

        values = {}
        if os.getenv("HANLP_URL"):
            values["url"] = os.getenv("HANLP_URL")
        if os.getenv("HANLP_LANGUAGE"):
            values["language"] = os.getenv("HANLP_LANGUAGE")
        timeout = os.getenv("HANLP_TIMEOUT")
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError as err:
                raise ConfigError(f"HANLP_TIMEOUT must be a number, got {timeout!r}") from err

        auth = load_auth(os.getenv("HANLP_AUTH_FILE"))
        if auth:
            values["auth"] = auth

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **overrides) -> "ClientOptions":
        """Return a copy with the given fields replaced.

        `None` values are ignored so callers can forward optional arguments
        without clearing configured defaults.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)

    def with_tasks(self, *tasks: str) -> "ClientOptions":
        """Return a copy with `tasks` appended to the task list."""
        return replace(self, tasks=self.tasks + tasks)

    def with_skip_tasks(self, *tasks: str) -> "ClientOptions":
        """Return a copy with `tasks` appended to the skip list."""
        return replace(self, skip_tasks=self.skip_tasks + tasks)


def _as_tuple(value) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)
