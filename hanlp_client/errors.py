"""Exception types shared across the HanLP client.

Architectural role:
    Gives callers a single hierarchy to catch for service-side and decode-side
    failures. Transport failures raised by `requests` are not part of this
    hierarchy and propagate unchanged.

Taxonomy:
    - `HTTPError`   : the service answered with status >= 400.
    - `DecodeError` : response envelope is not the expected JSON object.
    - `ConfigError` : explicitly configured credential material is unusable.
"""


class HanLPError(RuntimeError):
    """Base class for errors raised by this package."""


class HTTPError(HanLPError):
    """Service answered with an HTTP status at or above 400.

    Attributes:
        status_code: HTTP status returned by the service.
        body: Raw response body text (usually a JSON object with `code`/`msg`).
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}\n{body}")


class DecodeError(HanLPError, ValueError):
    """Response body could not be decoded into a `Document`."""


class ConfigError(HanLPError):
    """Configured auth key file is missing or empty."""
