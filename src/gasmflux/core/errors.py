# gasmflux/core/errors.py

from typing import Optional

class GasmfluxError(Exception):
    """Base class for every error raised by gasmflux."""

class NetworkError(GasmfluxError):
    """A page could not be retrieved."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"Could not fetch {url}: {message}")
        self.url = url
        self.status_code = status_code

class NotFoundError(GasmfluxError):
    """An expected element or pattern is missing, or a lookup found no match."""

class ParseError(GasmfluxError, ValueError):
    """A play count could not be read as a non-negative integer."""

    def __init__(self, text: str):
        super().__init__(f"Not a valid play count: {text!r}")
        self.text = text
