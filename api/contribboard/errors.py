"""Domain errors shared by the client, scoring and view layers."""

from __future__ import annotations


class InvalidInput(ValueError):
    """A scoring or pagination function received an out-of-domain value."""


class FetchFailure(RuntimeError):
    """A single GitHub request failed (transport, non-2xx status or malformed payload)."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"GitHub fetch failed for {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code
