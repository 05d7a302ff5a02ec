"""
Tagged fetch results.

Every remote call returns one of:
- Ok: payload decoded successfully
- NotFound: the endpoint/resource does not exist (legacy run without attempts)
- TransportFailure: network, timeout, auth or any non-404 HTTP error
- DecodeFailure: body was not valid JSON or failed payload validation

Callers branch with ``match`` instead of inspecting status codes.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    url: str
    message: str = "not found"

    def describe(self) -> str:
        return f"not found: {self.url}"


@dataclass(frozen=True)
class TransportFailure:
    url: str
    error: str
    status_code: int | None = None

    def describe(self) -> str:
        if self.status_code is not None:
            return f"HTTP {self.status_code} for {self.url}: {self.error}"
        return f"transport error for {self.url}: {self.error}"


@dataclass(frozen=True)
class DecodeFailure:
    url: str
    error: str

    def describe(self) -> str:
        return f"undecodable payload from {self.url}: {self.error}"


FetchFailure = NotFound | TransportFailure | DecodeFailure
FetchResult = Ok[T] | NotFound | TransportFailure | DecodeFailure
