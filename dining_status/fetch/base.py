import asyncio
from dataclasses import dataclass
from typing import Awaitable, List, Optional


class FetchError(Exception):
    """Base class for failures fetching an upstream document."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """Connection, DNS or other transport-level failure."""


class FetchTimeoutError(FetchError, TimeoutError):
    """No response arrived within the per-attempt budget."""


class HTTPError(FetchError):
    """Terminal response status was 400 or above."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(f"Request failed with status {status_code}", url=url)
        self.status_code = status_code


@dataclass
class FetchOutcome:
    value: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def settle_all(*aws: Awaitable[str]) -> List[FetchOutcome]:
    """
    Await every fetch and collect a per-task outcome.

    A failing fetch never cancels its siblings; its exception is captured
    in the outcome instead of being raised.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    outcomes = []
    for result in results:
        if isinstance(result, BaseException):
            outcomes.append(FetchOutcome(error=result))
        else:
            outcomes.append(FetchOutcome(value=result))
    return outcomes
