import logging
from typing import Dict, Optional

import httpx

from dining_status.core.config import settings
from dining_status.fetch.base import FetchTimeoutError, HTTPError, NetworkError

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = frozenset({301, 302, 307, 308})

_ACCEPT = "text/html,application/xhtml+xml"


def _request_headers() -> Dict[str, str]:
    return {"User-Agent": settings.USER_AGENT, "Accept": _ACCEPT}


def build_client() -> httpx.AsyncClient:
    """Client used for upstream fetches. Redirects are followed by hand in fetch_text."""
    return httpx.AsyncClient(
        timeout=settings.REQUEST_TIMEOUT,
        headers=_request_headers(),
        follow_redirects=False,
    )


async def fetch_text(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    GET a document and return its body as text.

    Up to MAX_REDIRECTS redirects (301/302/307/308 with a Location header)
    are followed, each hop with a fresh REQUEST_TIMEOUT budget. Once the
    bound is reached the current response is accepted as-is, so a redirect
    at that point yields its own (usually empty) body.

    Raises NetworkError, FetchTimeoutError or HTTPError.
    """
    if settings.USE_MOCK:
        return _mock_fetch_text(url)

    if client is None:
        async with build_client() as own_client:
            return await _fetch_following_redirects(own_client, url)
    return await _fetch_following_redirects(client, url)


async def _fetch_following_redirects(client: httpx.AsyncClient, url: str) -> str:
    current_url = url
    redirect_count = 0

    while True:
        next_url = None
        try:
            # Leaving the stream context releases the connection on every path,
            # including redirects whose body is never read.
            async with client.stream(
                "GET",
                current_url,
                headers=_request_headers(),
                timeout=settings.REQUEST_TIMEOUT,
            ) as response:
                status = response.status_code
                location = response.headers.get("location")

                if status in REDIRECT_STATUSES and location and redirect_count < settings.MAX_REDIRECTS:
                    next_url = str(response.url.join(location))
                    logger.debug("Redirect %s -> %s (%d)", current_url, next_url, status)
                elif status >= 400:
                    raise HTTPError(status, url=current_url)
                else:
                    if status in REDIRECT_STATUSES and location:
                        logger.warning(
                            "Redirect limit (%d) reached at %s, accepting status %d as final",
                            settings.MAX_REDIRECTS, current_url, status,
                        )
                    await response.aread()
                    return response.text
        except httpx.TimeoutException as e:
            raise FetchTimeoutError(f"Request timed out: {current_url}", url=current_url) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError(f"Failed to fetch {current_url}: {e}", url=current_url) from e

        redirect_count += 1
        current_url = next_url


def _mock_fetch_text(url: str) -> str:
    """Canned upstream documents for running without network access."""

    if "activity_ajax" in url:
        if url.endswith("874"):
            level = "82.4"
        elif url.endswith("867"):
            level = "35"
        else:
            level = "12.6"
        return f'<div class="activity-meter"><span id="activity-level">{level}%</span></div>'

    if "bruin-cafe" in url:
        return """
        <html>
        <body>
            <div class="location-header">
                <span class="status-text open">Open &ndash; closes at 9pm</span>
                <p class="dining-status">Breakfast 7:00am&ndash;10:00am<br/>Lunch &amp; Dinner 11:00am&ndash;9:00pm</p>
            </div>
        </body>
        </html>
        """

    if "the-study-at-hedrick" in url:
        return """
        <html>
        <body>
            <div class="location-header">
                <span class="status-text closed">Closed</span>
                <p class="dining-status">Opens tomorrow at 7:00am</p>
            </div>
        </body>
        </html>
        """

    if "rendezvous" in url:
        return """
        <html>
        <body>
            <div class="location-header">
                <span class="status-text">Hours vary today</span>
            </div>
        </body>
        </html>
        """

    return """
    <html>
    <body>
        <div class="location-header">
            <span class="status-text open">Open Now</span>
            <p class="dining-status">Today&rsquo;s hours: 11:00am&ndash;10:00pm</p>
        </div>
    </body>
    </html>
    """
