"""
Signal extraction from dining hall markup.

Every function here is total: malformed or unexpected input yields None
(or an empty result), never an exception.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

STATUS_TEXT_RE = re.compile(r'<span class="status-text[^>]*>([\s\S]*?)</span>', re.IGNORECASE)
STATUS_DETAIL_RE = re.compile(r'<p class="dining-status">([\s\S]*?)</p>', re.IGNORECASE)
ACTIVITY_LEVEL_RE = re.compile(r'id="activity-level">\s*([\d.]+)%', re.IGNORECASE)

# Applied in order; tags left over afterwards are stripped.
_REPLACEMENTS = [
    (re.compile(r"<br\s*/?>", re.IGNORECASE), " "),
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&amp;", re.IGNORECASE), "&"),
    (re.compile(r"&rsquo;|&#8217;", re.IGNORECASE), "'"),
    (re.compile(r"&lsquo;", re.IGNORECASE), "'"),
    (re.compile(r"&ldquo;|&rdquo;|&#8220;|&#8221;", re.IGNORECASE), '"'),
    (re.compile(r"&#8211;|&ndash;", re.IGNORECASE), "-"),
    (re.compile(r"&#8212;|&mdash;", re.IGNORECASE), "-"),
    (re.compile(r"&hellip;|&#8230;", re.IGNORECASE), "..."),
]
_TAG_RE = re.compile(r"<[^>]*>")

MAX_ACTIVITY_LEVEL = 100


@dataclass(frozen=True)
class PageSignals:
    status_text: Optional[str] = None
    status_detail: Optional[str] = None


def decode_html(fragment: Optional[str]) -> Optional[str]:
    """
    Convert a matched markup fragment to plain text.
    Returns None for missing input or when nothing but whitespace remains.
    """
    if not fragment:
        return None

    text = fragment
    for pattern, replacement in _REPLACEMENTS:
        text = pattern.sub(replacement, text)
    text = _TAG_RE.sub("", text).strip()

    return text or None


def extract_status_text(html: str) -> Optional[str]:
    match = STATUS_TEXT_RE.search(html or "")
    return decode_html(match.group(1)) if match else None


def extract_status_detail(html: str) -> Optional[str]:
    match = STATUS_DETAIL_RE.search(html or "")
    return decode_html(match.group(1)) if match else None


def extract_activity_level(html: str) -> Optional[int]:
    """
    Activity meter percentage rounded to the nearest integer.
    Examples: '42%' -> 42, '82.6%' -> 83, '1.2.3%' -> None
    """
    match = ACTIVITY_LEVEL_RE.search(html or "")
    if not match:
        return None

    try:
        value = float(match.group(1))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None

    # Half-up; round() would round half to even
    level = math.floor(value + 0.5)
    return min(level, MAX_ACTIVITY_LEVEL)


def extract_page_signals(html: str) -> PageSignals:
    return PageSignals(
        status_text=extract_status_text(html),
        status_detail=extract_status_detail(html),
    )


def visible_text_preview(html: str, max_length: int = 1500) -> str:
    """
    Visible text of a page for debugging extraction, with scripts, styles
    and navigation dropped and whitespace collapsed.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    body = soup.body if soup.body else soup

    for el in body.find_all(["script", "style", "noscript", "nav", "header", "footer", "svg"]):
        el.decompose()

    text = body.get_text("\n", strip=True)
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r"[ \t]{2,}", " ", text)

    if len(text) > max_length:
        text = text[:max_length] + "..."
    return text
