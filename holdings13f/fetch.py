"""Downloading pages from EDGAR."""

from __future__ import annotations

import sys
from urllib import error, request

USER_AGENT = "holdings13f/1.0 (Contact: contact@example.com)"
REFERER = "https://www.sec.gov/"

_HEADERS = {
    "Accept": "application/xml, text/xml, */*;q=0.9",
    "Connection": "keep-alive",
    "User-Agent": USER_AGENT,
    "Referer": REFERER,
}


def fetch_url(url: str) -> str:
    """Return the body of ``url`` as text, or an empty string on any failure.

    Redirects are followed; any final status other than 200 yields ``""``.
    """
    req = request.Request(url, headers=_HEADERS)
    try:
        with request.urlopen(req) as response:
            status = response.status
            body = response.read()
    except error.HTTPError:
        return ""
    except (error.URLError, OSError) as exc:
        print(f"Request for {url} failed: {exc}", file=sys.stderr)
        return ""
    if status != 200:
        return ""
    return body.decode("utf-8", errors="replace")