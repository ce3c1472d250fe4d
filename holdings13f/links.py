"""Finding XML documents linked from an EDGAR filing folder page."""

from __future__ import annotations

import re

_XML_FILE_RE = re.compile(r"([\w\-./]+\.xml)", re.IGNORECASE | re.ASCII)


def extract_xml_links(html: str, base_url: str) -> list[str]:
    """Return full URLs of the distinct ``.xml`` file names found in ``html``.

    Only the last path component of each match is kept and joined to
    ``base_url``; the order of first appearance is preserved.
    """
    seen: set[str] = set()
    links: list[str] = []
    for match in _XML_FILE_RE.finditer(html):
        filename = re.split(r"[/\\]", match.group(1))[-1]
        if filename in seen:
            continue
        seen.add(filename)
        links.append(base_url + filename)
    return links