"""Reading 13F-HR filings out of an EDGAR master index file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike

HEADER_MARKER = "CIK|Company Name|Form Type|Date Filed|Filename"
ARCHIVE_BASE = "https://www.sec.gov/Archives/edgar/data/"
FORM_TYPE = "13F-HR"

_FILENAME_RE = re.compile(r"data/(\d+)/([^/]+)\.txt", re.ASCII)
_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True)
class Filing:
    """One 13F-HR filing listed in a master index."""

    name: str
    folder_url: str
    quarter: str
    filing_date: str


def _leading_int(text: str) -> int:
    match = _LEADING_INT_RE.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    return int(match.group(1))


def quarter_from_date(date_str: str) -> str:
    """Turn a YYYY-MM-DD date into a quarter label such as ``2025Q1``."""
    year = _leading_int(date_str[0:4])
    month = _leading_int(date_str[5:7])
    quarter = int((month - 1) / 3) + 1
    return f"{year}Q{quarter}"


def _split_fields(line: str) -> list[str]:
    fields = line.split("|")
    # A trailing separator does not start another field.
    if fields[-1] == "":
        fields.pop()
    return fields


def _filing_from_line(line: str) -> Filing | None:
    fields = _split_fields(line)
    if len(fields) != 5:
        return None
    _cik, name, form_type, date_filed, filename = fields
    if form_type != FORM_TYPE:
        return None
    match = _FILENAME_RE.search(filename)
    if match is None:
        return None
    folder_cik, accession = match.groups()
    folder_url = f"{ARCHIVE_BASE}{folder_cik}/{accession.replace('-', '')}/"
    quarter = quarter_from_date(date_filed) if len(date_filed) >= 7 else "Unknown"
    return Filing(name, folder_url, quarter, date_filed)


def extract_13fhr_filings(idx_path: str | PathLike) -> list[Filing]:
    """Return every 13F-HR filing listed after the header of a master index.

    Raises OSError when the file cannot be opened.
    """
    filings: list[Filing] = []
    reading = False
    with open(idx_path, encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not reading:
                reading = HEADER_MARKER in line
                continue
            filing = _filing_from_line(line)
            if filing is not None:
                filings.append(filing)
    return filings