"""Parsing 13F information tables into an SQLite database."""

from __future__ import annotations

import logging
import re
import sqlite3
import xml.etree.ElementTree as ET
from os import PathLike

SCHEMA = """
CREATE TABLE IF NOT EXISTS firms (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT UNIQUE
);
CREATE TABLE IF NOT EXISTS filings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    firm_id INTEGER,
    filing_date TEXT,
    quarter TEXT,
    FOREIGN KEY(firm_id) REFERENCES firms(id)
);
CREATE TABLE IF NOT EXISTS holdings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    filing_id INTEGER,
    cusip TEXT,
    name_of_issuer TEXT,
    shares INTEGER,
    value INTEGER,
    put_call TEXT,
    FOREIGN KEY(filing_id) REFERENCES filings(id)
);
"""

_INSERT_HOLDING = (
    "INSERT OR IGNORE INTO holdings "
    "(filing_id, cusip, name_of_issuer, shares, value, put_call) "
    "VALUES (?, ?, ?, ?, ?, ?)"
)

_logger = logging.getLogger(__name__)
_ATOLL_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)", re.ASCII)


def _atoll(text: str) -> int:
    match = _ATOLL_RE.match(text)
    return int(match.group(1)) if match else 0


def strip_namespace(tag_name: str) -> str:
    """Drop a ``{uri}`` or ``prefix:`` namespace from an element name."""
    if tag_name.startswith("{"):
        tag_name = tag_name.partition("}")[2]
    head, sep, tail = tag_name.partition(":")
    return tail if sep else head


def open_database(path: str | PathLike) -> sqlite3.Connection:
    """Open (creating if needed) the holdings database with its schema."""
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SCHEMA)
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def _child(elem: ET.Element, tag: str) -> ET.Element | None:
    return next((c for c in elem if strip_namespace(c.tag) == tag), None)


def _text(elem: ET.Element, tag: str) -> str | None:
    child = _child(elem, tag)
    return None if child is None else child.text


def _holding_row(entry: ET.Element, filing_id: int) -> tuple | None:
    issuer = _text(entry, "nameOfIssuer")
    cusip = _text(entry, "cusip")
    value = _text(entry, "value")
    put_call = _text(entry, "putCall")
    amount = _child(entry, "shrsOrPrnAmt")
    shares = None if amount is None else _text(amount, "sshPrnamt")

    if issuer is None or cusip is None or shares is None:
        missing = {"name": issuer, "cusip": cusip, "shares": shares}
        _logger.warning(
            "Skipping entry — missing fields: %s",
            " ".join(key for key, found in missing.items() if found is None),
        )
        return None

    return (
        filing_id,
        cusip.strip(" \t\n\r"),
        issuer,
        _atoll(shares),
        _atoll(value) if value is not None else 0,
        put_call,
    )


def parse_13f(xml_content: str, name: str, quarter: str, filing_date: str,
              conn: sqlite3.Connection) -> int:
    """Store the holdings of a 13F information table and return how many.

    Raises ValueError when the content is an HTML page or not well-formed
    XML, and LookupError when no filing row can be found for the firm.
    """
    if "<html" in xml_content or "<!DOCTYPE html" in xml_content:
        raise ValueError("Received HTML instead of XML. Probably an error page.")
    try:
        root = ET.fromstring(xml_content)
    except ET.ParseError as exc:
        raise ValueError(f"Failed to parse XML: {exc}") from exc

    conn.execute("INSERT OR IGNORE INTO firms (name) VALUES (?)", (name,))
    row = conn.execute("SELECT id FROM firms WHERE name = ?", (name,)).fetchone()
    firm_id = row[0] if row else None

    conn.execute(
        "INSERT OR IGNORE INTO filings (firm_id, filing_date, quarter) VALUES (?, ?, ?)",
        (firm_id, filing_date, quarter),
    )
    row = conn.execute(
        "SELECT id FROM filings WHERE firm_id = ? AND quarter = ? ORDER BY id LIMIT 1",
        (firm_id, quarter),
    ).fetchone()
    filing_id = row[0] if row else None
    conn.commit()

    entries = [e for e in root if strip_namespace(e.tag) == "infoTable"]
    if entries and filing_id is None:
        raise LookupError(
            f"filing_id not found for firm_id {firm_id} and quarter {quarter}"
        )

    rows = [r for r in (_holding_row(e, filing_id) for e in entries) if r is not None]
    with conn:
        conn.executemany(_INSERT_HOLDING, rows)
    return len(rows)