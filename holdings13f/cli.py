"""Command line: load 13F-HR holdings listed in a master index into SQLite."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
import time
from contextlib import closing

from holdings13f.fetch import fetch_url
from holdings13f.index import extract_13fhr_filings
from holdings13f.links import extract_xml_links
from holdings13f.store import open_database, parse_13f

DEFAULT_INDEX = "master_idx/master2025Q2.idx"
DEFAULT_DB = "holdings.db"


def find_info_table(xml_links):
    """Return ``(url, content)`` of the first link holding an information table."""
    for url in xml_links:
        content = fetch_url(url)
        if "infoTable" in content or "<nameOfIssuer" in content:
            return url, content
    return None


def _run(conn, index_path, delay):
    try:
        filings = extract_13fhr_filings(index_path)
    except OSError:
        print(f"Could not open file: {index_path}", file=sys.stderr)
        filings = []

    for filing in filings:
        print()
        print(filing.name)

        html = fetch_url(filing.folder_url)
        if not html:
            print(f"Failed to fetch folder HTML: {filing.folder_url}", file=sys.stderr)
            continue

        found = find_info_table(extract_xml_links(html, filing.folder_url))
        if found is None:
            print(f"No valid XML found for: {filing.folder_url}", file=sys.stderr)
            return 1

        url, content = found
        print(f"Valid XML found: {url}")
        try:
            parse_13f(content, filing.name, filing.quarter, filing.filing_date, conn)
        except (ValueError, LookupError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
        time.sleep(delay)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="holdings13f",
        description="Load 13F-HR holdings listed in an EDGAR master index into SQLite.",
    )
    parser.add_argument("index", nargs="?", default=DEFAULT_INDEX,
                        help="master index file (default: %(default)s)")
    parser.add_argument("--db", default=DEFAULT_DB,
                        help="SQLite database file (default: %(default)s)")
    parser.add_argument("--delay", type=float, default=1.0,
                        help="seconds to wait between filings (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")

    try:
        conn = open_database(args.db)
    except sqlite3.Error as exc:
        print(f"Can't open database: {exc}", file=sys.stderr)
        return 1

    with closing(conn):
        return _run(conn, args.index, args.delay)


if __name__ == "__main__":
    sys.exit(main())