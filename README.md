# holdings13f

holdings13f collects institutional holdings from SEC 13F-HR filings and stores them in a local SQLite database. It uses only the Python standard library.

It works in four steps:

1. It reads an EDGAR quarterly master index file and picks out every `13F-HR` filing listed after the `CIK|Company Name|Form Type|Date Filed|Filename` header line. For each one it records the filer's name, the archive folder URL, the filing quarter (for example `2025Q2`, or `Unknown` when the date is too short) and the filing date.
2. It downloads the HTML listing of each filing folder and collects the distinct `.xml` file names linked in it.
3. It downloads those XML files one at a time until it finds one that contains `infoTable` or `<nameOfIssuer`.
4. It parses the `infoTable` entries in that file (issuer name, CUSIP, share amount, value, put/call) and writes them to the `firms`, `filings` and `holdings` tables.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
holdings13f [INDEX] [--db DB] [--delay SECONDS]
```

- `INDEX`: the master index file to read (default `master_idx/master2025Q2.idx`).
- `--db`: the SQLite database file (default `holdings.db`). It is created along with its tables if it does not exist.
- `--delay`: seconds to wait after each loaded filing (default `1.0`), to keep the request rate to SEC servers low.

For each filing the command prints the filer's name and the URL of the XML file it loaded. If the index file cannot be opened, it reports this and loads nothing. If a folder page cannot be fetched, it reports this and moves on to the next filing. If a filing has no XML file with holdings, it reports this and stops with exit status 1. If the database cannot be opened, it exits with status 1. Entries that lack an issuer name, CUSIP or share amount are skipped with a warning.

## Library use

```python
from holdings13f.index import extract_13fhr_filings, quarter_from_date
from holdings13f.links import extract_xml_links
from holdings13f.fetch import fetch_url
from holdings13f.store import open_database, parse_13f
from holdings13f.cli import find_info_table

conn = open_database("holdings.db")
for filing in extract_13fhr_filings("master_idx/master2025Q2.idx"):
    html = fetch_url(filing.folder_url)
    found = find_info_table(extract_xml_links(html, filing.folder_url))
    if found is not None:
        url, content = found
        count = parse_13f(content, filing.name, filing.quarter, filing.filing_date, conn)
```

- `index.Filing` is a frozen dataclass with `name`, `folder_url`, `quarter` and `filing_date`. `extract_13fhr_filings` raises `OSError` when the file cannot be opened. `quarter_from_date("2025-05-14")` returns `"2025Q2"`.
- `links.extract_xml_links(html, base_url)` keeps only the last path component of each match, joins it to `base_url`, drops repeats and keeps the order of first appearance.
- `fetch.fetch_url(url)` follows redirects and returns the body as text. It returns an empty string for any status other than 200 and for any network failure. Requests send the User-Agent in `fetch.USER_AGENT`, since SEC EDGAR expects a descriptive one; set it to your own contact before heavy use.
- `store.open_database(path)` opens the database and creates the tables. `store.parse_13f(...)` returns the number of holdings stored. It raises `ValueError` when the content is an HTML page or is not well-formed XML, and `LookupError` when no filing row can be found. `store.strip_namespace` removes a `{uri}` or `prefix:` namespace from a tag name.

## Database layout

- `firms(id, name)`: one row per filer. Each name is unique.
- `filings(id, firm_id, filing_date, quarter)`: one row is added on each load. Holdings are attached to the earliest row for the firm and quarter.
- `holdings(id, filing_id, cusip, name_of_issuer, shares, value, put_call)`: one row per information-table entry. A missing value is stored as 0.

## What it does not do

The package does not download master index files. You supply the index file yourself. It does not query or report on the stored holdings. Use any SQLite client for that.