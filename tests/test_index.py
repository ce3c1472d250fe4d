import pytest

from holdings13f.index import Filing, extract_13fhr_filings, quarter_from_date

IDX = """Description:           Master Index of EDGAR Dissemination Feed
Last Data Received:    June 30, 2025
9999999|EARLY FIRM|13F-HR|2025-05-15|edgar/data/9999999/0009999999-25-000009.txt

CIK|Company Name|Form Type|Date Filed|Filename
--------------------------------------------------------------------------------
1234567|EXAMPLE CAPITAL LLC|13F-HR|2025-05-15|edgar/data/1234567/0001234567-25-000001.txt
7654321|SAMPLE HOLDINGS INC|10-K|2025-04-01|edgar/data/7654321/0007654321-25-000002.txt
2345678|DEMO ADVISORS LP|13F-HR/A|2025-05-20|edgar/data/2345678/0002345678-25-000003.txt
3456789|TRAILING PIPE FUND|13F-HR|2025-06-30|edgar/data/3456789/0003456789-25-000004.txt|
5678901|SIX FIELD FUND|13F-HR|2025-05-15|edgar/data/5678901/0005678901-25-000006.txt|extra
6789012|NO TXT FUND|13F-HR|2025-05-15|edgar/data/6789012/index.htm
4567890|SHORT DATE LLC|13F-HR|2025|edgar/data/4567890/0004567890-25-000005.txt
"""


@pytest.fixture
def filings(tmp_path):
    path = tmp_path / "master.idx"
    path.write_text(IDX, encoding="utf-8")
    return extract_13fhr_filings(path)


def test_only_13fhr_rows_after_header_are_kept(filings):
    assert [f.name for f in filings] == [
        "EXAMPLE CAPITAL LLC",
        "TRAILING PIPE FUND",
        "SHORT DATE LLC",
    ]


def test_folder_url_drops_dashes(filings):
    first = filings[0]
    assert first.folder_url == (
        "https://www.sec.gov/Archives/edgar/data/1234567/000123456725000001/"
    )
    assert all(f.folder_url.endswith("/") for f in filings)


def test_quarter_and_date_of_filing(filings):
    first = filings[0]
    assert first.quarter == "2025Q2"
    assert first.filing_date == "2025-05-15"
    assert first == Filing(first.name, first.folder_url, "2025Q2", "2025-05-15")


def test_short_date_gives_unknown_quarter(filings):
    assert filings[-1].quarter == "Unknown"
    assert filings[-1].filing_date == "2025"


def test_file_without_header_gives_nothing(tmp_path):
    path = tmp_path / "noheader.idx"
    path.write_text(
        "1234567|EXAMPLE CAPITAL LLC|13F-HR|2025-05-15|"
        "edgar/data/1234567/0001234567-25-000001.txt\n",
        encoding="utf-8",
    )
    assert extract_13fhr_filings(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        extract_13fhr_filings(tmp_path / "absent.idx")


def test_quarter_from_date_end_of_year():
    assert quarter_from_date("2024-12-31") == "2024Q4"


def test_quarters_cover_months_in_order():
    labels = [quarter_from_date(f"2025-{month:02d}-01") for month in range(1, 13)]
    assert labels == sorted(labels)
    assert len(set(labels)) == 4
    assert all(labels.count(label) == 3 for label in set(labels))


def test_quarter_from_date_rejects_garbage():
    with pytest.raises(ValueError):
        quarter_from_date("yyyy-mm-dd")