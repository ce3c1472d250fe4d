from holdings13f.links import extract_xml_links

BASE = "https://www.example.com/folder/"


def test_duplicates_by_file_name_are_dropped():
    html = (
        '<a href="/Archives/edgar/data/1/2/primary_doc.xml">primary_doc.xml</a>'
        '<a href="/other/path/primary_doc.xml">again</a>'
    )
    assert extract_xml_links(html, BASE) == [BASE + "primary_doc.xml"]


def test_order_of_first_appearance_is_kept():
    html = "second.xml then first.xml then second.xml"
    assert extract_xml_links(html, BASE) == [BASE + "second.xml", BASE + "first.xml"]


def test_match_is_case_insensitive_and_keeps_case():
    html = '<a href="INFOTABLE.XML">x</a>'
    assert extract_xml_links(html, BASE) == [BASE + "INFOTABLE.XML"]


def test_full_url_reduced_to_file_name():
    html = '<a href="https://www.example.com/a/b/form13fInfoTable.xml">t</a>'
    assert extract_xml_links(html, BASE) == [BASE + "form13fInfoTable.xml"]


def test_no_xml_gives_empty_list():
    assert extract_xml_links("<html><a href='index.htm'>x</a></html>", BASE) == []


def test_every_link_starts_with_base():
    html = "a.xml b-c.xml d_e.xml"
    links = extract_xml_links(html, BASE)
    assert len(links) == 3
    assert all(link.startswith(BASE) and link.endswith(".xml") for link in links)