import json

from calculators.components import BreadcrumbItem, FAQAccordion, FAQEntry
from calculators.registry import get_calculator_by_route
from calculators.structured_data import (
    breadcrumb_list_document,
    dump_json_ld,
    faq_page_document,
    site_origin,
    web_application_document,
    website_document,
)

FAQS = [FAQEntry("A?", "1"), FAQEntry("B?", "2")]


def test_faq_document_lists_every_entry():
    document = faq_page_document(FAQS)
    assert document["@context"] == "https://schema.org"
    assert document["@type"] == "FAQPage"
    assert document["mainEntity"] == [
        {"@type": "Question", "name": "A?", "acceptedAnswer": {"@type": "Answer", "text": "1"}},
        {"@type": "Question", "name": "B?", "acceptedAnswer": {"@type": "Answer", "text": "2"}},
    ]


def test_faq_document_ignores_open_state():
    for open_index in (None, 0, 1):
        accordion = FAQAccordion(FAQS, open_index=open_index)
        assert len(faq_page_document(accordion.entries)["mainEntity"]) == len(FAQS)


def test_breadcrumb_document_positions_and_locations():
    items = [
        BreadcrumbItem("Home", "/"),
        BreadcrumbItem("Calculators", "/calc"),
        BreadcrumbItem("Flooring Cost"),
    ]
    document = breadcrumb_list_document(items, "https://example.com/")
    assert document["@type"] == "BreadcrumbList"
    elements = document["itemListElement"]
    assert [element["position"] for element in elements] == [1, 2, 3]
    assert [element["name"] for element in elements] == ["Home", "Calculators", "Flooring Cost"]
    assert elements[0]["item"] == "https://example.com/"
    assert elements[1]["item"] == "https://example.com/calc"
    assert "item" not in elements[2]
    assert all(element["@type"] == "ListItem" for element in elements)


def test_breadcrumb_document_for_empty_trail():
    assert breadcrumb_list_document([], "https://example.com")["itemListElement"] == []


def test_web_application_document():
    calculator = get_calculator_by_route("/calculator/tile")
    document = web_application_document(
        calculator, url="https://example.com/calculator/tile", base_url="https://example.com"
    )
    assert document["@type"] == "WebApplication"
    assert document["name"] == "Tile Calculator"
    assert document["offers"]["price"] == "0"
    assert document["publisher"]["logo"]["url"] == "https://example.com/logo.png"


def test_website_document_search_action():
    document = website_document("FlooringCalc Pro", "Calculators", "https://example.com")
    assert document["@type"] == "WebSite"
    assert document["potentialAction"]["target"] == "https://example.com/search?q={search_term_string}"


def test_dump_json_ld_escapes_script_breakers():
    payload = dump_json_ld(faq_page_document([FAQEntry("</script><b>?", "a & b")]))
    assert "</script>" not in payload
    assert "&" not in payload
    assert json.loads(payload)["mainEntity"][0]["name"] == "</script><b>?"


def test_site_origin_prefers_request(rf, settings):
    settings.SITE_BASE_URL = "https://configured.example/"
    assert site_origin() == "https://configured.example"
    assert site_origin(rf.get("/")) == "http://testserver"
