"""FAQ accordion and header menu state transitions."""

import itertools

import pytest

from calculators.components import (
    PRIMARY_NAV,
    BreadcrumbItem,
    FAQAccordion,
    FAQEntry,
    HeaderMenu,
    calculator_breadcrumb,
)
from calculators.registry import get_calculator_by_route

FAQS = [FAQEntry("A?", "1"), FAQEntry("B?", "2")]


def test_accordion_starts_collapsed():
    accordion = FAQAccordion(FAQS)
    assert accordion.open_index is None
    assert accordion.visible_answer is None


def test_accordion_toggle_scenario():
    accordion = FAQAccordion(FAQS)

    assert accordion.toggle(0) == 0
    assert accordion.visible_answer == "1"

    assert accordion.toggle(0) is None
    assert accordion.visible_answer is None

    assert accordion.toggle(1) == 1
    assert accordion.visible_answer == "2"


def test_opening_another_entry_collapses_the_previous_one():
    accordion = FAQAccordion(FAQS, open_index=0)
    accordion.toggle(1)
    assert not accordion.is_open(0)
    assert accordion.is_open(1)


@pytest.mark.parametrize("sequence", list(itertools.product(range(3), repeat=4)))
def test_toggle_law_holds_for_any_sequence(sequence):
    entries = [FAQEntry(f"Q{i}", f"A{i}") for i in range(3)]
    accordion = FAQAccordion(entries)
    previous = None
    for index in sequence:
        accordion.toggle(index)
        expected = None if previous == index else index
        assert accordion.open_index == expected
        assert sum(is_open for _, _, is_open in accordion) == (0 if expected is None else 1)
        previous = expected


def test_next_state_does_not_mutate():
    accordion = FAQAccordion(FAQS, open_index=1)
    assert accordion.next_state(1) is None
    assert accordion.next_state(0) == 0
    assert accordion.open_index == 1


def test_toggle_outside_index_space_raises():
    accordion = FAQAccordion(FAQS)
    with pytest.raises(IndexError):
        accordion.toggle(2)
    with pytest.raises(IndexError):
        FAQAccordion(FAQS, open_index=-1)


@pytest.mark.parametrize(
    "raw,expected",
    [(None, None), ("", None), ("0", 0), ("1", 1), ("2", None), ("-1", None), ("abc", None)],
)
def test_parse_index(raw, expected):
    assert FAQAccordion.parse_index(raw, len(FAQS)) == expected


def test_header_toggle_is_reversible():
    menu = HeaderMenu()
    assert menu.toggle() is True
    assert menu.toggle() is False
    assert menu.items == tuple(PRIMARY_NAV)


@pytest.mark.parametrize("initially_open", [True, False])
def test_header_navigation_always_closes_menu(initially_open):
    menu = HeaderMenu(mobile_menu_open=initially_open)
    item = PRIMARY_NAV[1]
    assert menu.navigate(item) == item.href
    assert menu.mobile_menu_open is False


def test_calculator_breadcrumb_ends_with_current_page():
    calculator = get_calculator_by_route("/calculator/flooring-cost")
    items = calculator_breadcrumb(calculator)
    assert items == [
        BreadcrumbItem("Home", "/"),
        BreadcrumbItem("Calculators", "/calculators/"),
        BreadcrumbItem("Flooring Cost Calculator"),
    ]
