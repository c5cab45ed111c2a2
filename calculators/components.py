"""State holders behind the interactive page components.

Each instance owns its state; nothing here is shared between components or
requests.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from django.urls import reverse

from .registry import CalculatorDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FAQEntry:
    question: str
    answer: str


@dataclass(frozen=True)
class BreadcrumbItem:
    label: str
    href: Optional[str] = None


@dataclass(frozen=True)
class NavItem:
    href: str
    label: str


class FAQAccordion:
    """Single-expand accordion over a fixed list of FAQ entries."""

    def __init__(self, entries: Sequence[FAQEntry], open_index: Optional[int] = None):
        self.entries: Tuple[FAQEntry, ...] = tuple(entries)
        if open_index is not None:
            self._check_index(open_index)
        self.open_index = open_index

    def __len__(self) -> int:
        return len(self.entries)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.entries):
            raise IndexError(f"FAQ index {index} out of range for {len(self.entries)} entries")

    @classmethod
    def parse_index(cls, raw: Optional[str], size: int) -> Optional[int]:
        """Turn a query-string value into an open index, or None if unusable."""
        if raw in (None, ""):
            return None
        try:
            index = int(raw)
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric FAQ index %r", raw)
            return None
        if not 0 <= index < size:
            logger.debug("Ignoring FAQ index %s outside 0..%s", index, size - 1)
            return None
        return index

    def next_state(self, index: int) -> Optional[int]:
        self._check_index(index)
        return None if self.open_index == index else index

    def toggle(self, index: int) -> Optional[int]:
        self.open_index = self.next_state(index)
        return self.open_index

    def is_open(self, index: int) -> bool:
        return self.open_index == index

    @property
    def visible_answer(self) -> Optional[str]:
        if self.open_index is None:
            return None
        return self.entries[self.open_index].answer

    def __iter__(self) -> Iterator[Tuple[int, FAQEntry, bool]]:
        for index, entry in enumerate(self.entries):
            yield index, entry, self.is_open(index)


PRIMARY_NAV: List[NavItem] = [
    NavItem(href="/#calculators", label="Calculators"),
    NavItem(href="/#how-to-use", label="How to Use"),
    NavItem(href="/#benefits", label="Benefits"),
]


class HeaderMenu:
    def __init__(self, mobile_menu_open: bool = False, items: Sequence[NavItem] = ()):
        self.mobile_menu_open = mobile_menu_open
        self.items: Tuple[NavItem, ...] = tuple(items) or tuple(PRIMARY_NAV)

    def toggle(self) -> bool:
        self.mobile_menu_open = not self.mobile_menu_open
        return self.mobile_menu_open

    def close(self) -> None:
        self.mobile_menu_open = False

    def navigate(self, item: NavItem) -> str:
        """Follow a link from the mobile panel; the panel always closes."""
        self.close()
        return item.href


def calculator_breadcrumb(calculator: CalculatorDescriptor) -> List[BreadcrumbItem]:
    return [
        BreadcrumbItem(label="Home", href=reverse("home")),
        BreadcrumbItem(label="Calculators", href=reverse("calculator_list")),
        BreadcrumbItem(label=calculator.title),
    ]
