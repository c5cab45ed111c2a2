from django import template
from django.conf import settings
from django.http import QueryDict
from django.utils.safestring import mark_safe

from calculators.components import FAQAccordion, HeaderMenu
from calculators.quick_nav import get_popular_calculators
from calculators.structured_data import (
    breadcrumb_list_document,
    dump_json_ld,
    faq_page_document,
    site_origin,
)
from calculators.themes import resolve_icon, resolve_theme

register = template.Library()

FAQ_PARAM = "faq"
MENU_PARAM = "menu"
MENU_OPEN = "open"

FOOTER_QUICK_LINKS = [
    ("/#calculators", "All Calculators"),
    ("/#how-to-use", "How to Use"),
    ("/#benefits", "Benefits"),
]

FOOTER_POPULAR_TOOLS = [
    ("/calculator/flooring-cost", "Cost Calculator"),
    ("/calculator/square-footage", "Square Footage"),
    ("/calculator/tile", "Tile Calculator"),
    ("/calculator/hardwood", "Hardwood Calculator"),
]


def _url_with(request, param, value, fragment=""):
    """Current URL with ``param`` set to ``value``, or dropped when value is None."""
    if request is None:
        query = QueryDict(mutable=True)
        path = ""
    else:
        query = request.GET.copy()
        path = request.path
    if value is None:
        query.pop(param, None)
    else:
        query[param] = value
    encoded = query.urlencode() if query else ""
    url = f"{path}?{encoded}" if encoded else (path or "?")
    if fragment:
        url = f"{url}#{fragment}"
    return url


@register.simple_tag
def json_ld(document):
    """Embed a structured-data document as an ``application/ld+json`` script."""
    return mark_safe(f'<script type="application/ld+json">{dump_json_ld(document)}</script>')


@register.inclusion_tag("calculators/components/calculator_card.html")
def calculator_card(calculator):
    return {
        "calculator": calculator,
        "icon": resolve_icon(calculator.icon),
        "theme": resolve_theme(calculator.color),
    }


@register.inclusion_tag("calculators/components/calculator_grid.html")
def calculator_grid(calculators, show_more=True):
    return {"calculators": calculators, "show_more": show_more}


@register.inclusion_tag("calculators/components/quick_nav.html")
def quick_nav():
    return {"entries": get_popular_calculators()}


@register.inclusion_tag("calculators/components/faq_section.html", takes_context=True)
def faq_section(context, faqs, title="Frequently Asked Questions"):
    request = context.get("request")
    raw_index = request.GET.get(FAQ_PARAM) if request is not None else None
    accordion = FAQAccordion(faqs, FAQAccordion.parse_index(raw_index, len(faqs)))
    rows = []
    for index, entry, is_open in accordion:
        target = accordion.next_state(index)
        rows.append(
            {
                "index": index,
                "entry": entry,
                "is_open": is_open,
                "toggle_url": _url_with(
                    request, FAQ_PARAM, None if target is None else str(target), fragment=f"faq-{index}"
                ),
            }
        )
    return {
        "title": title,
        "rows": rows,
        "structured_data": faq_page_document(accordion.entries),
    }


@register.inclusion_tag("calculators/components/breadcrumb.html", takes_context=True)
def breadcrumb(context, items):
    items = list(items)
    return {
        "items": items,
        "structured_data": breadcrumb_list_document(items, site_origin(context.get("request"))),
    }


@register.inclusion_tag("calculators/components/site_header.html", takes_context=True)
def site_header(context):
    request = context.get("request")
    menu = HeaderMenu(
        mobile_menu_open=request is not None and request.GET.get(MENU_PARAM) == MENU_OPEN
    )
    return {
        "site_name": settings.SITE_NAME,
        "menu": menu,
        "toggle_url": _url_with(request, MENU_PARAM, None if menu.mobile_menu_open else MENU_OPEN),
    }


@register.inclusion_tag("calculators/components/site_footer.html")
def site_footer():
    return {
        "site_name": settings.SITE_NAME,
        "quick_links": FOOTER_QUICK_LINKS,
        "popular_tools": FOOTER_POPULAR_TOOLS,
        "contact_email": settings.CONTACT_EMAIL,
    }


@register.inclusion_tag("calculators/components/seo_head.html", takes_context=True)
def seo_head(context, title, description, keywords=(), canonical=None):
    request = context.get("request")
    if not canonical:
        path = request.path if request is not None else "/"
        canonical = f"{settings.SITE_BASE_URL.rstrip('/')}{path}"
    return {
        "title": title,
        "description": description,
        "keywords": ", ".join(keywords),
        "canonical": canonical,
        "site_name": settings.SITE_NAME,
        "twitter_site": settings.TWITTER_SITE,
    }
