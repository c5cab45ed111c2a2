"""schema.org JSON-LD documents for calculator pages.

Every builder is a pure function of its inputs and returns a plain dict; the
template layer decides where the document is embedded.
"""
from __future__ import annotations

import json
from typing import Dict, Iterable, Optional

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder

from .components import BreadcrumbItem, FAQEntry
from .registry import CalculatorDescriptor

SCHEMA_CONTEXT = "https://schema.org"
PUBLISHER_NAME = "FlooringCalc Pro"

_JSON_LD_ESCAPES = {
    ord("<"): "\\u003C",
    ord(">"): "\\u003E",
    ord("&"): "\\u0026",
}


def faq_page_document(entries: Iterable[FAQEntry]) -> Dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": entry.question,
                "acceptedAnswer": {"@type": "Answer", "text": entry.answer},
            }
            for entry in entries
        ],
    }


def breadcrumb_list_document(items: Iterable[BreadcrumbItem], base_url: str) -> Dict:
    """Build a BreadcrumbList; items without an href get no ``item`` location."""
    origin = base_url.rstrip("/")
    elements = []
    for position, item in enumerate(items, start=1):
        element = {"@type": "ListItem", "position": position, "name": item.label}
        if item.href:
            element["item"] = f"{origin}{item.href}"
        elements.append(element)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def _publisher(base_url: str) -> Dict:
    origin = base_url.rstrip("/")
    return {
        "@type": "Organization",
        "name": PUBLISHER_NAME,
        "url": origin,
        "logo": {"@type": "ImageObject", "url": f"{origin}/logo.png"},
    }


def web_application_document(
    calculator: CalculatorDescriptor, url: str, base_url: str, category: Optional[str] = None
) -> Dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebApplication",
        "name": calculator.title,
        "description": calculator.description,
        "url": url,
        "publisher": _publisher(base_url),
        "applicationCategory": "BusinessApplication",
        "applicationSubCategory": "Calculator",
        "operatingSystem": "Web Browser",
        "offers": {"@type": "Offer", "price": "0", "priceCurrency": "USD"},
        "featureList": [
            "Material quantity calculations",
            "Cost estimation",
            "Installation guidance",
            "Waste percentage calculations",
        ],
        "about": {
            "@type": "Thing",
            "name": calculator.title,
            "category": category or "Construction Tools",
        },
    }


def website_document(name: str, description: str, base_url: str) -> Dict:
    origin = base_url.rstrip("/")
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": name,
        "description": description,
        "url": origin,
        "publisher": _publisher(base_url),
        "potentialAction": {
            "@type": "SearchAction",
            "target": f"{origin}/search?q={{search_term_string}}",
            "query-input": "required name=search_term_string",
        },
    }


def dump_json_ld(document: Dict) -> str:
    """Serialize ``document`` so it can sit inside a ``<script>`` element."""
    return json.dumps(document, cls=DjangoJSONEncoder, ensure_ascii=False).translate(_JSON_LD_ESCAPES)


def site_origin(request=None) -> str:
    """Scheme and host the page was requested on, else the configured site URL."""
    if request is not None:
        return f"{request.scheme}://{request.get_host()}"
    return settings.SITE_BASE_URL.rstrip("/")
