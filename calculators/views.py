import logging

from django.http import Http404
from django.views.generic import TemplateView

from .components import calculator_breadcrumb
from .faqs import get_faqs
from .registry import (
    ALL_CATEGORIES,
    get_calculator_by_route,
    get_calculators_by_category,
    get_categories,
    get_related_calculators,
)
from .structured_data import site_origin, web_application_document

logger = logging.getLogger(__name__)


class CategoryFilterMixin:
    """Adds the catalog filtered by the ``category`` query parameter."""

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        active_category = self.request.GET.get("category", ALL_CATEGORIES)
        context["categories"] = get_categories()
        context["active_category"] = active_category
        context["calculators"] = get_calculators_by_category(active_category)
        return context


class CalculatorListView(CategoryFilterMixin, TemplateView):
    template_name = "calculators/calculator_list.html"


class CalculatorPageView(TemplateView):
    template_name = "calculators/calculator_page.html"

    def dispatch(self, request, *args, **kwargs):
        self.calculator = get_calculator_by_route(request.path_info)
        if self.calculator is None:
            logger.info("No calculator registered for route %s", request.path_info)
            raise Http404("Calculator not found")
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        origin = site_origin(self.request)
        context["calculator"] = self.calculator
        context["breadcrumb_items"] = calculator_breadcrumb(self.calculator)
        context["faqs"] = get_faqs(self.calculator.slug)
        context["related_calculators"] = get_related_calculators(self.calculator)
        context["structured_data"] = web_application_document(
            self.calculator,
            url=f"{origin}{self.calculator.route}",
            base_url=origin,
        )
        return context


class RobotsTxtView(TemplateView):
    template_name = "robots.txt"
    content_type = "text/plain"
