from django.conf import settings
from django.views.generic import TemplateView

from calculators.structured_data import site_origin, website_document
from calculators.views import CategoryFilterMixin

HOW_TO_STEPS = [
    ("Enter Measurements", "Input your room dimensions, material specifications, and project requirements with our guided forms."),
    ("Select Options", "Choose material type, installation method, and additional features relevant to your specific project."),
    ("Get Results", "Receive instant, accurate calculations with detailed breakdowns and professional recommendations."),
]

BENEFITS = [
    ("🎯", "Precision Accuracy", "Industry-standard formulas ensure calculations are accurate to within 1% margin of error."),
    ("⏰", "Save Time", "Complete complex calculations in seconds instead of hours of manual computation."),
    ("💰", "Reduce Costs", "Minimize material waste and over-ordering with precise quantity calculations."),
    ("📱", "Mobile Ready", "Use on-site with any device - calculations work perfectly on phones and tablets."),
    ("🎓", "Educational", "Learn while you calculate with detailed explanations and industry tips."),
    ("🛡️", "Professional Grade", "Developed with input from experienced contractors and flooring professionals."),
]


class HomeView(CategoryFilterMixin, TemplateView):
    template_name = "pages/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["how_to_steps"] = HOW_TO_STEPS
        context["benefits"] = BENEFITS
        context["structured_data"] = website_document(
            settings.SITE_NAME, settings.SITE_DESCRIPTION, site_origin(self.request)
        )
        return context
