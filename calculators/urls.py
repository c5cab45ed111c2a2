from django.urls import path

from .registry import get_calculators
from .views import CalculatorListView, CalculatorPageView

urlpatterns = [
    path("calculators/", CalculatorListView.as_view(), name="calculator_list"),
]

urlpatterns += [
    path(calculator.route.lstrip("/"), CalculatorPageView.as_view(), name=f"calculator_{calculator.slug}")
    for calculator in get_calculators()
]
