from django.core.checks import Error

from .registry import find_duplicate_routes, get_calculators


def check_unique_routes(app_configs=None, **kwargs):
    return [
        Error(
            f"Calculator route {route} is registered more than once.",
            hint="Give every CalculatorDescriptor in CALCULATOR_REGISTRY its own route.",
            obj=route,
            id="calculators.E001",
        )
        for route in find_duplicate_routes(get_calculators())
    ]
