"""System check guarding the catalog's route uniqueness."""

from dataclasses import replace

from django.core import checks

from calculators import checks as calculator_checks
from calculators.checks import check_unique_routes
from calculators.registry import get_calculators


def test_shipped_catalog_passes():
    assert check_unique_routes() == []


def test_check_is_registered():
    assert check_unique_routes in checks.registry.registry.get_checks()


def test_duplicate_route_is_reported(monkeypatch):
    catalog = list(get_calculators())
    catalog.append(replace(catalog[0], slug="copy"))
    monkeypatch.setattr(calculator_checks, "get_calculators", lambda: catalog)

    errors = check_unique_routes()

    assert len(errors) == 1
    assert errors[0].id == "calculators.E001"
    assert errors[0].obj == catalog[0].route
