"""Catalog lookups and route uniqueness."""

from calculators.registry import (
    CALCULATOR_REGISTRY,
    CalculatorDescriptor,
    find_duplicate_routes,
    get_calculator_by_route,
    get_calculators,
    get_calculators_by_category,
    get_categories,
    get_related_calculators,
)


def test_catalog_routes_are_unique():
    assert find_duplicate_routes(get_calculators()) == []
    routes = [calculator.route for calculator in CALCULATOR_REGISTRY]
    assert len(routes) == len(set(routes))


def test_catalog_slugs_are_unique():
    slugs = [calculator.slug for calculator in CALCULATOR_REGISTRY]
    assert len(slugs) == len(set(slugs))


def test_every_route_lives_under_calculator_prefix():
    for calculator in get_calculators():
        assert calculator.route.startswith("/calculator/"), calculator.slug


def test_every_calculator_has_a_known_category():
    known = {category.slug for category in get_categories()}
    for calculator in get_calculators():
        assert calculator.category in known


def test_find_duplicate_routes_reports_repeats():
    first = get_calculators()[0]
    clash = CalculatorDescriptor(
        slug="clash",
        title="Clash",
        description="",
        category="basic",
        icon="Calculator",
        color="blue",
        route=first.route,
        meta_title="",
        meta_description="",
    )
    assert find_duplicate_routes([first, clash, get_calculators()[1]]) == [first.route]


def test_lookup_by_route():
    calculator = get_calculator_by_route("/calculator/tile")
    assert calculator is not None
    assert calculator.title == "Tile Calculator"
    assert get_calculator_by_route("/calculator/does-not-exist") is None


def test_category_filter():
    assert get_calculators_by_category("all") == get_calculators()
    materials = get_calculators_by_category("materials")
    assert materials
    assert all(calculator.category == "materials" for calculator in materials)
    assert get_calculators_by_category("unknown") == []


def test_related_calculators_share_category_and_exclude_self():
    hardwood = get_calculator_by_route("/calculator/hardwood")
    related = get_related_calculators(hardwood)
    assert 0 < len(related) <= 6
    assert hardwood not in related
    assert all(calculator.category == hardwood.category for calculator in related)
    assert len(get_related_calculators(hardwood, limit=2)) == 2
