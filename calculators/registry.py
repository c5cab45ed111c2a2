from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class CalculatorDescriptor:
    slug: str
    title: str
    description: str
    category: str
    icon: str
    color: str
    route: str
    meta_title: str
    meta_description: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CalculatorCategory:
    slug: str
    name: str


ALL_CATEGORIES = "all"

CATEGORIES: List[CalculatorCategory] = [
    CalculatorCategory(slug=ALL_CATEGORIES, name="All Calculators"),
    CalculatorCategory(slug="basic", name="Basic Calculations"),
    CalculatorCategory(slug="materials", name="Material Types"),
    CalculatorCategory(slug="advanced", name="Advanced Tools"),
]


CALCULATOR_REGISTRY: List[CalculatorDescriptor] = [
    CalculatorDescriptor(
        slug="flooring-cost",
        title="Flooring Cost Calculator",
        description="Calculate total project costs including materials, labor, and additional expenses for your flooring project.",
        category="basic",
        icon="Calculator",
        color="blue",
        route="/calculator/flooring-cost",
        meta_title="Flooring Cost Calculator - Free Professional Tool | FlooringCalc Pro",
        meta_description="Calculate accurate flooring costs including materials, labor, and waste. Professional-grade calculator for contractors and homeowners. Get instant estimates.",
        keywords=("flooring cost calculator", "flooring price estimator", "flooring budget calculator", "flooring installation cost"),
    ),
    CalculatorDescriptor(
        slug="square-footage",
        title="Square Footage Calculator",
        description="Calculate precise square footage for regular, irregular, and complex room shapes with our advanced measurement tool.",
        category="basic",
        icon="RulerCombined",
        color="green",
        route="/calculator/square-footage",
        meta_title="Square Footage Calculator - Room Area Calculator | FlooringCalc Pro",
        meta_description="Calculate room square footage for any shape - rectangular, L-shaped, circular rooms. Professional room area calculator with instant results.",
        keywords=("square footage calculator", "room area calculator", "floor area calculator", "room size calculator"),
    ),
    CalculatorDescriptor(
        slug="installation-cost",
        title="Flooring Installation Cost Estimator",
        description="Estimate professional installation costs based on flooring type, room complexity, and local labor rates.",
        category="basic",
        icon="Wrench",
        color="orange",
        route="/calculator/installation-cost",
        meta_title="Flooring Installation Cost Estimator - Labor Cost Calculator | FlooringCalc Pro",
        meta_description="Calculate flooring installation costs with professional labor rates. Get accurate estimates for tile, hardwood, vinyl, and carpet installation.",
        keywords=("flooring installation cost", "installation estimator", "flooring labor rates"),
    ),
    CalculatorDescriptor(
        slug="waste-percentage",
        title="Waste Percentage Calculator",
        description="Calculate optimal waste percentages based on room complexity, material type, and installation method.",
        category="basic",
        icon="Percent",
        color="yellow",
        route="/calculator/waste-percentage",
        meta_title="Flooring Waste Calculator - Material Waste Percentage | FlooringCalc Pro",
        meta_description="Calculate optimal flooring waste percentage for your project. Reduce material costs and minimize over-ordering with precise calculations.",
        keywords=("flooring waste calculator", "material waste percentage", "flooring overage calculator", "waste factor calculator"),
    ),
    CalculatorDescriptor(
        slug="material-quantity",
        title="Flooring Material Quantity Calculator",
        description="Calculate exact quantities of flooring materials needed including adhesives, underlayment, and trim.",
        category="basic",
        icon="Package",
        color="teal",
        route="/calculator/material-quantity",
        meta_title="Flooring Material Quantity Calculator - Material Estimator | FlooringCalc Pro",
        meta_description="Calculate exact flooring material quantities needed. Professional material estimator for adhesives, underlayment, trim, and transition strips.",
        keywords=("material quantity calculator", "flooring material estimator", "underlayment calculator"),
    ),
    CalculatorDescriptor(
        slug="labor-cost",
        title="Flooring Labor Cost Calculator",
        description="Calculate labor costs for flooring installation based on project complexity and regional rates.",
        category="basic",
        icon="Users",
        color="indigo",
        route="/calculator/labor-cost",
        meta_title="Flooring Labor Cost Calculator - Installation Labor Estimator | FlooringCalc Pro",
        meta_description="Calculate accurate flooring labor costs. Professional labor cost estimator for contractors and homeowners planning flooring projects.",
        keywords=("flooring labor cost", "installation labor estimator", "contractor labor calculator"),
    ),
    CalculatorDescriptor(
        slug="room-area",
        title="Room Area Calculator (Irregular & Regular)",
        description="Calculate area for irregular and regular room shapes including L-shaped, curved, and multi-room layouts.",
        category="basic",
        icon="Home",
        color="cyan",
        route="/calculator/room-area",
        meta_title="Room Area Calculator - Irregular & Regular Shapes | FlooringCalc Pro",
        meta_description="Calculate room area for any shape - irregular, L-shaped, curved rooms. Professional room area calculator with complex shape support.",
        keywords=("room area calculator", "irregular room calculator", "floor area calculator"),
    ),
    CalculatorDescriptor(
        slug="tile-calculator",
        title="Tile Calculator",
        description="Calculate tiles needed by size, grout spacing, adhesive quantity, and complex pattern layouts.",
        category="materials",
        icon="Grid",
        color="amber",
        route="/calculator/tile",
        meta_title="Tile Calculator - Tiles, Grout & Adhesive Calculator | FlooringCalc Pro",
        meta_description="Professional tile calculator for ceramic, porcelain, and stone tiles. Calculate tiles needed, grout, and adhesive quantities with pattern support.",
        keywords=("tile calculator", "ceramic tile calculator", "tile grout calculator", "tile adhesive calculator", "tile pattern calculator"),
    ),
    CalculatorDescriptor(
        slug="tile-adhesive",
        title="Tile Adhesive Calculator",
        description="Calculate adhesive quantities for ceramic, porcelain, and stone tile installations.",
        category="materials",
        icon="Droplets",
        color="sky",
        route="/calculator/tile-adhesive",
        meta_title="Tile Adhesive Calculator - Tile Glue Quantity Estimator | FlooringCalc Pro",
        meta_description="Calculate tile adhesive quantities needed for ceramic, porcelain, and stone tiles. Professional adhesive calculator with coverage rates.",
        keywords=("tile adhesive calculator", "thinset calculator", "tile glue estimator"),
    ),
    CalculatorDescriptor(
        slug="carpet",
        title="Carpet Calculator",
        description="Calculate carpet requirements including padding, tack strips, and installation materials.",
        category="materials",
        icon="Square",
        color="rose",
        route="/calculator/carpet",
        meta_title="Carpet Calculator - Carpet & Padding Calculator | FlooringCalc Pro",
        meta_description="Calculate carpet requirements including padding, tack strips, and installation materials. Professional carpet flooring calculator.",
        keywords=("carpet calculator", "carpet padding calculator", "carpet square yards"),
    ),
    CalculatorDescriptor(
        slug="epoxy",
        title="Epoxy Flooring Coverage Calculator",
        description="Calculate epoxy flooring coverage for garage floors, basements, and commercial applications.",
        category="advanced",
        icon="Paintbrush",
        color="violet",
        route="/calculator/epoxy",
        meta_title="Epoxy Flooring Calculator - Epoxy Coverage Calculator | FlooringCalc Pro",
        meta_description="Calculate epoxy flooring coverage for garage floors and commercial spaces. Professional epoxy coating calculator with primer and topcoat estimates.",
        keywords=("epoxy flooring calculator", "epoxy coverage calculator", "garage floor coating"),
    ),
    CalculatorDescriptor(
        slug="laminate",
        title="Laminate Flooring Calculator",
        description="Calculate laminate flooring materials including planks, underlayment, and transition strips.",
        category="materials",
        icon="Layers2",
        color="emerald",
        route="/calculator/laminate",
        meta_title="Laminate Flooring Calculator - Laminate Plank Calculator | FlooringCalc Pro",
        meta_description="Calculate laminate flooring materials including planks, underlayment, and transitions. Professional laminate flooring calculator.",
        keywords=("laminate flooring calculator", "laminate plank calculator", "laminate underlayment"),
    ),
    CalculatorDescriptor(
        slug="concrete",
        title="Concrete Flooring Cost Calculator",
        description="Calculate concrete flooring costs including polishing, staining, and sealing materials.",
        category="advanced",
        icon="Building",
        color="slate",
        route="/calculator/concrete",
        meta_title="Concrete Flooring Calculator - Polished Concrete Calculator | FlooringCalc Pro",
        meta_description="Calculate concrete flooring costs including polishing, staining, and sealing. Professional concrete floor calculator for commercial and residential projects.",
        keywords=("concrete flooring calculator", "polished concrete cost", "concrete sealing calculator"),
    ),
    CalculatorDescriptor(
        slug="baseboard",
        title="Baseboard & Trim Calculator",
        description="Calculate baseboard, quarter round, and trim lengths needed for flooring installations.",
        category="materials",
        icon="RectangleHorizontal",
        color="stone",
        route="/calculator/baseboard",
        meta_title="Baseboard Calculator - Trim & Molding Calculator | FlooringCalc Pro",
        meta_description="Calculate baseboard, quarter round, and trim lengths for flooring projects. Professional trim calculator with miter cuts and waste factors.",
        keywords=("baseboard calculator", "trim calculator", "quarter round calculator", "molding calculator"),
    ),
    CalculatorDescriptor(
        slug="vinyl-calculator",
        title="Vinyl Flooring Calculator",
        description="Calculate vinyl flooring requirements for luxury vinyl tile, sheet vinyl, and plank installations.",
        category="materials",
        icon="Layers",
        color="purple",
        route="/calculator/vinyl",
        meta_title="Vinyl Flooring Calculator - LVT & LVP Calculator | FlooringCalc Pro",
        meta_description="Calculate luxury vinyl tile (LVT), vinyl plank (LVP), and sheet vinyl flooring requirements. Professional vinyl flooring calculator.",
        keywords=("vinyl flooring calculator", "LVT calculator", "luxury vinyl calculator", "vinyl plank calculator", "sheet vinyl calculator"),
    ),
    CalculatorDescriptor(
        slug="stone",
        title="Stone Flooring Calculator",
        description="Calculate natural stone flooring materials including marble, granite, travertine, and slate.",
        category="materials",
        icon="Mountain",
        color="gray",
        route="/calculator/stone",
        meta_title="Stone Flooring Calculator - Marble Granite Calculator | FlooringCalc Pro",
        meta_description="Calculate stone flooring materials including marble, granite, travertine, and slate tiles. Professional natural stone calculator.",
        keywords=("stone flooring calculator", "marble flooring calculator", "granite tile calculator"),
    ),
    CalculatorDescriptor(
        slug="room-shape",
        title="Room Shape Calculator",
        description="Calculate flooring materials for complex room shapes including L-shaped, circular, and custom layouts.",
        category="basic",
        icon="CornerUpLeft",
        color="lime",
        route="/calculator/room-shape",
        meta_title="Room Shape Calculator - L-Shape Circle Calculator | FlooringCalc Pro",
        meta_description="Calculate flooring for complex room shapes including L-shaped, U-shaped, circular, and custom room layouts. Professional room area calculator.",
        keywords=("room shape calculator", "L-shaped room calculator", "circular room calculator"),
    ),
    CalculatorDescriptor(
        slug="bamboo",
        title="Bamboo Flooring Calculator",
        description="Calculate bamboo flooring materials including solid, engineered, and strand-woven bamboo requirements.",
        category="materials",
        icon="Leaf",
        color="green",
        route="/calculator/bamboo",
        meta_title="Bamboo Flooring Calculator - Eco-Friendly Bamboo Calculator | FlooringCalc Pro",
        meta_description="Calculate bamboo flooring materials including solid, engineered, and strand-woven bamboo. Professional eco-friendly flooring calculator.",
        keywords=("bamboo flooring calculator", "strand woven bamboo", "eco-friendly flooring calculator"),
    ),
    CalculatorDescriptor(
        slug="cork",
        title="Cork Flooring Calculator",
        description="Calculate cork flooring materials including tiles, planks, and sheet cork requirements.",
        category="materials",
        icon="TreeDeciduous",
        color="brown",
        route="/calculator/cork",
        meta_title="Cork Flooring Calculator - Eco Cork Tile Calculator | FlooringCalc Pro",
        meta_description="Calculate cork flooring materials including tiles, planks, and sheet cork. Professional eco-friendly cork flooring calculator.",
        keywords=("cork flooring calculator", "cork tile calculator", "cork plank calculator"),
    ),
    CalculatorDescriptor(
        slug="subfloor",
        title="Subfloor Calculator",
        description="Calculate subfloor materials including plywood, OSB, and cement board requirements.",
        category="advanced",
        icon="Layers3",
        color="zinc",
        route="/calculator/subfloor",
        meta_title="Subfloor Calculator - Plywood OSB Calculator | FlooringCalc Pro",
        meta_description="Calculate subfloor materials including plywood, OSB, and cement board. Professional subfloor installation calculator.",
        keywords=("subfloor calculator", "plywood subfloor calculator", "OSB calculator", "cement board calculator"),
    ),
    CalculatorDescriptor(
        slug="hardwood-calculator",
        title="Hardwood Calculator",
        description="Calculate hardwood flooring needs including boards, nails, underlayment, and finishing materials.",
        category="materials",
        icon="TreePine",
        color="red",
        route="/calculator/hardwood",
        meta_title="Hardwood Flooring Calculator - Wood Floor Calculator | FlooringCalc Pro",
        meta_description="Professional hardwood flooring calculator. Calculate solid and engineered wood flooring materials, nails, underlayment, and finishing supplies.",
        keywords=("hardwood flooring calculator", "wood flooring calculator", "engineered wood calculator", "hardwood cost calculator"),
    ),
]


def get_calculators() -> List[CalculatorDescriptor]:
    return CALCULATOR_REGISTRY


def get_categories() -> List[CalculatorCategory]:
    return CATEGORIES


def get_calculator_by_route(route: str) -> Optional[CalculatorDescriptor]:
    for calculator in CALCULATOR_REGISTRY:
        if calculator.route == route:
            return calculator
    return None


def get_calculators_by_category(category: str) -> List[CalculatorDescriptor]:
    if category == ALL_CATEGORIES:
        return CALCULATOR_REGISTRY
    return [calculator for calculator in CALCULATOR_REGISTRY if calculator.category == category]


def get_related_calculators(
    calculator: CalculatorDescriptor, limit: int = 6
) -> List[CalculatorDescriptor]:
    """Return up to ``limit`` other calculators sharing ``calculator``'s category."""
    related = [
        candidate
        for candidate in get_calculators_by_category(calculator.category)
        if candidate.route != calculator.route
    ]
    return related[:limit]


def find_duplicate_routes(calculators: Iterable[CalculatorDescriptor]) -> List[str]:
    counts = Counter(calculator.route for calculator in calculators)
    return sorted(route for route, count in counts.items() if count > 1)
