from typing import Dict, Tuple

from .components import FAQEntry

DEFAULT_FAQS: Tuple[FAQEntry, ...] = (
    FAQEntry(
        "Are these flooring calculators free to use?",
        "Yes. Every calculator is free, works in any modern browser and needs no account.",
    ),
    FAQEntry(
        "How accurate are the results?",
        "Calculations use industry-standard formulas. Always confirm final quantities with your supplier, "
        "because product sizes and coverage rates vary between manufacturers.",
    ),
    FAQEntry(
        "How much extra material should I order?",
        "Add 5-10% for simple rectangular rooms and 15-20% for diagonal layouts, patterned materials or rooms "
        "with many obstacles.",
    ),
)

CALCULATOR_FAQS: Dict[str, Tuple[FAQEntry, ...]] = {
    "flooring-cost": (
        FAQEntry(
            "How much does flooring installation typically cost?",
            "Installation costs vary by material: Carpet $1-4/sq ft, Hardwood $4-8/sq ft, Tile $5-10/sq ft, "
            "Vinyl $2-5/sq ft, Laminate $2-6/sq ft. Complex patterns and subfloor prep increase costs.",
        ),
        FAQEntry(
            "What additional costs should I budget for?",
            "Include underlayment ($0.50-2/sq ft), transitions ($15-50 each), quarter round molding "
            "($1-3/linear ft), subfloor repairs, and disposal fees. Add 10-20% contingency for unexpected issues.",
        ),
        FAQEntry(
            "How do I get accurate labor estimates?",
            "Get quotes from 3+ licensed contractors. Prices vary by region, complexity, and contractor "
            "experience. Include removal of existing flooring, subfloor prep, and cleanup in estimates.",
        ),
        FAQEntry(
            "When is DIY flooring installation worth it?",
            "DIY saves 50-70% on labor for floating floors (laminate, LVP). Consider professional installation "
            "for tile, hardwood, or rooms with complex layouts requiring specialized tools and experience.",
        ),
    ),
    "square-footage": (
        FAQEntry(
            "How do I measure an irregular shaped room?",
            "Break irregular rooms into basic shapes (rectangles, triangles, circles). Measure each section "
            "separately, calculate their areas, then add them together.",
        ),
        FAQEntry(
            "What's the difference between square feet and square yards?",
            "1 square yard = 9 square feet. Divide square feet by 9 for square yards, or multiply square yards "
            "by 9 for square feet. Carpet is often sold by square yards, while most other flooring uses square feet.",
        ),
        FAQEntry(
            "Do I need to subtract area for doorways and built-ins?",
            "Subtract large permanent fixtures like kitchen islands or built-in cabinets. Don't subtract "
            "doorways, small closets, or areas under 10 sq ft.",
        ),
        FAQEntry(
            "How accurate should my measurements be?",
            "Measure to the nearest 1/4 inch and double-check every measurement. For large rooms, measure at "
            "room temperature.",
        ),
    ),
    "waste-percentage": (
        FAQEntry(
            "What is the standard waste percentage for flooring?",
            "Standard waste percentages: Tile 10-15%, Hardwood 10-15%, Vinyl/Laminate 5-10%, Carpet 10%, "
            "Stone 15-20%. Complex rooms or diagonal patterns require 15-25%.",
        ),
        FAQEntry(
            "Why do I need extra flooring material?",
            "Extra material accounts for cutting waste, defective pieces, future repairs, and installation "
            "errors. Pattern matching, diagonal layouts, and irregular rooms increase waste significantly.",
        ),
        FAQEntry(
            "How does room complexity affect waste percentage?",
            "Simple rectangular rooms: 5-10% waste. Moderate complexity: 10-15%. Complex rooms with many "
            "angles or islands: 15-25%. Each additional cut increases waste.",
        ),
        FAQEntry(
            "Should I order extra for future repairs?",
            "Yes, order 5-10% extra for future repairs and dye lot matching. Different production runs may "
            "not match exactly.",
        ),
    ),
}


def get_faqs(slug: str) -> Tuple[FAQEntry, ...]:
    return CALCULATOR_FAQS.get(slug, DEFAULT_FAQS)
