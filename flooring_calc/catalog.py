"""
Calculator catalog — display metadata for every registered calculator.

Ids match calculators.registry. Categories group calculators for listing:
basic | materials | room-shapes | costs | advanced.
"""

from .models import CalculatorCategory


def _entry(title, description, category, route, keywords):
    return {
        "title": title,
        "description": description,
        "category": category.value,
        "route": route,
        "keywords": keywords,
    }


BASIC = CalculatorCategory.BASIC
MATERIALS = CalculatorCategory.MATERIALS
ROOM_SHAPES = CalculatorCategory.ROOM_SHAPES
COSTS = CalculatorCategory.COSTS
ADVANCED = CalculatorCategory.ADVANCED

CALCULATOR_CATALOG = {
    # --- Basic ---
    "flooring-cost": _entry(
        "Flooring Cost Calculator",
        "Calculate total project costs including materials, labor, and additional expenses for your flooring project.",
        BASIC, "/calculator/flooring-cost",
        ["flooring cost calculator", "flooring price estimator", "flooring budget calculator",
         "flooring installation cost"],
    ),
    "square-footage": _entry(
        "Square Footage Calculator",
        "Calculate precise square footage for regular, irregular, and complex room shapes.",
        BASIC, "/calculator/square-footage",
        ["square footage calculator", "room area calculator", "floor area calculator", "room size calculator"],
    ),
    "waste-percentage": _entry(
        "Waste Percentage Calculator",
        "Calculate optimal waste percentages based on room complexity, material type, and installation method.",
        BASIC, "/calculator/waste-percentage",
        ["flooring waste calculator", "material waste percentage", "flooring overage calculator",
         "waste factor calculator"],
    ),

    # --- Materials ---
    "tile": _entry(
        "Tile Calculator",
        "Calculate tiles needed by size, with grout and adhesive quantities.",
        MATERIALS, "/calculator/tile",
        ["tile calculator", "ceramic tile calculator", "tile grout calculator", "tile adhesive calculator"],
    ),
    "hardwood": _entry(
        "Hardwood Calculator",
        "Calculate hardwood flooring needs including boards, nails, adhesive, and underlayment.",
        MATERIALS, "/calculator/hardwood",
        ["hardwood flooring calculator", "wood flooring calculator", "hardwood cost calculator"],
    ),
    "vinyl": _entry(
        "Vinyl Flooring Calculator",
        "Calculate vinyl flooring requirements for luxury vinyl tile, sheet vinyl, and plank installations.",
        MATERIALS, "/calculator/vinyl",
        ["vinyl flooring calculator", "LVT calculator", "luxury vinyl calculator", "vinyl plank calculator"],
    ),
    "carpet": _entry(
        "Carpet Calculator",
        "Calculate carpet, padding, tack strip and seams from roll width and room layout.",
        MATERIALS, "/calculator/carpet",
        ["carpet calculator", "carpet seam calculator", "carpet padding calculator"],
    ),
    "laminate": _entry(
        "Laminate Calculator",
        "Calculate laminate planks, boxes, underlayment and trim for floating or glue-down installs.",
        MATERIALS, "/calculator/laminate",
        ["laminate flooring calculator", "laminate plank calculator", "laminate box calculator"],
    ),
    "sheet-vinyl": _entry(
        "Sheet Vinyl Calculator",
        "Plan sheet vinyl seam layout and calculate linear feet, waste and cost from roll width.",
        MATERIALS, "/calculator/sheet-vinyl",
        ["sheet vinyl calculator", "vinyl roll calculator", "vinyl seam layout"],
    ),
    "engineered-wood": _entry(
        "Engineered Wood Calculator",
        "Calculate engineered wood planks, boxes, adhesive and underlayment by installation method.",
        MATERIALS, "/calculator/engineered-wood",
        ["engineered wood calculator", "engineered hardwood calculator", "click-lock flooring calculator"],
    ),
    "tile-grout": _entry(
        "Tile Grout Calculator",
        "Calculate grout volume, weight and bags from tile size and joint dimensions.",
        MATERIALS, "/calculator/tile-grout",
        ["grout calculator", "tile grout calculator", "grout bags calculator"],
    ),
    "tile-adhesive": _entry(
        "Tile Adhesive Calculator",
        "Calculate thinset and tile adhesive by tile type, substrate and application method.",
        MATERIALS, "/calculator/tile-adhesive",
        ["tile adhesive calculator", "thinset calculator", "mortar coverage calculator"],
    ),
    "subfloor": _entry(
        "Subfloor Calculator",
        "Calculate subfloor sheets, fasteners and labor for plywood, OSB and cement board.",
        MATERIALS, "/calculator/subfloor",
        ["subfloor calculator", "plywood subfloor calculator", "OSB sheet calculator"],
    ),
    "stair": _entry(
        "Stair Flooring Calculator",
        "Calculate tread and riser coverage, stair nosing and cost for a staircase.",
        MATERIALS, "/calculator/stair",
        ["stair flooring calculator", "stair tread calculator", "stair nosing calculator"],
    ),
    "baseboard-trim": _entry(
        "Baseboard & Trim Calculator",
        "Calculate baseboard, quarter round, crown molding and casing with a cutting list.",
        MATERIALS, "/calculator/baseboard",
        ["baseboard calculator", "trim calculator", "door casing calculator", "crown molding calculator"],
    ),
    "molding": _entry(
        "Molding Calculator",
        "Calculate 8 ft molding pieces, nails and caulk for any room.",
        MATERIALS, "/calculator/molding",
        ["molding calculator", "quarter round calculator", "shoe molding calculator"],
    ),
    "transition-strip": _entry(
        "Transition Strip Calculator",
        "Calculate transition strip pieces and cost by profile and material.",
        MATERIALS, "/calculator/transition-strip",
        ["transition strip calculator", "t-molding calculator", "threshold calculator"],
    ),

    # --- Room shapes ---
    "l-shaped-room": _entry(
        "L-Shaped Room Calculator",
        "Calculate flooring for L-shaped rooms by splitting them into two rectangles.",
        ROOM_SHAPES, "/calculator/l-shaped-room",
        ["l-shaped room calculator", "l-shaped floor area", "irregular room calculator"],
    ),
    "circular-room": _entry(
        "Circular Room Calculator",
        "Calculate area, circumference and cut estimates for round rooms.",
        ROOM_SHAPES, "/calculator/circular-room",
        ["circular room calculator", "round room flooring", "circle area calculator"],
    ),
    "multi-room": _entry(
        "Multi-Room Calculator",
        "Combine several rooms into one flooring order with bulk pricing.",
        ROOM_SHAPES, "/calculator/multi-room",
        ["multi-room flooring calculator", "whole house flooring calculator", "bulk flooring calculator"],
    ),

    # --- Costs ---
    "labor-cost": _entry(
        "Labor Cost Calculator",
        "Estimate installer hours, labor cost and project duration by crew, region and experience.",
        COSTS, "/calculator/labor-cost",
        ["flooring labor cost calculator", "installer cost calculator", "flooring labor estimate"],
    ),
    "installation-cost": _entry(
        "Installation Cost Calculator",
        "Estimate professional installation cost with optional removal and subfloor work.",
        COSTS, "/calculator/installation-cost",
        ["flooring installation cost", "installation price calculator", "floor removal cost"],
    ),

    # --- Advanced ---
    "floor-joist": _entry(
        "Floor Joist Calculator",
        "Size floor joists by span, spacing and load type.",
        ADVANCED, "/calculator/floor-joist",
        ["floor joist calculator", "joist span calculator", "joist size calculator"],
    ),
    "floor-load": _entry(
        "Floor Load Calculator",
        "Calculate dead, live and design floor loads by occupancy.",
        ADVANCED, "/calculator/floor-load",
        ["floor load calculator", "live load calculator", "floor capacity calculator"],
    ),
    "radiant-heating": _entry(
        "Radiant Floor Heating Calculator",
        "Size electric or hydronic radiant floor heating and estimate running cost.",
        ADVANCED, "/calculator/radiant-heating",
        ["radiant floor heating calculator", "heated floor calculator", "underfloor heating cost"],
    ),
    "acoustic-underlayment": _entry(
        "Acoustic Underlayment Calculator",
        "Calculate sound-reducing underlayment rolls, tape and cost by rating.",
        ADVANCED, "/calculator/acoustic-underlayment",
        ["acoustic underlayment calculator", "soundproof underlayment", "IIC STC underlayment"],
    ),
    "concrete-flooring": _entry(
        "Concrete Flooring Calculator",
        "Estimate polished, stained, overlay and microtopping concrete floor costs.",
        ADVANCED, "/calculator/concrete",
        ["concrete floor calculator", "polished concrete cost", "stained concrete calculator"],
    ),
    "epoxy-flooring": _entry(
        "Epoxy Flooring Calculator",
        "Calculate primer, base coat and topcoat gallons and cost for epoxy floor systems.",
        ADVANCED, "/calculator/epoxy",
        ["epoxy floor calculator", "garage epoxy calculator", "floor coating calculator"],
    ),
    "moisture-barrier": _entry(
        "Moisture Barrier Calculator",
        "Calculate vapor barrier rolls, seam tape and primer for concrete and crawlspace floors.",
        ADVANCED, "/calculator/moisture-barrier",
        ["moisture barrier calculator", "vapor barrier calculator", "underlayment vapor retarder"],
    ),
    "floating-floor-gap": _entry(
        "Floating Floor Expansion Gap Calculator",
        "Calculate expansion gaps and maximum runs for floating floors.",
        ADVANCED, "/calculator/floating-floor-gap",
        ["expansion gap calculator", "floating floor gap", "laminate expansion gap"],
    ),
}

CATEGORIES = [c.value for c in CalculatorCategory]


def get_catalog_entry(calculator_id: str) -> dict:
    """Catalog entry with its id, or raises ValueError."""
    if calculator_id not in CALCULATOR_CATALOG:
        raise ValueError(f"No catalog entry for calculator id: {calculator_id}")
    return {"id": calculator_id, **CALCULATOR_CATALOG[calculator_id]}


def get_calculators_by_category(category: str = "all") -> list[dict]:
    """Catalog entries in a category. "all" returns everything."""
    if category != "all" and category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category}. Available: {['all'] + CATEGORIES}")
    return [
        get_catalog_entry(calculator_id)
        for calculator_id, entry in CALCULATOR_CATALOG.items()
        if category == "all" or entry["category"] == category
    ]
