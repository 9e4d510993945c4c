"""
Calculator registry — maps calculator ids to calculator classes.
"""

from .acoustic_underlayment import AcousticUnderlaymentCalculator
from .base import BaseCalculator
from .baseboard_trim import BaseboardTrimCalculator
from .carpet import CarpetCalculator
from .circular_room import CircularRoomCalculator
from .concrete_flooring import ConcreteFlooringCalculator
from .engineered_wood import EngineeredWoodCalculator
from .epoxy_flooring import EpoxyFlooringCalculator
from .floating_floor_gap import FloatingFloorGapCalculator
from .floor_joist import FloorJoistCalculator
from .floor_load import FloorLoadCalculator
from .flooring_cost import FlooringCostCalculator
from .hardwood import HardwoodCalculator
from .installation_cost import InstallationCostCalculator
from .l_shaped_room import LShapedRoomCalculator
from .labor_cost import LaborCostCalculator
from .laminate import LaminateCalculator
from .moisture_barrier import MoistureBarrierCalculator
from .molding import MoldingCalculator
from .multi_room import MultiRoomCalculator
from .radiant_heating import RadiantHeatingCalculator
from .sheet_vinyl import SheetVinylCalculator
from .square_footage import SquareFootageCalculator
from .stair import StairCalculator
from .subfloor import SubfloorCalculator
from .tile import TileCalculator
from .tile_adhesive import TileAdhesiveCalculator
from .tile_grout import TileGroutCalculator
from .transition_strip import TransitionStripCalculator
from .vinyl import VinylCalculator
from .waste_percentage import WastePercentageCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    # Basic
    "flooring-cost": FlooringCostCalculator,
    "square-footage": SquareFootageCalculator,
    "waste-percentage": WastePercentageCalculator,
    # Materials
    "tile": TileCalculator,
    "hardwood": HardwoodCalculator,
    "vinyl": VinylCalculator,
    "carpet": CarpetCalculator,
    "laminate": LaminateCalculator,
    "sheet-vinyl": SheetVinylCalculator,
    "engineered-wood": EngineeredWoodCalculator,
    "tile-grout": TileGroutCalculator,
    "tile-adhesive": TileAdhesiveCalculator,
    "subfloor": SubfloorCalculator,
    "stair": StairCalculator,
    "baseboard-trim": BaseboardTrimCalculator,
    "molding": MoldingCalculator,
    "transition-strip": TransitionStripCalculator,
    # Room shapes
    "l-shaped-room": LShapedRoomCalculator,
    "circular-room": CircularRoomCalculator,
    "multi-room": MultiRoomCalculator,
    # Costs
    "labor-cost": LaborCostCalculator,
    "installation-cost": InstallationCostCalculator,
    # Advanced
    "floor-joist": FloorJoistCalculator,
    "floor-load": FloorLoadCalculator,
    "radiant-heating": RadiantHeatingCalculator,
    "acoustic-underlayment": AcousticUnderlaymentCalculator,
    "concrete-flooring": ConcreteFlooringCalculator,
    "epoxy-flooring": EpoxyFlooringCalculator,
    "moisture-barrier": MoistureBarrierCalculator,
    "floating-floor-gap": FloatingFloorGapCalculator,
}


def get_calculator(calculator_id: str) -> BaseCalculator:
    """Returns an instance of the calculator for an id, or raises ValueError."""
    if calculator_id not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for id: {calculator_id}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[calculator_id]()


def has_calculator(calculator_id: str) -> bool:
    """Check if a calculator exists for an id."""
    return calculator_id in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered calculator ids."""
    return list(CALCULATOR_REGISTRY.keys())
