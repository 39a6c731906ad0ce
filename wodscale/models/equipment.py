"""Equipment kinds and athlete equipment inventories."""

from enum import StrEnum


class Equipment(StrEnum):
    """Equipment required by movements and owned by athletes.

    NONE is a sentinel: a requirement of NONE is always satisfied.
    """

    # Barbells & plates
    BARBELL = "barbell"
    PLATES = "plates"
    # Dumbbells & kettlebells
    DUMBBELL = "dumbbell"
    KETTLEBELL = "kettlebell"
    # Bodyweight / gymnastics
    PULL_UP_BAR = "pull_up_bar"
    RINGS = "rings"
    PARALLETTES = "parallettes"
    GHD = "ghd"
    AB_MAT = "ab_mat"
    # Cardio machines
    ROWER = "rower"
    BIKE_ERG = "bike_erg"
    SKI_ERG = "ski_erg"
    ASSAULT_BIKE = "assault_bike"
    TREADMILL = "treadmill"
    # Other
    BOX = "box"
    ROPE = "rope"
    WALL_BALL = "wall_ball"
    MEDICINE_BALL = "medicine_ball"
    RESISTANCE_BAND = "resistance_band"
    SLED = "sled"
    SANDBAG = "sandbag"
    JUMP_ROPE = "jump_rope"
    BENCH = "bench"
    SQUAT_RACK = "squat_rack"
    # No equipment
    NONE = "none"


EquipmentInventory = frozenset[Equipment]


def create_inventory(items: list[Equipment] | list[str]) -> EquipmentInventory:
    """Build an inventory from equipment kinds or their string values."""
    return frozenset(Equipment(item) for item in items)


EQUIPMENT_PRESETS: dict[str, EquipmentInventory] = {
    # Full CrossFit-style box
    "full_gym": frozenset(
        {
            Equipment.BARBELL,
            Equipment.PLATES,
            Equipment.DUMBBELL,
            Equipment.KETTLEBELL,
            Equipment.PULL_UP_BAR,
            Equipment.RINGS,
            Equipment.GHD,
            Equipment.AB_MAT,
            Equipment.ROWER,
            Equipment.BIKE_ERG,
            Equipment.SKI_ERG,
            Equipment.ASSAULT_BIKE,
            Equipment.BOX,
            Equipment.ROPE,
            Equipment.WALL_BALL,
            Equipment.JUMP_ROPE,
            Equipment.BENCH,
            Equipment.SQUAT_RACK,
            Equipment.RESISTANCE_BAND,
        }
    ),
    "home_gym": frozenset(
        {
            Equipment.BARBELL,
            Equipment.PLATES,
            Equipment.DUMBBELL,
            Equipment.KETTLEBELL,
            Equipment.PULL_UP_BAR,
            Equipment.BOX,
            Equipment.JUMP_ROPE,
            Equipment.RESISTANCE_BAND,
            Equipment.BENCH,
            Equipment.SQUAT_RACK,
        }
    ),
    # Travel setup
    "minimal": frozenset(
        {
            Equipment.DUMBBELL,
            Equipment.RESISTANCE_BAND,
            Equipment.JUMP_ROPE,
        }
    ),
    "bodyweight": frozenset({Equipment.NONE}),
}


def is_equipment_available(required: Equipment, inventory: EquipmentInventory) -> bool:
    """Check a single requirement. NONE is always available."""
    return required == Equipment.NONE or required in inventory
