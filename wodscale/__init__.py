"""wodscale - constraint-aware movement substitution and workout tier scaling.

This package provides:
- Limitation records and the movement constraints they produce
- A read-only movement catalog with integrity validation
- A resolver deciding whether a movement fits constraints and equipment
- A substitution search for rejected movements
- A tier scaler rewriting workouts for five difficulty levels
"""

from wodscale.catalog import MovementCatalog, get_default_catalog, load_catalog
from wodscale.errors import CatalogIntegrityError, CatalogLoadError, UnknownMovementError, WodscaleError
from wodscale.models import (
    EQUIPMENT_PRESETS,
    Athlete,
    DifficultyTier,
    Equipment,
    Limitation,
    Movement,
    MovementConstraint,
    MovementPrescription,
    Workout,
    build_constraint,
    build_injury_constraint,
    build_postpartum_constraint,
    build_pregnancy_constraint,
    create_inventory,
)
from wodscale.scaling import (
    MovementCheck,
    ScaledWorkout,
    ScalingNote,
    SubstitutionResult,
    check_movement,
    filter_allowed_movements,
    find_substitution,
    find_tiered_movement,
    generate_all_scaling_tiers,
    merge_constraints,
    merge_movement_constraints,
    scale_workout_movements,
    scale_workout_to_tier,
)

__version__ = "0.1.0"

__all__ = [
    "EQUIPMENT_PRESETS",
    "Athlete",
    "CatalogIntegrityError",
    "CatalogLoadError",
    "DifficultyTier",
    "Equipment",
    "Limitation",
    "Movement",
    "MovementCatalog",
    "MovementCheck",
    "MovementConstraint",
    "MovementPrescription",
    "ScaledWorkout",
    "ScalingNote",
    "SubstitutionResult",
    "UnknownMovementError",
    "WodscaleError",
    "Workout",
    "build_constraint",
    "build_injury_constraint",
    "build_postpartum_constraint",
    "build_pregnancy_constraint",
    "check_movement",
    "create_inventory",
    "filter_allowed_movements",
    "find_substitution",
    "find_tiered_movement",
    "generate_all_scaling_tiers",
    "get_default_catalog",
    "load_catalog",
    "merge_constraints",
    "merge_movement_constraints",
    "scale_workout_movements",
    "scale_workout_to_tier",
]
