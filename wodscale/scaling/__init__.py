"""Constraint resolution, substitution search and tier scaling."""

from wodscale.scaling.constraints import (
    MovementCheck,
    check_movement,
    filter_allowed_movements,
    merge_constraints,
    merge_movement_constraints,
)
from wodscale.scaling.substitution import (
    SubstitutionResult,
    find_substitution,
    scale_workout_movements,
    score_candidate,
)
from wodscale.scaling.tiers import (
    TIER_LABELS,
    TIER_LOAD_SCALE,
    TIER_REP_SCALE,
    ScaledWorkout,
    ScalingNote,
    find_tiered_movement,
    generate_all_scaling_tiers,
    scale_prescription,
    scale_workout_to_tier,
)

__all__ = [
    "TIER_LABELS",
    "TIER_LOAD_SCALE",
    "TIER_REP_SCALE",
    "MovementCheck",
    "ScaledWorkout",
    "ScalingNote",
    "SubstitutionResult",
    "check_movement",
    "filter_allowed_movements",
    "find_substitution",
    "find_tiered_movement",
    "generate_all_scaling_tiers",
    "merge_constraints",
    "merge_movement_constraints",
    "scale_prescription",
    "scale_workout_movements",
    "scale_workout_to_tier",
    "score_candidate",
]
