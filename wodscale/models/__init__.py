"""Shared data model for the constraint and substitution engine."""

from wodscale.models.athlete import Athlete
from wodscale.models.enums import (
    BodyRegion,
    DifficultyTier,
    LimitationCategory,
    LimitationSeverity,
    LoadType,
    Modality,
    MuscleGroup,
    ScoreType,
    Sex,
    WorkoutFormat,
)
from wodscale.models.equipment import EQUIPMENT_PRESETS, Equipment, EquipmentInventory, create_inventory
from wodscale.models.limitation import (
    Limitation,
    MovementConstraint,
    build_constraint,
    build_injury_constraint,
    build_postpartum_constraint,
    build_pregnancy_constraint,
)
from wodscale.models.movement import TIER_ORDER, Movement, tier_index
from wodscale.models.tags import MOVEMENT_TAGS
from wodscale.models.workout import MovementPrescription, Workout

__all__ = [
    "EQUIPMENT_PRESETS",
    "MOVEMENT_TAGS",
    "TIER_ORDER",
    "Athlete",
    "BodyRegion",
    "DifficultyTier",
    "Equipment",
    "EquipmentInventory",
    "Limitation",
    "LimitationCategory",
    "LimitationSeverity",
    "LoadType",
    "Modality",
    "Movement",
    "MovementConstraint",
    "MovementPrescription",
    "MuscleGroup",
    "ScoreType",
    "Sex",
    "Workout",
    "WorkoutFormat",
    "build_constraint",
    "build_injury_constraint",
    "build_postpartum_constraint",
    "build_pregnancy_constraint",
    "create_inventory",
    "tier_index",
]
