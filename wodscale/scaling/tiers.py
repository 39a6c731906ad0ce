"""Tier scaler - rewrite a workout for one of five difficulty tiers.

Each prescription is handled independently: the movement is swapped for one
at or below the target tier when needed, load and reps are scaled relative to
Rx, and distance/duration/calories pass through untouched.

Tier scaling only checks equipment. Medical limitations are a separate pass
(wodscale.scaling.substitution) composed by the caller.
"""

import math
from dataclasses import dataclass, field

from loguru import logger

from wodscale.catalog.library import MovementCatalog, resolve_catalog
from wodscale.models.enums import DifficultyTier
from wodscale.models.equipment import EquipmentInventory
from wodscale.models.movement import TIER_ORDER, Movement, tier_index
from wodscale.models.workout import MovementPrescription, Workout
from wodscale.scaling.constraints import check_movement
from wodscale.scaling.substitution import best_muscle_group_match

# Load scaling factors per tier, relative to Rx loads
TIER_LOAD_SCALE: dict[DifficultyTier, float] = {
    DifficultyTier.BEGINNER: 0.45,
    DifficultyTier.INTERMEDIATE: 0.65,
    DifficultyTier.ADVANCED: 0.85,
    DifficultyTier.RX: 1.0,
    DifficultyTier.RX_PLUS: 1.1,
}

# Rep scaling factors per tier, relative to Rx reps
# Beginners get fewer reps to keep quality; Rx+ gets more
TIER_REP_SCALE: dict[DifficultyTier, float] = {
    DifficultyTier.BEGINNER: 0.6,
    DifficultyTier.INTERMEDIATE: 0.8,
    DifficultyTier.ADVANCED: 1.0,
    DifficultyTier.RX: 1.0,
    DifficultyTier.RX_PLUS: 1.2,
}

TIER_LABELS: dict[DifficultyTier, str] = {
    DifficultyTier.BEGINNER: "Beginner",
    DifficultyTier.INTERMEDIATE: "Intermediate",
    DifficultyTier.ADVANCED: "Advanced",
    DifficultyTier.RX: "Rx",
    DifficultyTier.RX_PLUS: "Rx+",
}


@dataclass(frozen=True)
class ScalingNote:
    """What happened to one prescription.

    Attributes:
        original_id: Original movement id
        original_name: Original movement name (the id when unknown)
        changes: "kept", or one entry per changed dimension
        tiered_movement_id: Movement used at this tier
        tiered_movement_name: Name of the movement used at this tier
    """

    original_id: str
    original_name: str
    changes: list[str] = field(default_factory=list)
    tiered_movement_id: str = ""
    tiered_movement_name: str = ""


@dataclass(frozen=True)
class ScaledWorkout:
    """A workout rewritten for one difficulty tier."""

    tier: DifficultyTier
    workout: Workout
    scaling_notes: list[ScalingNote] = field(default_factory=list)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def tier_label(tier: DifficultyTier) -> str:
    return TIER_LABELS[tier]


def find_tiered_movement(
    movement: Movement,
    target_tier: DifficultyTier,
    inventory: EquipmentInventory,
    catalog: MovementCatalog | None = None,
) -> Movement:
    """Find a movement at or below the target tier.

    Keeps the movement when it is already at or below the target. Otherwise
    walks the authored chain, then searches the catalog by muscle group.
    Falls back to the original when nothing fits, so a tier request never
    fails.

    Args:
        movement: Prescribed movement
        target_tier: Difficulty ceiling
        inventory: Available equipment
        catalog: Catalog to search (defaults to the process-wide catalog)

    Returns:
        Movement to use at the target tier
    """
    target_idx = tier_index(target_tier)
    if tier_index(movement.difficulty) <= target_idx:
        return movement

    movements = resolve_catalog(catalog)

    def fits(candidate: Movement) -> bool:
        return tier_index(candidate.difficulty) <= target_idx and check_movement(candidate, None, inventory).allowed

    tried: set[str] = set()
    for sub_id in movement.substitutions:
        tried.add(sub_id)
        candidate = movements.get(sub_id)
        if candidate is None:
            logger.warning(f"Substitution '{sub_id}' for {movement.id} not found in catalog, skipping")
            continue
        if fits(candidate):
            return candidate

    fallback = best_muscle_group_match(movement, movements, exclude=tried, accept=fits)
    if fallback is not None:
        logger.debug(f"Tier {target_tier}: {movement.id} -> {fallback.id} from muscle-group fallback")
        return fallback

    logger.debug(f"Tier {target_tier}: no movement at or below tier for {movement.id}, keeping original")
    return movement


def scale_prescription(
    prescription: MovementPrescription,
    target_tier: DifficultyTier,
    inventory: EquipmentInventory,
    catalog: MovementCatalog | None = None,
) -> tuple[MovementPrescription, ScalingNote]:
    """Scale one prescription to a target tier.

    Load and reps scale by the tier factors; distance, duration, calories and
    notes pass through unchanged. A prescription whose movement id is unknown
    is returned unchanged with an empty change list.

    Returns:
        (scaled prescription, scaling note)
    """
    original = prescription.movement
    if original is None:
        original = resolve_catalog(catalog).get(prescription.movement_id)
    if original is None:
        logger.warning(f"Unknown movement '{prescription.movement_id}' in prescription, leaving it unscaled")
        return (
            prescription.model_copy(),
            ScalingNote(
                original_id=prescription.movement_id,
                original_name=prescription.movement_id,
                changes=[],
                tiered_movement_id=prescription.movement_id,
                tiered_movement_name=prescription.movement_id,
            ),
        )

    tiered = find_tiered_movement(original, target_tier, inventory, catalog=catalog)
    changes: list[str] = []
    if tiered.id != original.id:
        changes.append(f"substituted: {original.name} → {tiered.name}")

    load_scale = TIER_LOAD_SCALE[target_tier]
    load = prescription.load
    if load is not None:
        load = _round_half_up(load * load_scale)
        if load_scale != 1.0:
            changes.append(f"load: {prescription.load:g}lbs → {load}lbs")

    rep_scale = TIER_REP_SCALE[target_tier]
    reps = prescription.reps
    if reps is not None and reps > 0:
        reps = max(1, _round_half_up(reps * rep_scale))
        if rep_scale != 1.0:
            changes.append(f"reps: {prescription.reps} → {reps}")

    if not changes:
        changes.append("kept")

    scaled = MovementPrescription(
        movement_id=tiered.id,
        movement=tiered,
        reps=reps,
        load=load,
        distance=prescription.distance,
        duration=prescription.duration,
        calories=prescription.calories,
        notes=prescription.notes,
    )
    note = ScalingNote(
        original_id=original.id,
        original_name=original.name,
        changes=changes,
        tiered_movement_id=tiered.id,
        tiered_movement_name=tiered.name,
    )
    return scaled, note


def scale_workout_to_tier(
    workout: Workout,
    target_tier: DifficultyTier,
    inventory: EquipmentInventory,
    catalog: MovementCatalog | None = None,
) -> ScaledWorkout:
    """Generate a scaled version of a workout at a specific difficulty tier.

    Args:
        workout: Workout prescribed at Rx
        target_tier: Tier to scale to
        inventory: Available equipment
        catalog: Catalog to search (defaults to the process-wide catalog)

    Returns:
        ScaledWorkout with a new workout id/name and per-movement notes
    """
    scaled_movements: list[MovementPrescription] = []
    notes: list[ScalingNote] = []
    for prescription in workout.movements:
        scaled, note = scale_prescription(prescription, target_tier, inventory, catalog=catalog)
        scaled_movements.append(scaled)
        notes.append(note)

    scaled_workout = workout.model_copy(
        update={
            "id": f"{workout.id}_{target_tier}",
            "name": f"{workout.name} ({tier_label(target_tier)})",
            "movements": scaled_movements,
        }
    )
    return ScaledWorkout(tier=target_tier, workout=scaled_workout, scaling_notes=notes)


def generate_all_scaling_tiers(
    workout: Workout,
    inventory: EquipmentInventory,
    catalog: MovementCatalog | None = None,
) -> list[ScaledWorkout]:
    """Scale a workout to every tier, Beginner through Rx+."""
    return [scale_workout_to_tier(workout, tier, inventory, catalog=catalog) for tier in TIER_ORDER]
