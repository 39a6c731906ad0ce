"""Substitution search.

Finds a replacement for a movement the resolver rejects:
1. The original itself, when allowed
2. The authored substitution chain, first allowed candidate wins
3. A catalog-wide muscle-group search, highest score wins, ties by catalog order
4. Nothing - a valid outcome the caller must handle
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Literal

from loguru import logger

from wodscale.catalog.library import MovementCatalog, resolve_catalog
from wodscale.models.equipment import EquipmentInventory
from wodscale.models.limitation import MovementConstraint
from wodscale.models.movement import Movement, tier_index
from wodscale.scaling.constraints import MovementCheck, check_movement

SubstitutionSource = Literal["original", "chain", "fallback", "none"]

# Scoring weights for the catalog-wide search
SHARED_GROUP_WEIGHT = 10
NOT_HARDER_WEIGHT = 5
SAME_MODALITY_WEIGHT = 1

FALLBACK_WARNING = "Muscle-group fallback: not an authored substitution for {name}"


@dataclass(frozen=True)
class SubstitutionResult:
    """Result of attempting to find a substitution.

    Attributes:
        original: The movement that was checked
        replacement: Replacement movement (the original when allowed), None if no safe alternative
        original_reasons: Why the original was rejected (empty if allowed)
        replacement_warnings: Warnings about the replacement
        load_scale: Load multiplier for the replacement (0 when no replacement)
        source: Which stage produced the replacement
    """

    original: Movement
    replacement: Movement | None
    original_reasons: list[str] = field(default_factory=list)
    replacement_warnings: list[str] = field(default_factory=list)
    load_scale: float = 1.0
    source: SubstitutionSource = "original"


def score_candidate(original: Movement, candidate: Movement) -> int:
    """Score a fallback candidate against the original.

    10 per shared muscle group, 5 if the candidate is not harder than the
    original, 1 for the same modality. Candidates sharing no muscle group are
    never scored by the search.
    """
    shared_groups = len(set(original.muscle_groups) & set(candidate.muscle_groups))
    not_harder = 1 if tier_index(candidate.difficulty) <= tier_index(original.difficulty) else 0
    same_modality = 1 if candidate.modality == original.modality else 0
    return shared_groups * SHARED_GROUP_WEIGHT + not_harder * NOT_HARDER_WEIGHT + same_modality * SAME_MODALITY_WEIGHT


def best_muscle_group_match(
    original: Movement,
    candidates: Iterable[Movement],
    exclude: set[str],
    accept: Callable[[Movement], bool],
) -> Movement | None:
    """Highest-scoring candidate sharing a muscle group with the original.

    Candidates are visited in the given order and only a strictly higher score
    replaces the current best, so the first maximum wins.

    Args:
        original: Movement being replaced
        candidates: Candidates in stable catalog order
        exclude: Movement ids to skip (the original and already-tried ids)
        accept: Gate a candidate must pass (resolver check, tier ceiling)

    Returns:
        Best candidate, or None when nothing qualifies
    """
    original_groups = set(original.muscle_groups)
    best: Movement | None = None
    best_score = -1

    for candidate in candidates:
        if candidate.id == original.id or candidate.id in exclude:
            continue
        if original_groups.isdisjoint(candidate.muscle_groups):
            continue
        if not accept(candidate):
            continue
        score = score_candidate(original, candidate)
        if score > best_score:
            best, best_score = candidate, score

    return best


def _load_scale(check: MovementCheck) -> float:
    percent = check.max_load_percent if check.max_load_percent is not None else 100
    return percent / 100


def find_substitution(
    movement: Movement,
    constraint: MovementConstraint | None,
    inventory: EquipmentInventory,
    catalog: MovementCatalog | None = None,
) -> SubstitutionResult:
    """Find the best usable movement in place of the given one.

    Args:
        movement: Movement to check and possibly replace
        constraint: Effective constraint, or None for no limitations
        inventory: Available equipment
        catalog: Catalog to search (defaults to the process-wide catalog)

    Returns:
        SubstitutionResult; replacement is None when no safe alternative exists
    """
    original_check = check_movement(movement, constraint, inventory)
    if original_check.allowed:
        return SubstitutionResult(
            original=movement,
            replacement=movement,
            replacement_warnings=original_check.warnings,
            load_scale=_load_scale(original_check),
            source="original",
        )

    movements = resolve_catalog(catalog)
    tried: set[str] = set()

    # Chain is curated easiest-first, so the first allowed candidate wins
    for sub_id in movement.substitutions:
        tried.add(sub_id)
        candidate = movements.get(sub_id)
        if candidate is None:
            logger.warning(f"Substitution '{sub_id}' for {movement.id} not found in catalog, skipping")
            continue
        candidate_check = check_movement(candidate, constraint, inventory)
        if candidate_check.allowed:
            logger.debug(f"Substituted {movement.id} -> {candidate.id} from authored chain")
            return SubstitutionResult(
                original=movement,
                replacement=candidate,
                original_reasons=original_check.reasons,
                replacement_warnings=candidate_check.warnings,
                load_scale=_load_scale(candidate_check),
                source="chain",
            )

    fallback = best_muscle_group_match(
        movement,
        movements,
        exclude=tried,
        accept=lambda c: check_movement(c, constraint, inventory).allowed,
    )
    if fallback is not None:
        fallback_check = check_movement(fallback, constraint, inventory)
        logger.debug(f"Substituted {movement.id} -> {fallback.id} from muscle-group fallback")
        return SubstitutionResult(
            original=movement,
            replacement=fallback,
            original_reasons=original_check.reasons,
            replacement_warnings=[FALLBACK_WARNING.format(name=movement.name), *fallback_check.warnings],
            load_scale=_load_scale(fallback_check),
            source="fallback",
        )

    logger.debug(f"No safe alternative for {movement.id}: {'; '.join(original_check.reasons)}")
    return SubstitutionResult(
        original=movement,
        replacement=None,
        original_reasons=original_check.reasons,
        load_scale=0.0,
        source="none",
    )


def scale_workout_movements(
    movements: Iterable[Movement],
    constraint: MovementConstraint | None,
    inventory: EquipmentInventory,
    catalog: MovementCatalog | None = None,
) -> list[SubstitutionResult]:
    """Find a substitution for each movement independently."""
    return [find_substitution(m, constraint, inventory, catalog=catalog) for m in movements]
