"""Constraint resolver.

Merges limitation constraints into one effective constraint and decides
whether a single movement is usable given that constraint and the available
equipment. Pure functions; nothing here raises for a rejected movement.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce

from wodscale.models import tags as t
from wodscale.models.enums import LoadType
from wodscale.models.equipment import EquipmentInventory, is_equipment_available
from wodscale.models.limitation import Limitation, MovementConstraint
from wodscale.models.movement import Movement

# Permission flag -> (tag it guards, rejection reason)
_PERMISSION_GATES: tuple[tuple[str, str, str], ...] = (
    ("allow_high_impact", t.HIGH_IMPACT, "High-impact movements restricted"),
    ("allow_overhead", t.OVERHEAD, "Overhead movements restricted"),
    ("allow_inversion", t.INVERTED, "Inverted positions restricted"),
    ("allow_prone", t.PRONE, "Prone positions restricted"),
    ("allow_kipping", t.KIPPING, "Kipping movements restricted"),
    ("allow_heavy_axial_load", t.AXIAL_LOAD, "Heavy axial loading restricted"),
)


@dataclass(frozen=True)
class MovementCheck:
    """Result of checking a movement against constraints and equipment.

    Attributes:
        allowed: True iff no hard-blocking reason was recorded
        reasons: Hard-blocking reasons (empty if allowed)
        warnings: Non-blocking cautions; never affect `allowed`
        max_load_percent: Load cap for the caller to apply (None = no cap)
    """

    allowed: bool
    reasons: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    max_load_percent: float | None = None


def _min_load_percent(constraints: list[MovementConstraint]) -> float | None:
    caps = [c.max_load_percent for c in constraints if c.max_load_percent is not None]
    if not caps:
        return None
    return min(caps)


def _merge_pair(left: MovementConstraint, right: MovementConstraint) -> MovementConstraint:
    return MovementConstraint(
        avoid_regions=left.avoid_regions | right.avoid_regions,
        avoid_tags=left.avoid_tags | right.avoid_tags,
        allow_high_impact=left.allow_high_impact and right.allow_high_impact,
        allow_overhead=left.allow_overhead and right.allow_overhead,
        allow_inversion=left.allow_inversion and right.allow_inversion,
        allow_prone=left.allow_prone and right.allow_prone,
        allow_kipping=left.allow_kipping and right.allow_kipping,
        allow_heavy_axial_load=left.allow_heavy_axial_load and right.allow_heavy_axial_load,
        max_load_percent=_min_load_percent([left, right]),
    )


def merge_movement_constraints(constraints: Iterable[MovementConstraint]) -> MovementConstraint | None:
    """Fold constraints into one, most restrictive value wins.

    Permissions are AND-ed, avoid sets are unioned, and the load cap is the
    minimum of the caps that are set. The fold is commutative and associative.

    Args:
        constraints: Constraints to merge

    Returns:
        Merged constraint, or None when there is nothing to merge
    """
    items = list(constraints)
    if not items:
        return None
    if len(items) == 1:
        # Strip notes so the result never carries a single source's text
        return _merge_pair(items[0], MovementConstraint())
    return reduce(_merge_pair, items)


def merge_constraints(limitations: Iterable[Limitation]) -> MovementConstraint | None:
    """Merge the constraints of several limitation records.

    Args:
        limitations: Active limitation records

    Returns:
        Effective constraint, or None for no limitations (no restriction)
    """
    return merge_movement_constraints(
        limitation.constraint for limitation in limitations if limitation.constraint is not None
    )


def check_movement(
    movement: Movement,
    constraint: MovementConstraint | None,
    inventory: EquipmentInventory,
) -> MovementCheck:
    """Check whether a movement is allowed.

    Gates, in order: equipment (always), protected regions, avoided tags,
    named permissions, load cap. Only the equipment gate applies when
    constraint is None.

    Args:
        movement: Movement to check
        constraint: Effective constraint, or None for no limitations
        inventory: Available equipment

    Returns:
        MovementCheck with reasons, warnings, and load cap
    """
    reasons: list[str] = []
    warnings: list[str] = []

    for required in movement.equipment:
        if not is_equipment_available(required, inventory):
            reasons.append(f"Missing equipment: {required}")

    if constraint is None:
        return MovementCheck(allowed=not reasons, reasons=reasons, warnings=warnings)

    # Primary region hit blocks; secondary-only hit warns
    primary_hits = [r for r in movement.primary_regions if r in constraint.avoid_regions]
    secondary_hits = [r for r in movement.secondary_regions if r in constraint.avoid_regions]
    if primary_hits:
        reasons.append(f"Stresses protected region(s): {', '.join(primary_hits)}")
    if secondary_hits:
        warnings.append(f"Secondarily stresses protected region(s): {', '.join(secondary_hits)} -- use with caution")

    for tag in sorted(constraint.avoid_tags):
        if tag in movement.tags:
            reasons.append(f'Tagged as "{tag}" which is restricted')

    for permission, tag, reason in _PERMISSION_GATES:
        if not getattr(constraint, permission) and tag in movement.tags:
            reasons.append(reason)

    max_load_percent = constraint.max_load_percent
    if max_load_percent is not None and movement.load_type == LoadType.WEIGHTED:
        if max_load_percent == 0:
            reasons.append("All weighted loading restricted")
        else:
            warnings.append(f"Load capped at {max_load_percent:g}% of normal")

    return MovementCheck(
        allowed=not reasons,
        reasons=reasons,
        warnings=warnings,
        max_load_percent=max_load_percent,
    )


def filter_allowed_movements(
    movements: Iterable[Movement],
    constraint: MovementConstraint | None,
    inventory: EquipmentInventory,
) -> list[Movement]:
    """Keep only allowed movements, preserving order."""
    return [m for m in movements if check_movement(m, constraint, inventory).allowed]
