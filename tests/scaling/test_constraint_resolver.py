"""Tests for the constraint resolver.

Tests verify that:
- Equipment is always checked, even without limitations
- Primary region hits block while secondary hits only warn
- Named permissions block their tagged movements
- Load caps warn, and a zero cap blocks weighted movements
- Merging is most-restrictive-wins, commutative and associative
"""

from itertools import combinations, permutations

import pytest

from wodscale.models.enums import BodyRegion, LimitationCategory, LimitationSeverity
from wodscale.models.equipment import Equipment
from wodscale.models.limitation import (
    Limitation,
    MovementConstraint,
    build_injury_constraint,
    build_postpartum_constraint,
    build_pregnancy_constraint,
)
from wodscale.scaling.constraints import (
    check_movement,
    filter_allowed_movements,
    merge_constraints,
    merge_movement_constraints,
)

PRESETS: list[MovementConstraint] = [
    build_pregnancy_constraint(1),
    build_pregnancy_constraint(2),
    build_pregnancy_constraint(3),
    build_postpartum_constraint(3),
    build_postpartum_constraint(8),
    build_postpartum_constraint(20),
    build_injury_constraint([BodyRegion.WRISTS], LimitationSeverity.MILD),
    build_injury_constraint([BodyRegion.KNEES, BodyRegion.ANKLES], LimitationSeverity.MODERATE),
    build_injury_constraint([BodyRegion.SPINE], LimitationSeverity.MODERATE),
    build_injury_constraint([BodyRegion.SHOULDERS], LimitationSeverity.SEVERE),
]

PERMISSIONS = (
    "allow_high_impact",
    "allow_overhead",
    "allow_inversion",
    "allow_prone",
    "allow_kipping",
    "allow_heavy_axial_load",
)


# -----------------------------
# check_movement
# -----------------------------
def test_allowed_without_constraints(movement, bodyweight):
    """Test that a bodyweight movement passes with no limitations."""
    result = check_movement(movement("air_squat"), None, bodyweight)
    assert result.allowed is True
    assert result.reasons == []
    assert result.max_load_percent is None


def test_missing_equipment_rejected(movement, bodyweight):
    """Test back squat against a bodyweight-only inventory."""
    result = check_movement(movement("back_squat"), None, bodyweight)
    assert result.allowed is False
    assert any("Missing equipment" in r for r in result.reasons)
    assert "Missing equipment: barbell" in result.reasons


def test_equipment_gate_holds_for_every_requirement(catalog):
    """Test that lacking any required kind always rejects, naming the kind."""
    everything = frozenset(Equipment)
    for m in catalog:
        for required in m.equipment:
            if required == Equipment.NONE:
                continue
            result = check_movement(m, None, everything - {required})
            assert result.allowed is False
            assert any(str(required) in r for r in result.reasons)


def test_equipment_gate_applies_with_constraints(movement, bodyweight):
    """Test that equipment is checked even when limitations are present."""
    result = check_movement(movement("back_squat"), build_pregnancy_constraint(1), bodyweight)
    assert "Missing equipment: barbell" in result.reasons


def test_overhead_rejected_in_third_trimester(movement, full_gym):
    """Test strict press against a T3 pregnancy constraint."""
    result = check_movement(movement("strict_press"), build_pregnancy_constraint(3), full_gym)
    assert result.allowed is False
    assert any("Overhead" in r for r in result.reasons)


def test_inverted_rejected_in_first_trimester(movement, full_gym):
    """Test HSPU against a T1 pregnancy constraint."""
    result = check_movement(movement("handstand_push_up"), build_pregnancy_constraint(1), full_gym)
    assert result.allowed is False
    assert any("Inverted" in r for r in result.reasons)


def test_kipping_rejected_in_second_trimester(movement, full_gym):
    """Test kipping pull-ups against a T2 pregnancy constraint."""
    result = check_movement(movement("kipping_pull_up"), build_pregnancy_constraint(2), full_gym)
    assert result.allowed is False
    assert any("Kipping" in r for r in result.reasons)


def test_prone_and_impact_rejected_in_second_trimester(movement, full_gym):
    """Test burpees against a T2 pregnancy constraint."""
    result = check_movement(movement("burpee"), build_pregnancy_constraint(2), full_gym)
    assert result.allowed is False
    assert "Prone positions restricted" in result.reasons
    assert "High-impact movements restricted" in result.reasons


def test_secondary_region_only_warns(movement, full_gym):
    """Test that air squats stay allowed in T2 with a core warning."""
    result = check_movement(movement("air_squat"), build_pregnancy_constraint(2), full_gym)
    assert result.allowed is True
    assert any("Secondarily stresses protected region(s): core" in w for w in result.warnings)


def test_load_cap_surfaces_as_warning(movement, full_gym):
    """Test that T2 caps goblet squat load at 70%."""
    result = check_movement(movement("goblet_squat"), build_pregnancy_constraint(2), full_gym)
    assert result.allowed is True
    assert result.max_load_percent == 70
    assert "Load capped at 70% of normal" in result.warnings


def test_zero_cap_blocks_weighted(movement, full_gym):
    """Test that a severe issue blocks weighted movements outright."""
    constraint = build_injury_constraint([BodyRegion.KNEES], LimitationSeverity.SEVERE)
    result = check_movement(movement("strict_press"), constraint, full_gym)
    assert result.allowed is False
    assert "All weighted loading restricted" in result.reasons


def test_zero_cap_does_not_block_bodyweight(movement, full_gym):
    """Test that a zero cap leaves bodyweight movements alone."""
    constraint = build_injury_constraint([BodyRegion.KNEES], LimitationSeverity.SEVERE)
    result = check_movement(movement("ring_row"), constraint, full_gym)
    assert result.allowed is True
    assert result.max_load_percent == 0


def test_primary_region_blocks(movement, full_gym):
    """Test that a moderate shoulder issue blocks strict press."""
    constraint = build_injury_constraint([BodyRegion.SHOULDERS], LimitationSeverity.MODERATE)
    result = check_movement(movement("strict_press"), constraint, full_gym)
    assert result.allowed is False
    assert any("protected region" in r for r in result.reasons)


def test_uninvolved_region_allowed(movement, full_gym):
    """Test that rowing is fine with a moderate shoulder issue."""
    constraint = build_injury_constraint([BodyRegion.SHOULDERS], LimitationSeverity.MODERATE)
    result = check_movement(movement("row"), constraint, full_gym)
    assert result.allowed is True
    assert result.warnings == []


def test_avoided_tag_blocks(movement, full_gym):
    """Test that an avoided tag is a hard block."""
    constraint = MovementConstraint(avoid_tags=frozenset({"unilateral"}))
    result = check_movement(movement("walking_lunge"), constraint, full_gym)
    assert result.allowed is False
    assert 'Tagged as "unilateral" which is restricted' in result.reasons


def test_high_impact_rejected_early_postpartum(movement, full_gym):
    """Test box jumps four weeks postpartum."""
    result = check_movement(movement("box_jump"), build_postpartum_constraint(4), full_gym)
    assert result.allowed is False


def test_check_does_not_depend_on_warnings(movement, full_gym):
    """Test that warnings alone never reject a movement."""
    constraint = MovementConstraint(avoid_regions=frozenset({BodyRegion.CORE}), max_load_percent=40)
    result = check_movement(movement("goblet_squat"), constraint, full_gym)
    assert result.warnings
    assert result.allowed is True


# -----------------------------
# merge_constraints
# -----------------------------
def test_merge_empty_is_none():
    """Test that no limitations means no constraint."""
    assert merge_constraints([]) is None
    assert merge_movement_constraints([]) is None


def test_merge_pregnancy_and_wrist():
    """Test T2 pregnancy merged with a mild wrist strain."""
    limitations = [
        Limitation(
            id="1",
            category=LimitationCategory.PREGNANCY,
            severity=LimitationSeverity.MODERATE,
            affected_regions=[BodyRegion.CORE],
            description="Pregnancy T2",
            trimester=2,
        ),
        Limitation(
            id="2",
            category=LimitationCategory.ACUTE_INJURY,
            severity=LimitationSeverity.MILD,
            affected_regions=[BodyRegion.WRISTS],
            description="Wrist strain",
        ),
    ]
    merged = merge_constraints(limitations)
    assert merged is not None
    assert BodyRegion.CORE in merged.avoid_regions
    assert merged.allow_kipping is False
    assert merged.allow_high_impact is False
    assert merged.max_load_percent == 70


def test_merge_single_constraint_is_equivalent():
    """Test that merging one constraint returns an equal value."""
    constraint = build_pregnancy_constraint(3)
    merged = merge_movement_constraints([constraint])
    assert merged == constraint
    assert merged.notes is None


@pytest.mark.parametrize("left, right", list(combinations(PRESETS, 2)))
def test_merge_is_most_restrictive(left: MovementConstraint, right: MovementConstraint):
    """Test merge monotonicity for every pair of presets."""
    merged = merge_movement_constraints([left, right])
    for permission in PERMISSIONS:
        if not getattr(left, permission) or not getattr(right, permission):
            assert getattr(merged, permission) is False
    assert merged.avoid_regions >= left.avoid_regions | right.avoid_regions
    assert merged.avoid_tags >= left.avoid_tags | right.avoid_tags
    if left.max_load_percent is not None and right.max_load_percent is not None:
        assert merged.max_load_percent <= min(left.max_load_percent, right.max_load_percent)


def test_merge_cap_unset_when_no_caps():
    """Test that the cap stays undefined when no input sets one."""
    merged = merge_movement_constraints([MovementConstraint(allow_prone=False), MovementConstraint()])
    assert merged.max_load_percent is None
    assert merged.allow_prone is False


def test_merge_is_order_independent():
    """Test commutativity and associativity over three presets."""
    trio = [PRESETS[1], PRESETS[6], PRESETS[8]]
    results = {merge_movement_constraints(order) for order in permutations(trio)}
    assert len(results) == 1
    nested = merge_movement_constraints([merge_movement_constraints(trio[:2]), trio[2]])
    assert nested == results.pop()


# -----------------------------
# filter_allowed_movements
# -----------------------------
def test_filter_bodyweight_only(catalog, bodyweight):
    """Test that only no-equipment movements survive a bodyweight inventory."""
    filtered = filter_allowed_movements(catalog.all(), None, bodyweight)
    assert filtered
    for m in filtered:
        assert all(e == Equipment.NONE for e in m.equipment)


def test_filter_third_trimester_reduces_options(catalog, full_gym):
    """Test that T3 leaves fewer but some movements, in catalog order."""
    unconstrained = filter_allowed_movements(catalog.all(), None, full_gym)
    constrained = filter_allowed_movements(catalog.all(), build_pregnancy_constraint(3), full_gym)
    assert 0 < len(constrained) < len(unconstrained)
    positions = [unconstrained.index(m) for m in constrained]
    assert positions == sorted(positions)
