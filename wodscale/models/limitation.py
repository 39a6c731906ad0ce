"""Limitation records and the movement constraints they produce.

Constraints are the building blocks the resolver works with. They are built
from category/severity presets here and merged in wodscale.scaling.constraints.
A constraint is a plain value: it never points back at its limitation.
"""

from dataclasses import dataclass, field
from datetime import date

from pydantic import BaseModel, Field, model_validator

from wodscale.models import tags as t
from wodscale.models.enums import BodyRegion, LimitationCategory, LimitationSeverity
from wodscale.models.tags import validate_tags

# Regions whose involvement disables specific permissions for moderate/severe issues
_IMPACT_SENSITIVE_REGIONS = frozenset({BodyRegion.KNEES, BodyRegion.ANKLES, BodyRegion.HIPS, BodyRegion.SPINE})
_OVERHEAD_SENSITIVE_REGIONS = frozenset({BodyRegion.SHOULDERS, BodyRegion.ELBOWS, BodyRegion.WRISTS})
_INVERSION_SENSITIVE_REGIONS = frozenset({BodyRegion.WRISTS, BodyRegion.SHOULDERS, BodyRegion.NECK, BodyRegion.SPINE})


@dataclass(frozen=True)
class MovementConstraint:
    """Immutable rule set restricting movement selection.

    Attributes:
        avoid_regions: Body regions that should be protected
        avoid_tags: Movement tags to avoid
        allow_high_impact: Whether high-impact movements are allowed
        allow_overhead: Whether overhead movements are allowed
        allow_inversion: Whether inverted positions are allowed
        allow_prone: Whether lying face-down is allowed
        allow_kipping: Whether kipping/ballistic movements are allowed
        allow_heavy_axial_load: Whether heavy spine compression is allowed
        max_load_percent: Maximum load as a percentage of normal (None = no cap)
        notes: Free-text notes for the athlete/coach
    """

    avoid_regions: frozenset[BodyRegion] = frozenset()
    avoid_tags: frozenset[str] = frozenset()
    allow_high_impact: bool = True
    allow_overhead: bool = True
    allow_inversion: bool = True
    allow_prone: bool = True
    allow_kipping: bool = True
    allow_heavy_axial_load: bool = True
    max_load_percent: float | None = None
    notes: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.max_load_percent is not None and not (0 <= self.max_load_percent <= 100):
            raise ValueError(f"max_load_percent must be between 0 and 100, got {self.max_load_percent}")
        validate_tags(self.avoid_tags)


# -----------------------------
# Preset builders
# -----------------------------
def build_pregnancy_constraint(trimester: int) -> MovementConstraint:
    """Build default constraints for a pregnancy trimester.

    Inversions are disallowed in every trimester.

    Args:
        trimester: Trimester (1, 2 or 3)

    Returns:
        MovementConstraint for the trimester

    Raises:
        ValueError: If trimester is not 1, 2 or 3
    """
    if trimester == 1:
        return MovementConstraint(
            avoid_tags=frozenset({t.MAX_EFFORT}),
            allow_inversion=False,
            notes="First trimester: avoid max-effort lifts. Continue normal training with awareness. Consult physician.",
        )
    if trimester == 2:
        return MovementConstraint(
            avoid_regions=frozenset({BodyRegion.CORE}),
            avoid_tags=frozenset({t.MAX_EFFORT, t.HIGH_SKILL}),
            allow_high_impact=False,
            allow_inversion=False,
            allow_prone=False,
            allow_kipping=False,
            allow_heavy_axial_load=False,
            max_load_percent=70,
            notes="Second trimester: no prone, no kipping, reduce loads, modify core work to avoid coning. Consult physician.",
        )
    if trimester == 3:
        return MovementConstraint(
            avoid_regions=frozenset({BodyRegion.CORE, BodyRegion.LOWER_BACK}),
            avoid_tags=frozenset({t.MAX_EFFORT, t.HIGH_SKILL, t.COMPLEX}),
            allow_high_impact=False,
            allow_overhead=False,
            allow_inversion=False,
            allow_prone=False,
            allow_kipping=False,
            allow_heavy_axial_load=False,
            max_load_percent=50,
            notes="Third trimester: focus on maintenance, mobility, and comfort. Consult physician.",
        )
    raise ValueError(f"Invalid trimester: {trimester}. Must be 1, 2 or 3")


def build_postpartum_constraint(weeks_postpartum: int) -> MovementConstraint:
    """Build default constraints for postpartum recovery.

    Args:
        weeks_postpartum: Weeks since delivery (>= 0)

    Returns:
        MovementConstraint for the recovery window

    Raises:
        ValueError: If weeks_postpartum is negative
    """
    if weeks_postpartum < 0:
        raise ValueError(f"weeks_postpartum must be >= 0, got {weeks_postpartum}")

    if weeks_postpartum < 6:
        return MovementConstraint(
            avoid_regions=frozenset({BodyRegion.CORE, BodyRegion.LOWER_BACK, BodyRegion.HIP_FLEXORS}),
            avoid_tags=frozenset({t.MAX_EFFORT, t.HIGH_SKILL, t.COMPLEX}),
            allow_high_impact=False,
            allow_overhead=False,
            allow_inversion=False,
            allow_prone=False,
            allow_kipping=False,
            allow_heavy_axial_load=False,
            max_load_percent=30,
            notes="Early postpartum (<6 weeks): walking, gentle mobility only. Physician clearance required.",
        )

    if weeks_postpartum < 12:
        return MovementConstraint(
            avoid_regions=frozenset({BodyRegion.CORE}),
            avoid_tags=frozenset({t.MAX_EFFORT, t.HIGH_SKILL}),
            allow_high_impact=False,
            allow_inversion=False,
            allow_kipping=False,
            allow_heavy_axial_load=False,
            max_load_percent=50,
            notes="Postpartum 6-12 weeks: rebuild core and pelvic floor before adding intensity. Consult physician.",
        )

    # Still cautious with kipping after 12 weeks
    return MovementConstraint(
        avoid_tags=frozenset({t.MAX_EFFORT}),
        allow_kipping=False,
        max_load_percent=80,
        notes="Postpartum 12+ weeks: progress kipping and max loads gradually. Consult physician.",
    )


def build_injury_constraint(
    affected_regions: list[BodyRegion] | frozenset[BodyRegion],
    severity: LimitationSeverity,
) -> MovementConstraint:
    """Build constraints for an injury-like limitation.

    Mild issues only cap load; moderate issues protect the affected regions;
    severe issues protect the regions and forbid all weighted loading.

    Args:
        affected_regions: Regions affected by the limitation
        severity: Limitation severity

    Returns:
        MovementConstraint for the regions and severity
    """
    regions = frozenset(affected_regions)
    region_list = ", ".join(sorted(regions))

    if severity == LimitationSeverity.MILD:
        return MovementConstraint(
            avoid_tags=frozenset({t.MAX_EFFORT}),
            max_load_percent=80,
            notes=f"Mild issue in {region_list}. Reduce load, monitor pain. Stop if pain increases.",
        )

    allow_overhead = regions.isdisjoint(_OVERHEAD_SENSITIVE_REGIONS)

    if severity == LimitationSeverity.MODERATE:
        return MovementConstraint(
            avoid_regions=regions,
            avoid_tags=frozenset({t.MAX_EFFORT, t.HIGH_SKILL}),
            allow_high_impact=regions.isdisjoint(_IMPACT_SENSITIVE_REGIONS),
            allow_overhead=allow_overhead,
            allow_inversion=regions.isdisjoint(_INVERSION_SENSITIVE_REGIONS),
            allow_prone=BodyRegion.SPINE not in regions,
            allow_kipping=False,
            allow_heavy_axial_load=BodyRegion.SPINE not in regions,
            max_load_percent=50,
            notes=f"Moderate issue in {region_list}. Avoid direct stress. Use alternatives.",
        )

    return MovementConstraint(
        avoid_regions=regions,
        avoid_tags=frozenset({t.MAX_EFFORT, t.HIGH_SKILL, t.COMPLEX}),
        allow_high_impact=False,
        allow_overhead=allow_overhead,
        allow_inversion=False,
        allow_prone=False,
        allow_kipping=False,
        allow_heavy_axial_load=False,
        max_load_percent=0,
        notes=f"Severe issue in {region_list}. Completely avoid. Seek medical guidance.",
    )


def build_constraint(
    category: LimitationCategory,
    severity: LimitationSeverity,
    affected_regions: list[BodyRegion] | frozenset[BodyRegion],
    trimester: int | None = None,
    weeks_postpartum: int | None = None,
) -> MovementConstraint:
    """Dispatch to the preset for a limitation category.

    Raises:
        ValueError: If pregnancy lacks a trimester or postpartum lacks weeks postpartum
    """
    if category == LimitationCategory.PREGNANCY:
        if trimester is None:
            raise ValueError("trimester required for pregnancy limitations")
        return build_pregnancy_constraint(trimester)
    if category == LimitationCategory.POSTPARTUM:
        if weeks_postpartum is None:
            raise ValueError("weeks_postpartum required for postpartum limitations")
        return build_postpartum_constraint(weeks_postpartum)
    return build_injury_constraint(affected_regions, severity)


class Limitation(BaseModel):
    """An active physical limitation on an athlete's profile.

    The constraint is derived from the category preset when not supplied.
    Records are owned by the caller; the engine only reads `constraint`.
    """

    id: str
    category: LimitationCategory
    severity: LimitationSeverity
    affected_regions: list[BodyRegion] = Field(default_factory=list)
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    trimester: int | None = Field(default=None, ge=1, le=3)
    weeks_postpartum: int | None = Field(default=None, ge=0)
    constraint: MovementConstraint | None = None

    @model_validator(mode="after")
    def derive_constraint(self) -> "Limitation":
        """Fill in the preset constraint and check the date range."""
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        if self.constraint is None:
            self.constraint = build_constraint(
                self.category,
                self.severity,
                self.affected_regions,
                trimester=self.trimester,
                weeks_postpartum=self.weeks_postpartum,
            )
        return self

    def is_active(self, on: date) -> bool:
        """Whether the limitation applies on the given date."""
        if self.start_date is not None and on < self.start_date:
            return False
        return self.end_date is None or on <= self.end_date
