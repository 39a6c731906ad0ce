"""Movement records and difficulty tier ordering.

A Movement is a catalog entry. It is validated once when the catalog is
loaded and never mutated afterwards.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wodscale.models.enums import BodyRegion, DifficultyTier, LoadType, Modality, MuscleGroup, Sex
from wodscale.models.equipment import Equipment
from wodscale.models.tags import validate_tags

# Ordered difficulty tiers from easiest to hardest
TIER_ORDER: tuple[DifficultyTier, ...] = (
    DifficultyTier.BEGINNER,
    DifficultyTier.INTERMEDIATE,
    DifficultyTier.ADVANCED,
    DifficultyTier.RX,
    DifficultyTier.RX_PLUS,
)


def tier_index(tier: DifficultyTier) -> int:
    """Return the position of a tier in TIER_ORDER (Beginner = 0)."""
    return TIER_ORDER.index(tier)


class Movement(BaseModel):
    """A movement in the catalog.

    Attributes:
        id: Unique identifier (slug)
        name: Display name
        equipment: Equipment required (ALL must be available)
        primary_regions: Body regions directly stressed
        secondary_regions: Body regions involved but not loaded directly
        muscle_groups: Coarse functional classification
        modality: Training modality
        difficulty: Difficulty tier at Rx
        tags: Descriptive tags from the tag vocabulary
        load_type: How the movement is loaded/scored
        substitutions: Other movement ids, easiest first, never this movement
        default_load_male: Default Rx load for men (lbs)
        default_load_female: Default Rx load for women (lbs)
        description: Brief coaching cue
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    equipment: tuple[Equipment, ...] = (Equipment.NONE,)
    primary_regions: tuple[BodyRegion, ...]
    secondary_regions: tuple[BodyRegion, ...] = ()
    muscle_groups: tuple[MuscleGroup, ...]
    modality: Modality
    difficulty: DifficultyTier
    tags: frozenset[str] = frozenset()
    load_type: LoadType
    substitutions: tuple[str, ...] = ()
    default_load_male: float | None = Field(default=None, ge=0)
    default_load_female: float | None = Field(default=None, ge=0)
    description: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def validate_movement_tags(cls, value: object) -> frozenset[str]:
        """Reject tags outside the vocabulary."""
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return validate_tags(list(value))  # type: ignore[arg-type]

    @model_validator(mode="after")
    def validate_structure(self) -> "Movement":
        """Enforce catalog invariants that only need the record itself."""
        if not self.primary_regions:
            raise ValueError(f"Movement '{self.id}' must stress at least one primary region")
        if not self.muscle_groups:
            raise ValueError(f"Movement '{self.id}' must belong to at least one muscle group")
        if self.id in self.substitutions:
            raise ValueError(f"Movement '{self.id}' must not substitute to itself")
        return self

    @property
    def stressed_regions(self) -> tuple[BodyRegion, ...]:
        """Primary then secondary regions."""
        return self.primary_regions + self.secondary_regions

    def default_load(self, sex: Sex) -> float | None:
        """Default Rx load for the given sex, None when not applicable."""
        if sex == Sex.MALE:
            return self.default_load_male
        return self.default_load_female
