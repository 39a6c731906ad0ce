"""Athlete profile: equipment, sex and active limitations."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from wodscale.models.enums import Sex
from wodscale.models.equipment import Equipment, EquipmentInventory
from wodscale.models.limitation import Limitation, MovementConstraint


class Athlete(BaseModel):
    """An athlete's profile.

    Attributes:
        id: Athlete identifier
        name: Display name
        sex: Used for default Rx loads
        equipment: Available equipment
        limitations: Recorded limitations, active or not
    """

    id: str
    name: str
    sex: Sex
    equipment: EquipmentInventory = Field(default_factory=frozenset)
    limitations: list[Limitation] = Field(default_factory=list)
    notes: str | None = None

    @field_validator("equipment", mode="before")
    @classmethod
    def coerce_equipment(cls, value: object) -> frozenset[Equipment]:
        if value is None:
            return frozenset()
        return frozenset(Equipment(item) for item in value)  # type: ignore[union-attr]

    def active_limitations(self, on: date | None = None) -> list[Limitation]:
        """Limitations in effect on a date (defaults to today)."""
        day = on or date.today()
        return [limitation for limitation in self.limitations if limitation.is_active(day)]

    def effective_constraint(self, on: date | None = None) -> MovementConstraint | None:
        """Merged constraint of every limitation active on a date.

        Returns:
            Most-restrictive merge, or None when nothing is active
        """
        # Imported here: the resolver depends on models, not the other way round
        from wodscale.scaling.constraints import merge_constraints

        return merge_constraints(self.active_limitations(on))
