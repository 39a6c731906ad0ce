"""Workout and movement prescription models.

Prescriptions are owned by the caller. The tier scaler reads them and emits
new ones; it never mutates its inputs.
"""

from pydantic import BaseModel, Field

from wodscale.models.enums import ScoreType, WorkoutFormat
from wodscale.models.movement import Movement


class MovementPrescription(BaseModel):
    """A single movement prescription within a workout.

    Attributes:
        movement_id: Reference to the catalog movement
        movement: Resolved movement (optional, looked up by id when missing)
        reps: Reps per round
        load: Load in lbs
        distance: Distance in meters
        duration: Duration in seconds
        calories: Calories
        notes: Free text (e.g., "each arm", "unbroken")
    """

    movement_id: str
    movement: Movement | None = None
    reps: int | None = None
    load: float | None = None
    distance: float | None = None
    duration: float | None = None
    calories: float | None = None
    notes: str | None = None


class Workout(BaseModel):
    """A workout definition."""

    id: str
    name: str
    format: WorkoutFormat
    movements: list[MovementPrescription] = Field(default_factory=list)
    time_cap: float | None = None  # minutes
    rounds: int | None = None
    work_interval: int | None = None  # seconds
    rest_interval: int | None = None  # seconds
    emom_minutes: int | None = None
    score_type: ScoreType = ScoreType.NONE
    description: str | None = None
    is_benchmark: bool = False
    estimated_duration: float | None = None  # minutes
