"""Root conftest for all tests.

Shared fixtures: the bundled movement catalog, equipment presets and a
sample Rx workout.
"""

import pytest

from wodscale.catalog.library import MovementCatalog, get_default_catalog
from wodscale.models.enums import ScoreType, WorkoutFormat
from wodscale.models.equipment import EQUIPMENT_PRESETS, EquipmentInventory
from wodscale.models.movement import Movement
from wodscale.models.workout import MovementPrescription, Workout


@pytest.fixture(scope="session")
def catalog() -> MovementCatalog:
    """Bundled movement catalog, loaded once per session."""
    return get_default_catalog()


@pytest.fixture
def movement(catalog: MovementCatalog):
    """Strict lookup helper: movement("back_squat")."""

    def _get(movement_id: str) -> Movement:
        return catalog.get_or_raise(movement_id)

    return _get


@pytest.fixture
def full_gym() -> EquipmentInventory:
    return EQUIPMENT_PRESETS["full_gym"]


@pytest.fixture
def minimal() -> EquipmentInventory:
    return EQUIPMENT_PRESETS["minimal"]


@pytest.fixture
def bodyweight() -> EquipmentInventory:
    return EQUIPMENT_PRESETS["bodyweight"]


@pytest.fixture
def amrap_workout(movement) -> Workout:
    """12-minute AMRAP: back squat 10 @ 225, pull-up 15, run 400 m."""
    return Workout(
        id="test_wod_1",
        name="Test AMRAP",
        format=WorkoutFormat.AMRAP,
        movements=[
            MovementPrescription(movement_id="back_squat", movement=movement("back_squat"), reps=10, load=225),
            MovementPrescription(movement_id="pull_up", movement=movement("pull_up"), reps=15),
            MovementPrescription(movement_id="run", movement=movement("run"), distance=400),
        ],
        time_cap=12,
        score_type=ScoreType.ROUNDS_AND_REPS,
    )
