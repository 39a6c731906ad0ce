"""Canonical enums for movement and limitation dimensions.

All enums are string-based to ensure JSON/YAML serialization compatibility
with the movement catalog data.
"""

from enum import StrEnum


# -----------------------------
# Anatomy
# -----------------------------
class BodyRegion(StrEnum):
    """Body regions stressed by movements or affected by limitations."""

    # Upper body
    SHOULDERS = "shoulders"
    CHEST = "chest"
    UPPER_BACK = "upper_back"
    LATS = "lats"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    # Core
    CORE = "core"
    LOWER_BACK = "lower_back"
    OBLIQUES = "obliques"
    # Lower body
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    HIP_FLEXORS = "hip_flexors"
    ADDUCTORS = "adductors"
    # Joints
    WRISTS = "wrists"
    ELBOWS = "elbows"
    KNEES = "knees"
    ANKLES = "ankles"
    HIPS = "hips"
    SPINE = "spine"
    NECK = "neck"


class MuscleGroup(StrEnum):
    """Coarse functional classification used for substitution scoring."""

    PUSH = "push"
    PULL = "pull"
    SQUAT = "squat"
    HINGE = "hinge"
    CORE = "core"
    CARRY = "carry"


# -----------------------------
# Movement classification
# -----------------------------
class Modality(StrEnum):
    """Training domain of a movement."""

    WEIGHTLIFTING = "weightlifting"
    GYMNASTICS = "gymnastics"
    MONOSTRUCTURAL = "monostructural"
    STRONGMAN = "strongman"


class DifficultyTier(StrEnum):
    """Difficulty tier, both a movement attribute and a scaling target."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    RX = "rx"
    RX_PLUS = "rx_plus"


class LoadType(StrEnum):
    """How a movement is loaded and scored."""

    BODYWEIGHT = "bodyweight"
    WEIGHTED = "weighted"
    DISTANCE = "distance"
    DURATION = "duration"
    CALORIES = "calories"


class Sex(StrEnum):
    """Athlete sex, used for default Rx loads."""

    MALE = "male"
    FEMALE = "female"


# -----------------------------
# Limitations
# -----------------------------
class LimitationCategory(StrEnum):
    """Categories of physical limitations affecting movement selection."""

    PREGNANCY = "pregnancy"
    POSTPARTUM = "postpartum"
    ACUTE_INJURY = "acute_injury"
    CHRONIC_CONDITION = "chronic_condition"
    REHAB = "rehab"
    MOBILITY_LIMITATION = "mobility_limitation"
    MEDICAL_RESTRICTION = "medical_restriction"
    SORENESS = "soreness"


class LimitationSeverity(StrEnum):
    """How aggressively a limitation constrains movement selection."""

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


# -----------------------------
# Workouts
# -----------------------------
class WorkoutFormat(StrEnum):
    """Workout format types."""

    AMRAP = "amrap"
    EMOM = "emom"
    FOR_TIME = "for_time"
    ROUNDS_FOR_TIME = "rounds_for_time"
    TABATA = "tabata"
    INTERVAL = "interval"
    STRENGTH = "strength"
    CHIPPER = "chipper"
    LADDER = "ladder"


class ScoreType(StrEnum):
    """What the athlete records as the workout result."""

    TIME = "time"
    ROUNDS_AND_REPS = "rounds_and_reps"
    LOAD = "load"
    REPS = "reps"
    CALORIES = "calories"
    DISTANCE = "distance"
    NONE = "none"
