"""Movement tag vocabulary - single source of truth.

Tags are free-form descriptive strings, but every tag used by a movement or a
constraint must come from MOVEMENT_TAGS. Adding a new tag means adding it here
and nowhere else.
"""

MAX_EFFORT = "max_effort"  # 1RM attempts, heavy singles
HIGH_SKILL = "high_skill"  # muscle-ups, handstand walks, snatch
COMPLEX = "complex"  # multi-part lifts, complexes
HIGH_IMPACT = "high_impact"  # box jumps, running, double-unders
OVERHEAD = "overhead"  # any weight or bodyweight held overhead
INVERTED = "inverted"  # handstands, handstand push-ups
PRONE = "prone"  # lying face-down
SUPINE = "supine"  # lying face-up
KIPPING = "kipping"  # kipping pull-ups, toes-to-bar
AXIAL_LOAD = "axial_load"  # spine compression
UNILATERAL = "unilateral"
ISOMETRIC = "isometric"
PLYOMETRIC = "plyometric"
ROTATIONAL = "rotational"

MOVEMENT_TAGS: frozenset[str] = frozenset(
    {
        MAX_EFFORT,
        HIGH_SKILL,
        COMPLEX,
        HIGH_IMPACT,
        OVERHEAD,
        INVERTED,
        PRONE,
        SUPINE,
        KIPPING,
        AXIAL_LOAD,
        UNILATERAL,
        ISOMETRIC,
        PLYOMETRIC,
        ROTATIONAL,
    }
)


def validate_tags(tags: frozenset[str] | set[str] | list[str]) -> frozenset[str]:
    """Validate tags against the vocabulary.

    Args:
        tags: Tags to validate

    Returns:
        The tags as a frozenset

    Raises:
        ValueError: If any tag is not in MOVEMENT_TAGS
    """
    unknown = sorted(set(tags) - MOVEMENT_TAGS)
    if unknown:
        raise ValueError(f"Unknown movement tag(s): {unknown}. Valid tags: {sorted(MOVEMENT_TAGS)}")
    return frozenset(tags)
