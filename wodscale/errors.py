"""Domain-specific errors for the scaling engine.

The engine itself never raises for "no valid answer" outcomes. These errors
cover referential integrity of the catalog and strict lookups only.
"""


class WodscaleError(Exception):
    """Base exception for all wodscale errors."""

    pass


class CatalogLoadError(WodscaleError):
    """Raised when catalog data cannot be read or parsed into movements."""

    pass


class CatalogIntegrityError(WodscaleError):
    """Raised when the catalog fails its integrity validation pass.

    Attributes:
        issues: Human-readable description of every problem found
    """

    def __init__(self, issues: list[str]) -> None:
        self.issues = issues
        summary = "; ".join(issues[:5])
        if len(issues) > 5:
            summary += f" (+{len(issues) - 5} more)"
        super().__init__(f"Movement catalog failed validation: {summary}")


class UnknownMovementError(WodscaleError):
    """Raised when a strict lookup references a movement that does not exist.

    Attributes:
        movement_id: The identifier that failed to resolve
    """

    def __init__(self, movement_id: str) -> None:
        self.movement_id = movement_id
        super().__init__(f"Movement not found: {movement_id}")
