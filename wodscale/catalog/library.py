"""Movement catalog - ordered, read-only collection of movements.

Iteration order is the order movements were loaded. The substitution search
relies on it for deterministic tie-breaking, so the catalog never reorders.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from wodscale.config.settings import settings
from wodscale.errors import CatalogIntegrityError, CatalogLoadError, UnknownMovementError
from wodscale.models.enums import Modality, MuscleGroup
from wodscale.models.equipment import EquipmentInventory, is_equipment_available
from wodscale.models.movement import Movement

BUNDLED_CATALOG_PATH = Path(__file__).parent.parent / "data" / "movements.yaml"


class MovementCatalog:
    """Immutable snapshot of movements keyed by id.

    Refreshing the catalog means building a new instance, never mutating one.
    """

    def __init__(self, movements: Iterable[Movement]) -> None:
        by_id: dict[str, Movement] = {}
        duplicates: list[str] = []
        for movement in movements:
            if movement.id in by_id:
                duplicates.append(f"Duplicate movement id: {movement.id}")
                continue
            by_id[movement.id] = movement
        if duplicates:
            raise CatalogIntegrityError(duplicates)
        self._by_id = by_id
        self._ordered: tuple[Movement, ...] = tuple(by_id.values())

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Movement]:
        return iter(self._ordered)

    def __contains__(self, movement_id: object) -> bool:
        return movement_id in self._by_id

    def get(self, movement_id: str) -> Movement | None:
        """Look up a movement by id, None when unknown."""
        return self._by_id.get(movement_id)

    def get_or_raise(self, movement_id: str) -> Movement:
        """Look up a movement by id.

        Raises:
            UnknownMovementError: If the id is not in the catalog
        """
        movement = self._by_id.get(movement_id)
        if movement is None:
            raise UnknownMovementError(movement_id)
        return movement

    def all(self) -> list[Movement]:
        """All movements in load order."""
        return list(self._ordered)

    def by_modality(self, modality: Modality) -> list[Movement]:
        return [m for m in self._ordered if m.modality == modality]

    def by_muscle_group(self, group: MuscleGroup) -> list[Movement]:
        return [m for m in self._ordered if group in m.muscle_groups]

    def by_tag(self, tag: str) -> list[Movement]:
        return [m for m in self._ordered if tag in m.tags]

    def by_equipment(self, available: EquipmentInventory) -> list[Movement]:
        """Movements whose every equipment requirement is available."""
        return [m for m in self._ordered if all(is_equipment_available(e, available) for e in m.equipment)]


def validate_catalog(catalog: MovementCatalog) -> list[str]:
    """Run the integrity pass over a whole catalog.

    Checks that every substitution id resolves and that no movement
    substitutes to itself.

    Args:
        catalog: Catalog to validate

    Returns:
        List of integrity issues (empty if valid)
    """
    issues: list[str] = []
    for movement in catalog:
        for sub_id in movement.substitutions:
            if sub_id == movement.id:
                issues.append(f"{movement.id}: substitutes to itself")
            elif sub_id not in catalog:
                issues.append(f"{movement.id}: substitution '{sub_id}' not found in catalog")
    return issues


def ensure_valid_catalog(catalog: MovementCatalog) -> None:
    """Raise CatalogIntegrityError if the catalog has integrity issues."""
    issues = validate_catalog(catalog)
    if issues:
        raise CatalogIntegrityError(issues)


def load_catalog(path: Path | str, validate: bool | None = None) -> MovementCatalog:
    """Load a movement catalog from a YAML list of movement records.

    Args:
        path: YAML file path
        validate: Run the integrity pass (defaults to settings.validate_catalog)

    Returns:
        MovementCatalog in file order

    Raises:
        CatalogLoadError: If the file is missing, malformed, or a record is invalid
        CatalogIntegrityError: If the integrity pass finds problems
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise CatalogLoadError(f"Movement catalog not found: {catalog_path}")

    try:
        with catalog_path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML in movement catalog {catalog_path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("movements")
    if not isinstance(raw, list):
        raise CatalogLoadError(f"Movement catalog {catalog_path} must contain a list of movements")

    movements: list[Movement] = []
    for index, record in enumerate(raw):
        try:
            movements.append(Movement.model_validate(record))
        except ValidationError as e:
            record_id = record.get("id", f"#{index}") if isinstance(record, dict) else f"#{index}"
            raise CatalogLoadError(f"Invalid movement record {record_id} in {catalog_path}: {e}") from e

    catalog = MovementCatalog(movements)

    should_validate = settings.validate_catalog if validate is None else validate
    if should_validate:
        ensure_valid_catalog(catalog)

    logger.info(f"Loaded movement catalog with {len(catalog)} movements from {catalog_path}")
    return catalog


_default_catalog: MovementCatalog | None = None


def get_default_catalog() -> MovementCatalog:
    """Get the process-wide catalog, loading it on first use.

    Uses settings.catalog_path when set, the bundled catalog otherwise.
    """
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = load_catalog(settings.catalog_path or BUNDLED_CATALOG_PATH)
    return _default_catalog


def set_default_catalog(catalog: MovementCatalog | None) -> None:
    """Replace the process-wide catalog snapshot (None forces a reload on next use)."""
    global _default_catalog
    _default_catalog = catalog
    if catalog is not None:
        logger.info(f"Default movement catalog replaced ({len(catalog)} movements)")


def reset_default_catalog() -> None:
    """Drop the cached catalog so the next access reloads it."""
    set_default_catalog(None)


def resolve_catalog(catalog: MovementCatalog | None) -> MovementCatalog:
    """Return the given catalog, or the default one."""
    return catalog if catalog is not None else get_default_catalog()
