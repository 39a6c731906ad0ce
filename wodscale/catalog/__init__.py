"""Movement catalog access."""

from wodscale.catalog.library import (
    BUNDLED_CATALOG_PATH,
    MovementCatalog,
    ensure_valid_catalog,
    get_default_catalog,
    load_catalog,
    reset_default_catalog,
    resolve_catalog,
    set_default_catalog,
    validate_catalog,
)

__all__ = [
    "BUNDLED_CATALOG_PATH",
    "MovementCatalog",
    "ensure_valid_catalog",
    "get_default_catalog",
    "load_catalog",
    "reset_default_catalog",
    "resolve_catalog",
    "set_default_catalog",
    "validate_catalog",
]
