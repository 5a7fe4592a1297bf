"""Game definition I/O."""

from .config import (  # noqa: F401
    GameConfig,
    default_definition,
    definition_to_config,
    load_config,
    load_definition,
    save_definition,
    validate_definition,
)
