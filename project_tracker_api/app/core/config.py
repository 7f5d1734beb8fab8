"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API starts with no configuration at all.  Tests construct their own
``Settings`` instances and pass them to ``create_app``.
"""

import os
from dataclasses import dataclass, field

ID_STRATEGIES = {"counter", "length"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Project Tracker API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api/v1"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # How new record ids are chosen.  ``counter`` never reuses an id;
    # ``length`` assigns ``len(collection) + 1`` and may hand out an id
    # again after a delete.
    id_strategy: str = field(default_factory=lambda: os.getenv("ID_STRATEGY", "counter"))

    # Populate the store with one person, one project and one task on
    # startup.
    seed_data: bool = field(default_factory=lambda: _env_flag("SEED_DATA", "true"))

    def __post_init__(self) -> None:
        self.id_strategy = self.id_strategy.lower()
        if self.id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown ID_STRATEGY {self.id_strategy!r}; expected one of {sorted(ID_STRATEGIES)}"
            )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
