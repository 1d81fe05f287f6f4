"""Import run configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import parse_log_level

DEFAULT_THESAURI_PATH: Final[Path] = Path("Assets") / "Thesauri.json"
DEFAULT_FACET_ID: Final[str] = "graffiti"
DEFAULT_CREATOR_ID: Final[str] = "zeus"


class FatalPolicy(StrEnum):
    """What the driver does when a rule fails fatally for a row."""

    ABORT = "abort"
    SKIP_ROW = "skip-row"


@dataclass(frozen=True, slots=True)
class ImportConfig:
    thesauri_path: Path = DEFAULT_THESAURI_PATH
    facet_id: str = DEFAULT_FACET_ID
    creator_id: str = DEFAULT_CREATOR_ID
    on_fatal: FatalPolicy = FatalPolicy.ABORT
    log_level: int = logging.INFO


def parse_fatal_policy(value: str) -> FatalPolicy:
    try:
        return FatalPolicy(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in FatalPolicy)
        raise ConfigurationError(
            f"Invalid fatal policy {value!r} (expected one of: {choices})"
        ) from exc


def get_import_config() -> ImportConfig:
    """Build the import configuration from ``VELA_*`` environment variables."""

    level_name = optional_env_var("VELA_LOG_LEVEL", "INFO")
    try:
        level = parse_log_level(level_name)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    return ImportConfig(
        thesauri_path=Path(optional_env_var("VELA_THESAURI_PATH", str(DEFAULT_THESAURI_PATH))),
        facet_id=optional_env_var("VELA_FACET_ID", DEFAULT_FACET_ID),
        creator_id=optional_env_var("VELA_CREATOR_ID", DEFAULT_CREATOR_ID),
        on_fatal=parse_fatal_policy(optional_env_var("VELA_ON_FATAL", FatalPolicy.ABORT.value)),
        log_level=level,
    )
