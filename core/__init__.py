"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .config import RebedConfig, SourceConfig
from .errors import AlreadyExistsError
from .logging import configure_logging
from .materialize import (
    FOLDER_MODE,
    POLICIES,
    conservative_create,
    materialize,
    overwrite,
    preflight_create,
    structure,
    stub,
)

__all__ = [
    "RebedConfig",
    "SourceConfig",
    "AlreadyExistsError",
    "configure_logging",
    "FOLDER_MODE",
    "POLICIES",
    "conservative_create",
    "materialize",
    "overwrite",
    "preflight_create",
    "structure",
    "stub",
]
