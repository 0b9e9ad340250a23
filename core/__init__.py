"""App-level settings and logging setup."""

from .config import (  # noqa: F401
    AppConfig,
    EasingConfig,
    TessellationConfig,
    load_app_config,
    load_json,
    save_json,
)
from .logging_setup import setup_default_logging  # noqa: F401
