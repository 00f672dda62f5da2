# Process-wide setup: configuration snapshot and the default logger.
from typing import Any, Optional

from .config import Config, get_config, set_config
from .default import std
from .logger import Logger


def init(
    config: Optional[Config] = None,
    *,
    project_id: Optional[str] = None,
    env_file: Optional[str] = None,
) -> None:
    """Install the configuration used by request-scoped loggers.

    With no arguments the environment is read again. ``project_id`` overrides
    whatever the config or environment says.
    """
    cfg = config if config is not None else Config.from_env(env_file)
    if project_id is not None:
        cfg = Config(project_id=project_id)
    set_config(cfg)

def shutdown() -> None:
    """Flush the default logger's streams."""
    std.flush()

def get_logger() -> Logger:
    return std

def for_request(request: Any) -> Logger:
    return Logger.for_request(request, get_config())

def for_span(span: Any = None) -> Logger:
    return Logger.for_span(span, get_config())
