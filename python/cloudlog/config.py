# Configuration snapshot. Read once from the environment at import time;
# replaced only through init()/set_config().

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import dotenv_values

PROJECT_ENV = "GOOGLE_CLOUD_PROJECT"
# Older Cloud Functions runtimes set these instead.
LEGACY_PROJECT_ENVS = ("GCP_PROJECT", "GCLOUD_PROJECT")


@dataclass(frozen=True)
class Config:
    project_id: str = ""

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Build a config from the process environment.

        If ``env_file`` is given, its values fill in variables the process
        environment does not define.
        """
        file_values = dotenv_values(env_file) if env_file else {}
        for name in (PROJECT_ENV,) + LEGACY_PROJECT_ENVS:
            value = os.environ.get(name) or file_values.get(name)
            if value:
                return cls(project_id=value.strip())
        return cls()


_current: Config = Config.from_env()


def get_config() -> Config:
    return _current


def set_config(config: Config) -> None:
    global _current
    _current = config
