"""
Configuration loading and process-wide setup.
"""

from __future__ import annotations

import dataclasses
import json

import pytest

import cloudlog
from cloudlog import config


@pytest.fixture
def no_project_env(monkeypatch):
    for name in (config.PROJECT_ENV,) + config.LEGACY_PROJECT_ENVS:
        monkeypatch.delenv(name, raising=False)


def test_from_env(monkeypatch, no_project_env):
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "my-project")
    assert config.Config.from_env().project_id == "my-project"


def test_from_env_legacy_variable(monkeypatch, no_project_env):
    monkeypatch.setenv("GCP_PROJECT", "legacy")
    assert config.Config.from_env().project_id == "legacy"


def test_from_env_empty(no_project_env):
    assert config.Config.from_env() == config.Config(project_id="")


def test_from_env_file(tmp_path, no_project_env):
    env_file = tmp_path / ".env"
    env_file.write_text("GOOGLE_CLOUD_PROJECT=from-file\n")
    assert config.Config.from_env(str(env_file)).project_id == "from-file"


def test_process_env_beats_env_file(tmp_path, monkeypatch, no_project_env):
    env_file = tmp_path / ".env"
    env_file.write_text("GOOGLE_CLOUD_PROJECT=from-file\n")
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "from-env")
    assert config.Config.from_env(str(env_file)).project_id == "from-env"


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.Config().project_id = "x"


def test_init_with_config():
    cloudlog.init(cloudlog.Config(project_id="p1"))
    assert config.get_config().project_id == "p1"


def test_init_project_override():
    cloudlog.init(project_id="p2")
    assert config.get_config().project_id == "p2"


def test_init_rereads_environment(monkeypatch, no_project_env):
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "p3")
    cloudlog.init()
    assert config.get_config().project_id == "p3"


def test_env_changes_need_init(monkeypatch, no_project_env):
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "late")
    logger = cloudlog.for_request({"X-Cloud-Trace-Context": "abc/1"})
    assert logger.trace == ""


def test_for_request_uses_snapshot(project):
    logger = cloudlog.for_request({"X-Cloud-Trace-Context": "abc/1;o=1"})
    assert json.loads(logger.trace) == "projects/my-project/traces/abc"


def test_for_span_without_active_span(project):
    assert cloudlog.for_span().trace == ""


def test_shutdown_flushes(capsys):
    cloudlog.info("x")
    cloudlog.shutdown()
    assert capsys.readouterr().out == '{"message":"x","severity":"INFO"}\n'
