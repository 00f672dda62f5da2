"""
Shared fixtures: config snapshot isolation and in-memory sinks.
"""

from __future__ import annotations

import io

import pytest

from cloudlog import config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Each test starts with tracing disabled and restores the snapshot afterwards."""
    monkeypatch.setattr(config, "_current", config.Config())


@pytest.fixture
def project(monkeypatch):
    cfg = config.Config(project_id="my-project")
    monkeypatch.setattr(config, "_current", cfg)
    return cfg


@pytest.fixture
def sink():
    return io.StringIO()

