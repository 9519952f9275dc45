"""
Pytest configuration and shared fixtures for the test suite.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def reset_config_manager():
    from usage_tally.config import ConfigManager

    # Patch load_dotenv to prevent .env file loading during tests
    with patch("usage_tally.config.load_dotenv"):
        ConfigManager.reset_config()
        yield
        ConfigManager.reset_config()


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def projects_dir(tmp_path):
    root = tmp_path / "projects"
    root.mkdir()
    return root


# Factory functions for test data creation
def make_entry(model="claude-sonnet-4-20250514", timestamp="2024-01-01T12:00:00Z", **usage):
    message = {"role": "assistant"}
    if model is not None:
        message["model"] = model
    if usage:
        message["usage"] = usage
    return {"type": "assistant", "timestamp": timestamp, "message": message}


def write_jsonl(path: Path, entries) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [entry if isinstance(entry, str) else json.dumps(entry) for entry in entries]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_json(path: Path, entry) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(entry, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def sample_projects(projects_dir):
    write_jsonl(
        projects_dir / "project-a" / "session-1.jsonl",
        [
            make_entry(input_tokens=10, output_tokens=1),
            make_entry(timestamp="2024-01-02T08:00:00Z", input_tokens=5),
            make_entry(model="claude-opus-4-20250514", cache_read_input_tokens=100),
        ],
    )
    write_jsonl(
        projects_dir / "project-b" / "session-2.jsonl",
        [
            make_entry(input_tokens=20, cache_creation_input_tokens=3),
            "{not json",
            make_entry(model=None, input_tokens=999),
        ],
    )
    write_json(
        projects_dir / "project-b" / "summary.json",
        make_entry(timestamp="2024-01-02T23:59:59+00:00", output_tokens=7),
    )
    (projects_dir / "project-b" / "notes.txt").write_text(
        json.dumps(make_entry(input_tokens=12345)), encoding="utf-8"
    )
    return projects_dir


# Test configuration
def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (deselect with '-m \"not integration\"')",
    )


# Test collection hooks
def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" in item.nodeid.lower():
            item.add_marker(pytest.mark.integration)
