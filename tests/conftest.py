import logging

import pytest

from last_success_sha.config import Config


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "github_output"


@pytest.fixture
def config(output_file):
    config = Config(
        JOB="build",
        TOKEN="abc",
        GITHUB_EVENT_NAME="push",
        GITHUB_REF="refs/heads/main",
        GITHUB_HEAD_REF="",
        GITHUB_REPOSITORY="test_org/test_repo",
        GITHUB_OUTPUT=str(output_file),
        GITHUB_API_URL="https://api.github.com",
        OVERRIDE_LOGGING="DEBUG",
    )

    logging.getLogger("last_success_sha").setLevel(config.OVERRIDE_LOGGING)

    return config


@pytest.fixture
def action_env(monkeypatch, output_file):
    """Environment as the runner sets it up for a push to main."""
    for key, value in {
        "INPUT_JOB": "build",
        "INPUT_TOKEN": "abc",
        "GITHUB_EVENT_NAME": "push",
        "GITHUB_REF": "refs/heads/main",
        "GITHUB_HEAD_REF": "",
        "GITHUB_REPOSITORY": "test_org/test_repo",
        "GITHUB_OUTPUT": str(output_file),
    }.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("OVERRIDE_LOGGING", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    monkeypatch.delenv("JOB", raising=False)
    monkeypatch.delenv("TOKEN", raising=False)
    return monkeypatch
