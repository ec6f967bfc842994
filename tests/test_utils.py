import pytest

from last_success_sha.exceptions import OutputWriteError
from last_success_sha.utils import set_output


def test_set_output_writes_key_value_line(config, output_file):
    set_output(config, "sha", "abc123")

    assert output_file.read_text() == "sha=abc123\n"


def test_set_output_appends(config, output_file):
    output_file.write_text("previous=value\n")

    set_output(config, "sha", "abc123")
    set_output(config, "sha", "def456")

    assert output_file.read_text().splitlines() == [
        "previous=value",
        "sha=abc123",
        "sha=def456",
    ]


def test_set_output_without_output_file(config):
    config = config.model_copy(update={"GITHUB_OUTPUT": ""})

    with pytest.raises(OutputWriteError, match="GITHUB_OUTPUT"):
        set_output(config, "sha", "abc123")


def test_set_output_unwritable_path(config, tmp_path):
    config = config.model_copy(update={"GITHUB_OUTPUT": str(tmp_path / "missing" / "out")})

    with pytest.raises(OutputWriteError) as exc_info:
        set_output(config, "sha", "abc123")

    assert isinstance(exc_info.value.__cause__, OSError)
