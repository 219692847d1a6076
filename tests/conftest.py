import pytest
from pathlib import Path

from buildmatrix import constants


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """Keep the CI runner's own settings (GITHUB_OUTPUT in particular) out of the tests."""
    for var in list(constants.ENV_VARS.values()) + [constants.LOG_LEVELS_ENV]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_tree(tmp_path: Path):
    """
    Create files under tmp_path from a {relative_path: content} mapping.
    A key ending in '/' creates an empty directory.
    """
    def _make(files: dict) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return tmp_path
    return _make


def parse_outputs(text: str) -> dict:
    """Pick the `key=value` output lines out of captured text."""
    outputs = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if sep and key in constants.OUTPUT_KEYS:
            outputs[key] = value
    return outputs


@pytest.fixture
def outputs_of():
    return parse_outputs
