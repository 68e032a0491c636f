from __future__ import annotations

from pathlib import Path

import pytest

from commitcheck.config import CommitCheckConfig, get_user_config_path, load_config
from commitcheck.exceptions import ConfigError


@pytest.fixture
def isolated(
    temp_dir: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> Path:
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr(Path, "home", lambda: temp_dir / "home")
    return temp_dir


def test_load_defaults_when_no_config(isolated: Path) -> None:
    config = load_config()

    assert isinstance(config, CommitCheckConfig)
    assert config.project_root is None
    assert config.verbosity == "warning"


def test_load_project_config(isolated: Path) -> None:
    (isolated / "commitcheck.yaml").write_text(
        f'project_root: "{isolated}"\nverbosity: "info"\n'
    )

    config = load_config()

    assert config.project_root == isolated
    assert config.verbosity == "info"


def test_explicit_config_path(isolated: Path) -> None:
    (isolated / "commitcheck.yaml").write_text('verbosity: "info"\n')
    custom = isolated / "custom.yaml"
    custom.write_text('verbosity: "debug"\n')

    assert load_config(custom).verbosity == "debug"
    # The override does not leak into later loads
    assert load_config().verbosity == "info"


def test_user_config_is_lowest_priority(isolated: Path) -> None:
    user_config = get_user_config_path()
    user_config.parent.mkdir(parents=True)
    user_config.write_text('verbosity: "error"\n')

    assert load_config().verbosity == "error"

    (isolated / "commitcheck.yaml").write_text('verbosity: "info"\n')
    assert load_config().verbosity == "info"


def test_env_var_overrides(
    isolated: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (isolated / "commitcheck.yaml").write_text('verbosity: "info"\n')
    monkeypatch.setenv("COMMITCHECK_VERBOSITY", "debug")

    assert load_config().verbosity == "debug"


def test_empty_config_uses_defaults(isolated: Path) -> None:
    (isolated / "commitcheck.yaml").write_text("")

    assert load_config().verbosity == "warning"


def test_invalid_value_raises_config_error(isolated: Path) -> None:
    (isolated / "commitcheck.yaml").write_text('verbosity: "loud"\n')

    with pytest.raises(ConfigError) as exc_info:
        load_config()

    assert exc_info.value.field == "verbosity"
    assert exc_info.value.value == "loud"


def test_invalid_yaml_raises_config_error(isolated: Path) -> None:
    (isolated / "commitcheck.yaml").write_text("verbosity: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config()


def test_non_mapping_yaml_raises_config_error(isolated: Path) -> None:
    (isolated / "commitcheck.yaml").write_text("- just\n- a list\n")

    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config()
