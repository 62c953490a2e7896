"""Tests for configuration loading."""

from pathlib import Path

import pytest

from passopt.core.config import PassOptConfig, load_allowed_passes
from passopt.core.pass_registry import DEFAULT_ENTRY_POINT_GROUP


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("PASSOPT_DEBUG", "PASSOPT_ENTRY_POINT_GROUP", "PASSOPT_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_from_env_defaults(clean_env: pytest.MonkeyPatch) -> None:
    """Without environment variables the defaults apply."""
    config = PassOptConfig.from_env()

    assert config == PassOptConfig(
        debug=False,
        entry_point_group=DEFAULT_ENTRY_POINT_GROUP,
        allowed_passes=None,
    )


@pytest.mark.parametrize("value", ["1", "true", "TRUE"])
def test_from_env_debug(clean_env: pytest.MonkeyPatch, value: str) -> None:
    clean_env.setenv("PASSOPT_DEBUG", value)
    assert PassOptConfig.from_env().debug is True


def test_from_env_reads_config_file(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """PASSOPT_CONFIG points at a TOML file with the allow-list."""
    config_path = tmp_path / "passopt.toml"
    config_path.write_text('allowed_passes = ["dse", "anders_aa"]\n', encoding="utf-8")
    clean_env.setenv("PASSOPT_CONFIG", str(config_path))
    clean_env.setenv("PASSOPT_ENTRY_POINT_GROUP", "custom.passes")

    config = PassOptConfig.from_env()

    assert config.allowed_passes == ("dse", "anders_aa")
    assert config.entry_point_group == "custom.passes"


class TestLoadAllowedPasses:
    """Tests for load_allowed_passes."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config not found"):
            load_allowed_passes(tmp_path / "missing.toml")

    def test_unset_key_returns_none(self, tmp_path: Path) -> None:
        config_path = tmp_path / "passopt.toml"
        config_path.write_text("", encoding="utf-8")

        assert load_allowed_passes(config_path) is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_path = tmp_path / "passopt.toml"
        config_path.write_text("allowed_passes = [", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid TOML"):
            load_allowed_passes(config_path)

    @pytest.mark.parametrize("content", ['allowed_passes = "dse"', "allowed_passes = [1, 2]"])
    def test_rejects_non_string_list(self, tmp_path: Path, content: str) -> None:
        config_path = tmp_path / "passopt.toml"
        config_path.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError, match="must be a list of strings"):
            load_allowed_passes(config_path)
