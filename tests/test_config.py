"""Tests for configuration and tweak file location."""

from pathlib import Path

import pytest

from recolor.config import RecolorConfig, default_tweaks_path, resolve_tweaks_path


class TestTweaksPath:
    """Tests for tweak file resolution."""

    def test_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_tweaks_path() == tmp_path / "recolor" / "recolor.json"

    def test_home_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert default_tweaks_path() == Path.home() / ".config" / "recolor" / "recolor.json"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RECOLOR_TWEAKS_PATH", str(tmp_path / "t.json"))
        assert resolve_tweaks_path() == tmp_path / "t.json"

    def test_explicit_path_wins(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RECOLOR_TWEAKS_PATH", str(tmp_path / "env.json"))
        assert resolve_tweaks_path(tmp_path / "cli.json") == tmp_path / "cli.json"


class TestRecolorConfig:
    """Tests for RecolorConfig."""

    def test_defaults(self) -> None:
        config = RecolorConfig()
        assert config.hue_step == 10
        assert config.brightness_step == 0.05
        assert config.saturation_step == 0.05
        assert (config.width, config.height) == (75, 25)

    def test_with_overrides(self, tmp_path: Path) -> None:
        config = RecolorConfig().with_overrides(hue_step=5, tweaks_path=str(tmp_path / "x.json"))
        assert config.hue_step == 5
        assert config.tweaks_path == tmp_path / "x.json"
        assert config.resolved_tweaks_path == tmp_path / "x.json"

    def test_unknown_option(self) -> None:
        with pytest.raises(TypeError, match="colour"):
            RecolorConfig().with_overrides(colour="red")
