"""Tests for TrisumSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from trisum.config.settings import TrisumSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TRISUM_CONFIG", "TRISUM_BENCHMARK__ITERATIONS", "TRISUM_RECURSION__MAX_DEPTH"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TrisumSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.validation.strict is True
        assert settings.benchmark.iterations == 1000
        assert settings.recursion.max_depth == 5000

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TrisumSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "trisum.toml").write_text(
            "[validation]\nallow_negative = true\n[benchmark]\niterations = 20\n"
        )
        settings = TrisumSettings.from_cli(start_dir=tmp_path)
        assert settings.validation.allow_negative is True
        assert settings.validation.strict is True
        assert settings.benchmark.iterations == 20
        assert settings.config_path == tmp_path / "trisum.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[recursion]\nmax_depth = 25\n")
        settings = TrisumSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.recursion.max_depth == 25
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = TrisumSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.benchmark.iterations == 1000

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "trisum.toml").write_text("[benchmark\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TrisumSettings.from_cli(start_dir=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "trisum.toml").write_text("[benchmark]\niterations = 20\n")
        monkeypatch.setenv("TRISUM_BENCHMARK__ITERATIONS", "7")
        settings = TrisumSettings.from_cli(start_dir=tmp_path)
        assert settings.benchmark.iterations == 7

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = TrisumSettings.from_cli(
            start_dir=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "trisum.toml").write_text("quiet = true\n")
        settings = TrisumSettings.from_cli(start_dir=tmp_path, quiet=False)
        assert settings.quiet is False
