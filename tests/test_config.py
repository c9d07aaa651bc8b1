"""Tests for sawmill.config and sawmill.config_loader."""

from pathlib import Path

import pytest

import sawmill
from sawmill._errors import ConfigError
from sawmill.config import DEFAULT_CONFIG, SawmillConfig
from sawmill.config_loader import load_config
from sawmill.event import Level


class TestSawmillConfig:
    """SawmillConfig: frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = SawmillConfig()
        assert config.stack_max_depth == 100
        assert config.flatten_max_depth == 32
        assert config.level_min is None
        assert config.level_max is None
        assert config.dedup is False
        assert config.stack_min_level is None

    def test_default_repo_path_is_package(self) -> None:
        assert DEFAULT_CONFIG.repo_path == Path(sawmill.__file__).resolve().parent

    def test_frozen(self) -> None:
        config = SawmillConfig()
        with pytest.raises(AttributeError):
            config.dedup = True  # type: ignore[misc]

    def test_relative_repo_path_resolved(self) -> None:
        config = SawmillConfig(repo_path=Path("some/dir"))
        assert config.repo_path.is_absolute()

    def test_str_repo_path_converted(self, tmp_path: Path) -> None:
        config = SawmillConfig(repo_path=str(tmp_path))  # type: ignore[arg-type]
        assert config.repo_path == tmp_path.resolve()

    def test_symlinked_repo_path_resolved(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)
        config = SawmillConfig(repo_path=link)
        assert config.repo_path == real.resolve()

    def test_negative_stack_depth_rejected(self) -> None:
        with pytest.raises(ValueError, match="stack_max_depth"):
            SawmillConfig(stack_max_depth=-1)

    def test_zero_flatten_depth_rejected(self) -> None:
        with pytest.raises(ValueError, match="flatten_max_depth"):
            SawmillConfig(flatten_max_depth=0)


class TestLoadConfig:
    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.level_min is None
        assert config.dedup is False

    def test_yaml_section(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text(
            "sawmill:\n  level_min: notice\n  level_max: crit\n  dedup: true\n"
            "  stack_min_level: error\n  stack_max_depth: 20\n"
        )
        config = load_config(tmp_path)
        assert config.level_min is Level.NOTICE
        assert config.level_max is Level.CRITICAL
        assert config.dedup is True
        assert config.stack_min_level is Level.ERROR
        assert config.stack_max_depth == 20

    def test_yaml_top_level_keys(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yml").write_text("level_min: warn\nunrelated: 1\n")
        config = load_config(tmp_path)
        assert config.level_min is Level.WARNING

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.toml").write_text(
            '[sawmill]\nlevel_min = "info"\nflatten_max_depth = 4\n'
        )
        config = load_config(tmp_path)
        assert config.level_min is Level.INFO
        assert config.flatten_max_depth == 4

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text("sawmill:\n  level_min: notice\n  dedup: true\n")
        config = load_config(tmp_path, level_min=Level.ERROR, dedup=False)
        assert config.level_min is Level.ERROR
        assert config.dedup is False

    def test_override_level_by_name(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, level_max="alert")
        assert config.level_max is Level.ALERT

    def test_repo_path_relative_to_root(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text("repo_path: lib\n")
        config = load_config(tmp_path)
        assert config.repo_path == (tmp_path / "lib").resolve()

    def test_bad_level(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text("level_min: verbose\n")
        with pytest.raises(ConfigError, match="level_min"):
            load_config(tmp_path)

    def test_bad_value(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text("stack_max_depth: -5\n")
        with pytest.raises(ConfigError, match="stack_max_depth"):
            load_config(tmp_path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text("sawmill: [unclosed\n")
        with pytest.raises(ConfigError, match=r"sawmill\.yaml"):
            load_config(tmp_path)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.toml").write_text("[sawmill\n")
        with pytest.raises(ConfigError, match=r"sawmill\.toml"):
            load_config(tmp_path)

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sawmill.yaml").write_text("level_min: error\n")
        (tmp_path / "sawmill.toml").write_text('level_min = "debug"\n')
        assert load_config(tmp_path).level_min is Level.ERROR
