"""Tests for utils config module."""

import pytest
import yaml

from propatlas.utils.config import Config, get_config, reset_config


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        "resolution": {"strategy": "cancellation", "max_steps": 50},
        "logging": {"level": "${PROPATLAS_TEST_LEVEL:INFO}"},
    }))
    return path


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class TestConfig:
    """Test Config class."""

    def test_dotted_get(self, config_file):
        config = Config(str(config_file))
        assert config.get("resolution.strategy") == "cancellation"
        assert config["resolution.max_steps"] == 50
        assert config.get("resolution.expansion_table") is None
        assert config.get("sequent.display_order", "chronological") == "chronological"

    def test_environment_default(self, config_file, monkeypatch):
        monkeypatch.delenv("PROPATLAS_TEST_LEVEL", raising=False)
        assert Config(str(config_file)).get("logging.level") == "INFO"

    def test_environment_override(self, config_file, monkeypatch):
        monkeypatch.setenv("PROPATLAS_TEST_LEVEL", "DEBUG")
        assert Config(str(config_file)).get("logging.level") == "DEBUG"

    def test_placeholder_inside_string(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PROPATLAS_TEST_DIR", "/data")
        monkeypatch.delenv("PROPATLAS_TEST_MISSING", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(
            "output:\n"
            "  trace: ${PROPATLAS_TEST_DIR:/tmp}/traces/${PROPATLAS_TEST_NAME:run}.json\n"
            "  tag: v${PROPATLAS_TEST_MISSING}-x\n"
            "  plain: $HOME {braces}\n"
        )
        config = Config(str(path))
        assert config.get("output.trace") == "/data/traces/run.json"
        assert config.get("output.tag") == "v-x"
        assert config.get("output.plain") == "$HOME {braces}"

    def test_log_level(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PROPATLAS_TEST_LEVEL", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: debug\n")
        assert Config(str(path)).log_level() == 10
        path.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError):
            Config(str(path)).log_level()

    def test_update_merges(self, config_file):
        config = Config(str(config_file))
        config.update({"resolution": {"strategy": "saturation"}})
        assert config.get("resolution.strategy") == "saturation"
        assert config.get("resolution.max_steps") == 50

    def test_packaged_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PROPATLAS_LOG_LEVEL", raising=False)
        config = Config()
        assert config.config_path.endswith("default.yaml")
        assert config.get("resolution.strategy") == "saturation"
        assert config.get("resolution.expansion_table") == "classical"
        assert config.get("resolution.max_steps") is None
        assert config.get("sequent.display_order") == "chronological"
        assert config.get("logging.level") == "WARNING"

    def test_working_directory_config_wins(self, tmp_path, monkeypatch):
        (tmp_path / "configs").mkdir()
        (tmp_path / "configs" / "default.yaml").write_text("resolution:\n  strategy: cancellation\n")
        monkeypatch.chdir(tmp_path)
        assert Config().get("resolution.strategy") == "cancellation"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.yaml"))


class TestGlobalConfig:
    """Test the shared configuration instance."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_explicit_path_reloads(self, config_file):
        first = get_config()
        second = get_config(str(config_file))
        assert second is not first
        assert get_config() is second
        assert get_config().get("resolution.strategy") == "cancellation"
