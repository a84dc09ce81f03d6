import pytest

from resource_lifecycle.config import Settings
from resource_lifecycle.errors import ConfigError


class TestSettings:
    def test_default_values(self):
        settings = Settings()
        assert settings.demo.construction.name == "texture1"
        assert settings.demo.construction.size == 1000
        assert settings.demo.move.name == "texture2"
        assert settings.identity.algorithm == "fnv1a"
        assert settings.logging.file is None
        assert settings.output.path is None

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text(
            "logging:\n"
            "  console:\n"
            "    level: DEBUG\n"
            "    format: '%(levelname)s %(message)s'\n"
            "identity:\n"
            "  algorithm: blake2b\n"
            "demo:\n"
            "  move:\n"
            "    name: mesh\n"
            "    size: 0\n",
            encoding="utf-8",
        )
        settings = Settings.load(str(path))
        assert settings.logging.console.level == "DEBUG"
        assert settings.logging.console.fmt == "%(levelname)s %(message)s"
        assert settings.identity.algorithm == "blake2b"
        assert settings.demo.move.name == "mesh"
        assert settings.demo.move.size == 0
        assert settings.demo.construction.name == "texture1"

    def test_config_path_env(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("demo:\n  construction:\n    name: from_env\n", encoding="utf-8")
        monkeypatch.setenv("CONFIG_PATH", str(path))
        assert Settings.load().demo.construction.name == "from_env"

    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CONFIG_PATH", raising=False)
        monkeypatch.chdir(tmp_path)
        assert Settings.load() == Settings()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert Settings.load(str(path)) == Settings()


class TestConfigValidation:
    def test_negative_size_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("demo:\n  construction:\n    name: x\n    size: -5\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Settings.load(str(path))

    def test_unknown_algorithm_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("identity:\n  algorithm: md5\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Settings.load(str(path))

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            Settings.load(str(tmp_path / "nope.yaml"))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("demo: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Settings.load(str(path))


class TestLogLevels:
    def test_level_case_insensitive(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text(
            "logging:\n"
            "  console:\n"
            "    level: debug\n"
            "  file:\n"
            "    path: logs/x.log\n"
            "    level: Warning\n",
            encoding="utf-8",
        )
        settings = Settings.load(str(path))
        assert settings.logging.console.level == "DEBUG"
        assert settings.logging.file.level == "WARNING"

    @pytest.mark.parametrize("section", ["console", "file"])
    def test_unknown_level_rejected_at_load(self, tmp_path, section):
        extra = "    path: logs/x.log\n" if section == "file" else ""
        path = tmp_path / "cfg.yaml"
        path.write_text(f"logging:\n  {section}:\n{extra}    level: verbose\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Settings.load(str(path))
