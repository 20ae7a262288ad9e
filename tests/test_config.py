"""
Tests for configuration loading.
"""

import pytest

from pb_modelgen.codegen import ConfigError, GeneratorConfig
from pb_modelgen.config import CONFIG_HELP, AppConfig, load_config


CONFIG_YAML = """\
pocketbase:
  hosting:
    domain: 'https://pb.example.com/'
    email: 'admin@example.com'
    password: 'secret'
  output_directory: './lib/src/models'
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "pocketbase.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


class TestLoadConfig:
    """YAML configuration file."""

    def test_values(self, config_file):
        config = load_config(config_file, environ={})
        assert config.domain == "https://pb.example.com"
        assert config.email == "admin@example.com"
        assert config.password == "secret"
        assert config.output_directory == "./lib/src/models"
        assert config.include_system is False
        assert config.format_output is True
        assert config.generator == GeneratorConfig()

    def test_environment_overrides(self, config_file):
        environ = {"PB_DOMAIN": "http://127.0.0.1:8090", "PB_PASSWORD": "from-env"}
        config = load_config(config_file, environ=environ)
        assert config.domain == "http://127.0.0.1:8090"
        assert config.email == "admin@example.com"
        assert config.password == "from-env"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml", environ={})

    def test_generator_section(self, tmp_path):
        path = tmp_path / "pocketbase.yaml"
        path.write_text(
            CONFIG_YAML
            + "  format: false\n"
            + "  generator:\n"
            + "    add_comments: false\n"
            + "    class_suffix: 'Record'\n",
            encoding="utf-8",
        )
        config = load_config(path, environ={})
        assert config.format_output is False
        assert config.generator.add_comments is False
        assert config.generator.class_suffix == "Record"


class TestFromDict:
    """Validation of the parsed document."""

    def test_missing_pocketbase_section(self):
        with pytest.raises(ConfigError, match='"pocketbase"'):
            AppConfig.from_dict({}, environ={})

    def test_missing_hosting_section(self):
        with pytest.raises(ConfigError, match='"hosting"'):
            AppConfig.from_dict({"pocketbase": {}}, environ={})

    def test_missing_credential(self):
        data = {"pocketbase": {"hosting": {"domain": "https://pb.example.com"}}}
        with pytest.raises(ConfigError, match="email"):
            AppConfig.from_dict(data, environ={})

    def test_credentials_from_environment_only(self):
        environ = {
            "PB_DOMAIN": "https://pb.example.com",
            "PB_EMAIL": "a@b.c",
            "PB_PASSWORD": "pw",
        }
        config = AppConfig.from_dict({"pocketbase": {"hosting": {}}}, environ=environ)
        assert config.email == "a@b.c"
        assert config.output_directory == "./lib/models"


class TestGeneratorConfig:
    """GeneratorConfig.from_dict."""

    def test_none_gives_defaults(self):
        assert GeneratorConfig.from_dict(None) == GeneratorConfig()

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown generator settings: colour"):
            GeneratorConfig.from_dict({"colour": True})

    def test_wrong_type(self):
        with pytest.raises(ConfigError, match="add_comments"):
            GeneratorConfig.from_dict({"add_comments": "yes"})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            GeneratorConfig.from_dict(["add_comments"])

    def test_round_trip(self):
        config = GeneratorConfig(class_suffix="", add_comments=False)
        assert GeneratorConfig.from_dict(config.to_dict()) == config


class TestConfigHelp:

    def test_documents_optional_keys(self):
        for key in ("output_directory", "include_system", "format", "generator"):
            assert f"  {key}:" in CONFIG_HELP
