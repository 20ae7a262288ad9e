"""
Application configuration.

Loads the YAML file that tells the tool which PocketBase instance to read
and where to write the generated models.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .codegen.core.config import ConfigError, GeneratorConfig
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "./pocketbase.yaml"
DEFAULT_OUTPUT_DIRECTORY = "./lib/models"

# Environment variables that take precedence over the file
ENV_OVERRIDES = {
    "domain": "PB_DOMAIN",
    "email": "PB_EMAIL",
    "password": "PB_PASSWORD",
}

CONFIG_HELP = """\
Expected configuration file in YAML format with the following structure:

pocketbase:
  hosting:
    domain: 'https://your-pocketbase-domain.com'
    email: 'your-email@example.com'
    password: 'your-password'
  output_directory: './lib/models'  # Optional, default is './lib/models'
  include_system: false             # Optional, also generate system collections
  format: true                      # Optional, run 'dart format' on the output
  generator:                        # Optional, see GeneratorConfig
    class_suffix: 'Model'

Credentials can also come from the PB_DOMAIN, PB_EMAIL and PB_PASSWORD
environment variables.

Usage:
  pb-modelgen --config path/to/pocketbase.yaml
"""


@dataclass
class AppConfig:
    """Settings for one generation run."""

    domain: str
    email: str
    password: str
    output_directory: str = DEFAULT_OUTPUT_DIRECTORY
    include_system: bool = False
    format_output: bool = True
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @classmethod
    def from_dict(
        cls, data: Any, environ: Optional[Mapping[str, str]] = None
    ) -> "AppConfig":
        """
        Build the configuration from the parsed YAML document.

        Raises:
            ConfigError: If a required section or value is missing
        """
        environ = os.environ if environ is None else environ

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a YAML mapping.")

        pb_config = data.get("pocketbase")
        if not isinstance(pb_config, dict):
            raise ConfigError('Missing "pocketbase" section in configuration.')

        hosting = pb_config.get("hosting") or {}
        if not isinstance(hosting, dict):
            raise ConfigError('"hosting" under "pocketbase" must be a mapping.')

        values: Dict[str, Any] = {}
        for key, env_name in ENV_OVERRIDES.items():
            value = environ.get(env_name) or hosting.get(key)
            if value:
                values[key] = str(value)

        missing = [key for key in ENV_OVERRIDES if key not in values]
        if missing:
            if "hosting" not in pb_config:
                raise ConfigError(
                    'Missing "hosting" section under "pocketbase" in configuration.'
                )
            raise ConfigError(
                f"Missing {', '.join(repr(k) for k in missing)} in hosting configuration."
            )

        return cls(
            domain=values["domain"].rstrip("/"),
            email=values["email"],
            password=values["password"],
            output_directory=str(
                pb_config.get("output_directory") or DEFAULT_OUTPUT_DIRECTORY
            ),
            include_system=bool(pb_config.get("include_system", False)),
            format_output=bool(pb_config.get("format", True)),
            generator=GeneratorConfig.from_dict(pb_config.get("generator")),
        )


def load_config(
    path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Load the configuration from a YAML file.

    Args:
        path: Configuration file path
        environ: Environment used for credential overrides (os.environ by default)

    Raises:
        ConfigError: If the file is missing, unreadable or incomplete
    """
    config_path = Path(os.path.normpath(str(path)))
    logger.debug("Loading configuration from %s", config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found at {path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {path}: {e}") from e

    config = AppConfig.from_dict(data, environ)
    logger.info("Configuration loaded for %s", config.domain)
    return config
