"""Layered configuration for termai.

Settings resolve from compiled-in defaults, the ``~/.ai_config`` key=value
file, the environment (only for the two Ollama keys) and command-line flags,
in ascending precedence.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from termai.exceptions import (
    InvalidConfiguration,
    MalformedSetting,
    NoApiBaseConfigured,
    NoModelConfigured,
)
from termai.models import DEFAULT_API_BASE, AiConfig

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".ai_config"

OLLAMA_MODEL = "OLLAMA_MODEL"
OLLAMA_API_BASE = "OLLAMA_API_BASE"


def get_config_file(environ: Mapping[str, str] | None = None) -> Path:
    """Return the config file path inside the user's home directory."""
    env = os.environ if environ is None else environ
    home = env.get("HOME") or env.get("USERPROFILE")
    return Path(home or Path.home()) / CONFIG_FILE_NAME


def parse_config(contents: str) -> dict[str, str]:
    """Parse key=value records; lines without ``=`` are skipped."""
    config: dict[str, str] = {}
    for line in contents.split("\n"):
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        config[key.strip().upper()] = value.strip()
    return config


def read_config(path: Path) -> dict[str, str]:
    """Read the config file, returning an empty map when it does not exist."""
    try:
        contents = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("no config file at %s", path)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfiguration(f"Cannot read config file {path}: {e}") from e
    config = parse_config(contents)
    log.debug("read %d settings from %s", len(config), path)
    return config


def write_config(config: Mapping[str, str], path: Path) -> None:
    """Overwrite the config file with one ``KEY=value`` line per entry."""
    normalized: dict[str, str] = {}
    for key, value in config.items():
        normalized[key.upper()] = value
    contents = "\n".join(f"{key}={value}" for key, value in normalized.items())
    path.write_text(contents, encoding="utf-8")
    log.debug("wrote %d settings to %s", len(normalized), path)


def update_config(setting: str, path: Path) -> dict[str, str]:
    """Apply a single ``key=value`` edit to the persisted config."""
    parts = setting.split("=")
    if len(parts) != 2:
        raise MalformedSetting(setting)
    key = parts[0].strip().upper()
    value = parts[1].strip()

    config = read_config(path)
    config[key] = value
    write_config(config, path)
    return config


def load_config(path: Path | None = None) -> AiConfig:
    """Build the effective configuration from defaults and the config file."""
    config_file = get_config_file() if path is None else path
    stored = read_config(config_file)
    try:
        return AiConfig.model_validate(stored)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidConfiguration(f"Invalid setting in {config_file}: {details}") from e


def resolve_setting(
    flag: str | None, stored: str | None, env_value: str | None, default: str = ""
) -> str:
    """Return the first non-empty of flag, stored value, environment and default."""
    for candidate in (flag, stored, env_value):
        if candidate and candidate.strip():
            return candidate
    return default


def resolve_model(
    flag: str | None, config: AiConfig, environ: Mapping[str, str] | None = None
) -> str:
    """Resolve the model name or raise NoModelConfigured."""
    env = os.environ if environ is None else environ
    model = resolve_setting(flag, config.ollama_model, env.get(OLLAMA_MODEL))
    if not model:
        raise NoModelConfigured()
    log.debug("model=%s", model)
    return model


def resolve_api_base(
    config: AiConfig,
    environ: Mapping[str, str] | None = None,
    default: str = DEFAULT_API_BASE,
) -> str:
    """Resolve the Ollama API base URL or raise NoApiBaseConfigured."""
    env = os.environ if environ is None else environ
    api_base = resolve_setting(
        None, config.ollama_api_base, env.get(OLLAMA_API_BASE), default
    )
    if not api_base:
        raise NoApiBaseConfigured()
    log.debug("api_base=%s", api_base)
    return api_base.rstrip("/")
