import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from mygit.errors import ConfigError

DEFAULT_REMOTE = "origin"
DEFAULT_GIT_EXECUTABLE = "git"
CONFIG_ENV_VAR = "MYGIT_CONFIG"


@dataclass(frozen=True)
class MygitConfig:
    """In-memory representation of config.toml.

    Example config.toml:
      # Remote used for tracking, pushing and remote-branch resolution
      remote = "upstream"

      # Executable used for every version-control invocation
      git = "/usr/local/bin/git"
    """

    remote: str
    git_executable: str

    @staticmethod
    def defaults() -> "MygitConfig":
        return MygitConfig(remote=DEFAULT_REMOTE, git_executable=DEFAULT_GIT_EXECUTABLE)


def default_config_path() -> Path:
    """Return the config path from $MYGIT_CONFIG, else ~/.config/mygit/config.toml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "mygit" / "config.toml"


def _read_string(data: dict[str, object], key: str, default: str, path: Path) -> str:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{path}: '{key}' must be a non-empty string")
    return value.strip()


def load_config(path: Path) -> MygitConfig:
    """Load config.toml if present; otherwise return defaults.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values
    """
    if not path.exists():
        return MygitConfig.defaults()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    remote = _read_string(data, "remote", DEFAULT_REMOTE, path)
    if "/" in remote:
        raise ConfigError(f"{path}: 'remote' must be a remote name, not {remote!r}")
    git_executable = _read_string(data, "git", DEFAULT_GIT_EXECUTABLE, path)
    return MygitConfig(remote=remote, git_executable=git_executable)
