"""Configuration management for slippytile.

Settings are loaded with Dynaconf from multiple locations in order of
increasing priority:

1. Global settings (/etc/slippytile/)
2. User settings (~/.config/slippytile/)
3. Current directory settings (./)
4. Environment variable specified file (SLIPPYTILE_SETTINGS_FILE_FOR_DYNACONF)

Any key can also be overridden with a ``SLIPPYTILE_`` prefixed environment
variable, e.g. ``SLIPPYTILE_DEFAULT_ZOOM=14``.

Attributes
----------
USER_DIR : pathlib.Path
    Path to user configuration directory.
GLOB_DIR : pathlib.Path
    Path to global configuration directory.
CURR_DIR : pathlib.Path
    Path to current working directory.
settings : Dynaconf
    The Dynaconf settings object with loaded configuration.
"""
import os
import pathlib

from dynaconf import Dynaconf

DEFAULT_ZOOM = 12
DEFAULT_LOG_LEVEL = "WARNING"

USER_DIR = pathlib.Path("~/.config/slippytile").expanduser()
GLOB_DIR = pathlib.Path("/etc/slippytile/")
CURR_DIR = pathlib.Path("./").absolute()
settings_files = [
    GLOB_DIR / "settings.toml",
    GLOB_DIR / ".secrets.toml",
    USER_DIR / "settings.toml",
    USER_DIR / ".secrets.toml",
    CURR_DIR / "settings.toml",
    CURR_DIR / ".secrets.toml"
    ]
extra_file = os.getenv("SLIPPYTILE_SETTINGS_FILE_FOR_DYNACONF")
if extra_file:
    settings_files.append(pathlib.Path(extra_file).absolute())

settings = Dynaconf(
    merge_enabled=True,
    envvar_prefix="SLIPPYTILE",
    settings_files=settings_files,
    environments=True,
    load_dotenv=True,
)


def change_env(new_env):
    """Change the active Dynaconf environment.

    Parameters
    ----------
    new_env : str
        The environment name to switch to (e.g., 'development', 'production').
    """
    settings.setenv(new_env)
    settings.reload()


def default_zoom():
    """Return the configured default zoom level as an int."""
    return int(settings.get("default_zoom", DEFAULT_ZOOM))


def log_level():
    """Return the configured log level name, upper-cased."""
    return str(settings.get("log_level", DEFAULT_LOG_LEVEL)).upper()
