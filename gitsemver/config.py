"""Configuration of defaults for the version computation"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import Any, Optional, Union

from gitsemver.constants import APP_NAME, LOCAL_CONFIG_FILE

logger = logging.getLogger(__name__)

_home = os.path.expanduser("~")


def get_config_dir() -> Path:
    if platform.system() == "Darwin":
        # macOS
        return Path(f"~/Library/Application Support/{APP_NAME}").expanduser()
    # Linux or others
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        _home, ".config"
    )
    return Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file() -> Path:
    return get_config_dir() / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Files read later override values of files read earlier. Missing
    sections, keys and files are handled gracefully.

    Usage:
        config = ConfigAccessor()
        config.read(repo_path / ".git-semver.cfg")
        value = config.get('version', 'prefix', default='v')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = config_path

        self.config = configparser.ConfigParser()
        self.read(self.config_path)

    def read(self, path: Union[str, Path]) -> bool:
        """
        Layer the values of another configuration file on top.

        Fails gracefully if the file is missing or malformed.

        Returns:
            True if the file was read
        """
        path = Path(path)
        if not path.is_file():
            return False

        try:
            self.config.read(path)
        except configparser.Error as e:
            logger.warning(f"Could not read configuration from {path}: {e}")
            return False

        logger.debug(f"Read configuration from {path}")
        return True

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def getboolean(self, section: str, key: str, default: bool = False) -> bool:
        """
        Get a boolean configuration value.

        Values that are not booleans ("yes", "off", "1", ...) yield the default.
        """
        try:
            return self.config.getboolean(section, key, fallback=default)
        except ValueError:
            logger.warning(f"Ignoring non-boolean value for {section}.{key}")
            return default


def load_config(
    repo_path: Optional[Path] = None, config_path: Optional[Path] = None
) -> ConfigAccessor:
    """
    Load the user configuration, overridden by the repository's own file.

    Args:
        repo_path: Repository directory that may hold a .git-semver.cfg
        config_path: User configuration file, defaults to the XDG location
    """
    config = ConfigAccessor(config_path)
    if repo_path is not None:
        config.read(Path(repo_path) / LOCAL_CONFIG_FILE)
    return config
