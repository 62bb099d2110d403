"""Settings resolution and well-known constants for the GitLab client.

Settings that are not credentials (such as where the configuration file lives)
are resolved from multiple sources with priority ordering:

1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from gitlab_client_core.config import CONFIG_ROOT_ENV_VAR, SettingResolver, default_config_root

    resolver = SettingResolver()
    config_root = resolver.resolve(
        env_var_name=CONFIG_ROOT_ENV_VAR,
        default=str(default_config_root()),
    )
    ```
"""

import logging
import os
import sys
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

API_VERSION_PREFIX = "/api/v3"
PRIVATE_TOKEN_HEADER = "PRIVATE-TOKEN"
STATUS_CODES_DOC_PATH = "/help/api/README.md#status-codes"

PRODUCT_NAME = "GitLabClient"
CONFIG_FILE_NAME = "Configuration.json"
CONFIG_ROOT_ENV_VAR = "GITLAB_CLIENT_CONFIG_ROOT"


def default_config_root() -> Path:
    """Return the platform's standard per-user configuration directory.

    Windows uses ``%APPDATA%``, macOS uses ``~/Library/Application Support``
    and everything else follows the XDG base directory convention.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home)
    return Path.home() / ".config"


class SettingResolver:
    """Resolve a setting from an explicit value, the environment or a default.

    The .env file is loaded at most once per resolver, guarded by a lock so
    that resolvers shared between threads do not load it twice.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize setting resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all. Tests usually
                pass False.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for setting resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Mark as attempted either way; a missing .env is not an error
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
    ) -> str | None:
        """Resolve a setting from multiple sources.

        Resolution order (first match wins):
        1. Explicitly provided `value` parameter
        2. Environment variable (including values loaded from .env)
        3. Default value

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.

        Returns:
            Resolved value, or None if no source provides one.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved setting from {source}: {result}")

        return result
