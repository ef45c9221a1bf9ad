from __future__ import annotations
import os
from pathlib import Path
import fcntl
from typing import Any, Dict
import yaml
from dotenv import load_dotenv

from chatmod.configuration.mods_request_settings import ModsRequestSettings
from chatmod.util.logger import get_logger

logger = get_logger("app_configuration")

load_dotenv()

CONFIG_PATH = Path(os.getenv("CHATMOD_CONFIG", "./config/app_config.yml")).resolve()


class AppConfig:
    """File-lock based accessor around the YAML-based application configuration.

    The class caches contents of ``./config/app_config.yml`` (or the file named
    by ``CHATMOD_CONFIG``), exposes dictionary-like access helpers, and resolves
    the moderator-list request settings through :class:`ModsRequestSettings`.
    Uses fcntl file locks for safe concurrent access across processes.
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._data: Dict[str, Any] = {}
        self.reload()

    # --------------------------
    # Private helpers
    # --------------------------
    def load_from_disk(self) -> Dict[str, Any]:
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                try:
                    data = yaml.safe_load(f)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except FileNotFoundError:
            logger.warning("[APP CONFIGURATION] Config file %s not found, using defaults.", self.config_path)
            return {}
        except Exception as exc:
            logger.error("[APP CONFIGURATION] Failed to load config %s: %s", self.config_path, exc)
            return {}

        if not isinstance(data, dict):
            if data is not None:
                logger.error("[APP CONFIGURATION] Config %s is not a mapping, ignoring it.", self.config_path)
            return {}
        return data

    # --------------------------
    # Public API
    # --------------------------
    def reload(self) -> Dict[str, Any]:
        """Reload configuration from disk and return the loaded mapping.

        Returns the raw mapping that was loaded (an empty dict on error).
        """
        self._data = self.load_from_disk()
        return self._data

    @property
    def data(self) -> Dict[str, Any]:
        """Return the current cached configuration mapping.

        The returned dict is the internal cache. Callers should not mutate it.
        """
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Safe lookup for top-level configuration keys."""
        return self._data.get(key, default)

    # --------------------------
    # High-level shortcuts
    # --------------------------
    @property
    def mods_request(self) -> ModsRequestSettings:
        """Return the moderator-list request settings."""
        section = self._data.get("mods_request", {})
        if not isinstance(section, dict):
            section = {}
        return ModsRequestSettings(section)

    def is_auto_mods_request_enabled(self) -> bool:
        """Whether the moderator list is requested automatically for joined channels."""
        return self.mods_request.auto_request_enabled


# Shared application-wide configuration instance
app_config = AppConfig(CONFIG_PATH)
