from typing import Any, Dict

DEFAULT_INITIAL_DELAY_SECONDS = 1.0
DEFAULT_INTERVAL_SECONDS = 30.0


class ModsRequestSettings:
    """Typed accessors for the ``mods_request`` configuration section.

    Values that cannot be coerced fall back to their defaults instead of
    raising, so a typo in the YAML file never stops the scheduler.
    """

    def __init__(self, data: Dict[str, Any] | None = None) -> None:
        self.data: Dict[str, Any] = data or {}

    @property
    def auto_request_enabled(self) -> bool:
        return bool(self.data.get("auto_request_enabled", True))

    @property
    def initial_delay_seconds(self) -> float:
        return self._positive_float("initial_delay_seconds", DEFAULT_INITIAL_DELAY_SECONDS)

    @property
    def interval_seconds(self) -> float:
        return self._positive_float("interval_seconds", DEFAULT_INTERVAL_SECONDS)

    def _positive_float(self, key: str, default: float) -> float:
        try:
            value = float(self.data.get(key, default))
        except (TypeError, ValueError):
            return default
        return value if value > 0 else default
