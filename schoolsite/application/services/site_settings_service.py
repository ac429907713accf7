from typing import Any, Dict

from ...domain.ports.persistence import SettingsRepository

MAINTENANCE_MODE = "maintenance_mode"
MAX_KEY_LENGTH = 64

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off", ""}


class SiteSettingsService:
    """Admin-managed key/value settings, including the maintenance toggle."""

    def __init__(self, settings_repository: SettingsRepository) -> None:
        self._settings = settings_repository

    def list_settings(self) -> Dict[str, str]:
        return self._settings.get_settings()

    def update_settings(self, values: Dict[str, Any]) -> Dict[str, str]:
        normalized: Dict[str, str] = {}
        for key, value in values.items():
            key_clean = key.strip()
            if not key_clean or len(key_clean) > MAX_KEY_LENGTH:
                raise ValueError(f"Invalid setting key: {key!r}")
            if key_clean == MAINTENANCE_MODE:
                normalized[key_clean] = "true" if _to_bool(value) else "false"
            elif isinstance(value, bool):
                normalized[key_clean] = "true" if value else "false"
            elif value is None:
                normalized[key_clean] = ""
            else:
                normalized[key_clean] = str(value)
        for key, value in normalized.items():
            self._settings.set_setting(key, value)
        return self.list_settings()

    def is_maintenance_mode(self) -> bool:
        return (self._settings.get_setting(MAINTENANCE_MODE) or "").lower() in _TRUE_VALUES

    def public_settings(self) -> Dict[str, Any]:
        return {"maintenanceMode": self.is_maintenance_mode()}


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{MAINTENANCE_MODE} must be a boolean, got {value!r}")
