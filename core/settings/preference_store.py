"""
Preference store for the browser settings screen.

Uses QSettings for persistent storage. Values are written immediately
and flushed lazily by Qt; there are no transactions.
"""
from typing import Any, Callable, Dict, List, Optional, Union
import threading
from pathlib import Path
from PySide6.QtCore import QSettings, QObject, Signal

from core.logging.logger import get_logger, is_verbose_logging
from core.settings.preferences import Preference, default_values
from versioning import APP_COMPANY, APP_NAME

logger = get_logger(__name__)


class PreferenceStore(QObject):
    """
    Persisted key-value store of typed browser preferences.

    Uses QSettings under the organization/application name by default, or
    an INI file when ``path`` is given. Change notifications are offered
    both as a Qt signal and as per-key handlers.
    """

    # Signal emitted when a preference changes
    settings_changed = Signal(str, object)  # key, new_value

    def __init__(self, organization: str = APP_COMPANY,
                 application: str = APP_NAME,
                 path: Optional[Union[str, Path]] = None):
        """
        Initialize the preference store.

        Args:
            organization: Organization name for QSettings
            application: Application name for QSettings
            path: Optional INI file to use instead of the native store
        """
        super().__init__()

        if path is not None:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(organization, application)
        self._lock = threading.RLock()
        self._change_handlers: Dict[str, List[Callable[[Any, Any], None]]] = {}

        self._set_defaults()

        logger.info("PreferenceStore initialized (%s)", self._settings.fileName())

    def _set_defaults(self) -> None:
        """Set default values if not already present."""
        with self._lock:
            for key, value in default_values().items():
                if not self._settings.contains(key):
                    self._settings.setValue(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a raw stored value.

        Args:
            key: Preference key in dot notation (e.g., 'general.saveLogins')
            default: Default value if key not found

        Returns:
            Stored value or default
        """
        with self._lock:
            return self._settings.value(key, default)

    @staticmethod
    def to_bool(value: Any, default: bool = False) -> bool:
        """Normalize a stored value to bool.

        Accepts common string forms ("true", "1", "yes", "on") as True and
        ("false", "0", "no", "off") as False. Falls back to the provided
        default when the value cannot be interpreted.
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            v = value.strip().lower()
            if v in ("true", "1", "yes", "on"):
                return True
            if v in ("false", "0", "no", "off"):
                return False
            return default
        if value is None:
            return default
        if isinstance(value, (int, float)):
            return bool(value)
        return default

    @staticmethod
    def to_int(value: Any, default: int = 0) -> int:
        """Normalize a stored value to int, falling back to ``default``."""
        if isinstance(value, bool):
            return int(value)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Convenience wrapper around get() that normalizes to bool."""
        return self.to_bool(self.get(key, default), default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Convenience wrapper around get() that normalizes to int."""
        return self.to_int(self.get(key, default), default)

    def get_str(self, key: str, default: str = "") -> str:
        """Convenience wrapper around get() that normalizes to str."""
        raw = self.get(key, default)
        return default if raw is None else str(raw)

    def value(self, pref: Preference) -> Any:
        """Return the current value of ``pref`` coerced to its declared type."""
        if pref.value_type is bool:
            return self.get_bool(pref.key, pref.default)
        if pref.value_type is int:
            return self.get_int(pref.key, pref.default)
        return self.get_str(pref.key, pref.default)

    def set_value(self, pref: Preference, value: Any) -> None:
        """Write ``value`` for ``pref``.

        Raises:
            TypeError: if ``value`` is not of the preference's type.
        """
        if pref.value_type is int and isinstance(value, bool):
            raise TypeError(f"{pref.key} expects int, got bool")
        if not isinstance(value, pref.value_type):
            raise TypeError(
                f"{pref.key} expects {pref.value_type.__name__}, got {type(value).__name__}"
            )
        self.set(pref.key, value)

    def set(self, key: str, value: Any) -> None:
        """
        Set a preference value.

        Args:
            key: Preference key in dot notation
            value: Value to set
        """
        with self._lock:
            old_value = self._settings.value(key)
            self._settings.setValue(key, value)

            self.settings_changed.emit(key, value)

            for handler in list(self._change_handlers.get(key, ())):
                try:
                    handler(value, old_value)
                except Exception as e:
                    logger.error("Error in change handler for %s: %s", key, e)

        if is_verbose_logging():
            logger.debug("[PREF] %s: %r -> %r", key, old_value, value)
        else:
            logger.debug("[PREF] %s changed", key)

    def save(self) -> None:
        """Force save preferences to persistent storage."""
        with self._lock:
            self._settings.sync()
        logger.debug("Preferences saved")

    def on_changed(self, key: str, handler: Callable[[Any, Any], None]) -> None:
        """
        Register a handler for when a specific preference changes.

        Args:
            key: Preference key to watch
            handler: Callback function(new_value, old_value)
        """
        with self._lock:
            self._change_handlers.setdefault(key, []).append(handler)

        logger.debug("Registered change handler for %s", key)

    def reset_to_defaults(self) -> None:
        """Clear every stored value and reseed the defaults."""
        with self._lock:
            self._settings.clear()
            self._set_defaults()
            self._settings.sync()

        logger.info("Preferences reset to defaults")
        self.settings_changed.emit('*', None)

    def get_all_keys(self) -> List[str]:
        """Return every key currently stored."""
        with self._lock:
            return self._settings.allKeys()

    def contains(self, key: str) -> bool:
        """Return True if ``key`` has a stored value."""
        with self._lock:
            return self._settings.contains(key)

    def remove(self, key: str) -> None:
        """Delete the stored value for ``key``."""
        with self._lock:
            self._settings.remove(key)
        logger.debug("Removed preference: %s", key)

    def clear(self) -> None:
        """Clear all preferences (use with caution)."""
        with self._lock:
            self._settings.clear()
        logger.warning("All preferences cleared")
