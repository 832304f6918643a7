"""
Config Service - единственный экземпляр конфигурации на процесс.

Initial values are read from AppSettings through the settings manager.
"""

from typing import Any, Dict, Optional

from services.serialization.settings_manager import get_settings_manager


class ConfigService:
    """Process-wide key/value configuration."""

    _instance: Optional['ConfigService'] = None

    def __init__(self):
        if ConfigService._instance is not None:
            raise RuntimeError("ConfigService is a singleton, use ConfigService.get_instance()")

        print("Initializing ConfigService...")
        settings = get_settings_manager().load_or_default()
        self._config: Dict[str, Any] = {
            'api_url': settings.api_url,
            'timeout': settings.timeout,
            'version': settings.version,
        }
        print("ConfigService initialized successfully.")

    @classmethod
    def get_instance(cls) -> 'ConfigService':
        """Get or create the global ConfigService instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, key: str, default: Any = None) -> Any:
        """Получить значение настройки."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Установить значение настройки."""
        self._config[key] = value


def get_config_service() -> ConfigService:
    return ConfigService.get_instance()


def reset_config_service() -> None:
    """Reset global instance (for testing)."""
    ConfigService._instance = None
