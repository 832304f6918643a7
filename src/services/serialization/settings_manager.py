"""
Settings Manager - сервис для загрузки и сохранения настроек приложения.

Отвечает за сериализацию/десериализацию настроек в JSON формате.
"""

import json
import os
from typing import Optional

from models.config.app_settings import AppSettings


# Global instance
_settings_manager: Optional['SettingsManager'] = None


def get_settings_manager() -> 'SettingsManager':
    """Get or create global SettingsManager instance."""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


def reset_settings_manager() -> None:
    """Reset global manager (for testing)."""
    global _settings_manager
    _settings_manager = None


class SettingsManager:
    """Сервис для загрузки и сохранения настроек приложения."""

    def __init__(self, config_path: str = "config.json"):
        self.config_path = config_path

    def load_settings(self) -> Optional[AppSettings]:
        """Загрузить настройки из файла."""
        if not os.path.exists(self.config_path):
            return None

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                print(f"Error loading settings: expected a JSON object, got {type(data).__name__}")
                return None

            return AppSettings.from_dict(data)

        except (OSError, ValueError) as e:
            print(f"Error loading settings: {e}")
            return None

    def load_or_default(self) -> AppSettings:
        """Загрузить настройки, либо вернуть значения по умолчанию."""
        return self.load_settings() or AppSettings()

    def save_settings(self, settings: AppSettings) -> bool:
        """Сохранить настройки в файл."""
        try:
            data = settings.to_dict()

            directory = os.path.dirname(self.config_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            return True

        except (OSError, TypeError) as e:
            print(f"Error saving settings: {e}")
            return False
