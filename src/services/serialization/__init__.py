"""Serialization - сохранение и загрузка настроек."""

from .settings_manager import SettingsManager, get_settings_manager, reset_settings_manager

__all__ = ['SettingsManager', 'get_settings_manager', 'reset_settings_manager']
