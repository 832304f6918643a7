"""Config models - настройки приложения."""

from .app_settings import AppSettings

__all__ = ['AppSettings']
