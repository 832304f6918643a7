"""Config - паттерн Singleton."""

from .config_service import ConfigService, get_config_service, reset_config_service

__all__ = ['ConfigService', 'get_config_service', 'reset_config_service']
