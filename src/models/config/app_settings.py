from dataclasses import dataclass
from typing import Any, Dict, Optional


def positive_int_or_none(value: Any) -> Optional[int]:
    """Привести значение к положительному int; всё остальное - None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


@dataclass
class AppSettings:
    """Модель настроек приложения."""

    # Значения для ConfigService
    api_url: str = "https://example.com"
    timeout: int = 5000
    version: str = "1.0.0"

    # Валюта для стратегий оплаты
    currency: str = "JPY"

    # Ширина разделителя между блоками вывода
    separator_width: int = 30

    # None - неограниченная история
    max_history: Optional[int] = None

    def to_dict(self) -> Dict:
        """Конвертировать в словарь."""
        return {
            'api_url': self.api_url,
            'timeout': self.timeout,
            'version': self.version,
            'currency': self.currency,
            'separator_width': self.separator_width,
            'max_history': self.max_history,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'AppSettings':
        """Создать из словаря."""
        return cls(
            api_url=data.get('api_url', cls.api_url),
            timeout=data.get('timeout', cls.timeout),
            version=data.get('version', cls.version),
            currency=data.get('currency', cls.currency),
            separator_width=data.get('separator_width', cls.separator_width),
            max_history=positive_int_or_none(data.get('max_history', cls.max_history)),
        )
