from abc import ABC, abstractmethod
from typing import Optional

from models.config.app_settings import AppSettings


class DemoController(ABC):
    """Базовый контроллер демонстрации одного паттерна."""

    title = ""

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings()

    def print_header(self) -> None:
        print(f"--- {self.title} Pattern Example ---")

    def print_separator(self) -> None:
        print("\n" + "-" * self.settings.separator_width + "\n")

    @abstractmethod
    def run(self) -> None:
        """Запустить демонстрацию до конца."""
