from typing import Optional

from models.config.app_settings import AppSettings
from models.domain.calculator import Calculator
from services.history import Command, HistoryManager

from .demo_controller import DemoController


class CommandController(DemoController):
    """Калькулятор с историей undo/redo."""

    title = "Command"

    def __init__(self, settings: Optional[AppSettings] = None):
        super().__init__(settings)
        self.calculator = Calculator()
        self.history_manager = HistoryManager(max_history=self.settings.max_history)

    def add(self, amount: int) -> None:
        self.history_manager.execute_command(Command.add(self.calculator, amount))

    def subtract(self, amount: int) -> None:
        self.history_manager.execute_command(Command.subtract(self.calculator, amount))

    def undo(self) -> bool:
        return self.history_manager.undo()

    def redo(self) -> bool:
        return self.history_manager.redo()

    def run(self) -> None:
        self.print_header()

        self.add(10)        # 10
        self.add(5)         # 15
        self.subtract(3)    # 12

        self.print_separator()

        self.undo()         # 15
        self.undo()         # 10

        self.print_separator()

        self.redo()         # 15

        self.print_separator()

        self.undo()         # 10
        self.undo()         # 0
        self.undo()         # nothing to undo
