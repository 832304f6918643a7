from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from models.config.app_settings import positive_int_or_none

from .command_interface import Command


class HistoryManager(QObject):
    """Менеджер истории команд для undo/redo.

    Linear history: running a new command discards everything that could
    have been redone.
    """

    command_executed = Signal(object)
    command_undone = Signal(object)
    command_redone = Signal(object)
    nothing_to_undo = Signal()
    nothing_to_redo = Signal()
    history_changed = Signal()

    def __init__(self, max_history: Optional[int] = None):
        super().__init__()
        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []
        # Не положительное значение - неограниченная история
        self.max_history = positive_int_or_none(max_history)

    @property
    def undo_stack(self) -> List[Command]:
        """Applied commands, oldest first."""
        return list(self._undo_stack)

    @property
    def redo_stack(self) -> List[Command]:
        """Undone commands, the next one to redo last."""
        return list(self._redo_stack)

    def execute_command(self, command: Command) -> None:
        """Выполнить команду и добавить в историю."""
        command.execute()
        self._undo_stack.append(command)

        # Очистить redo стек при новом действии
        self._redo_stack.clear()

        # Ограничить размер истории
        if self.max_history and len(self._undo_stack) > self.max_history:
            self._undo_stack.pop(0)

        print("[History] Command executed and logged.")
        self.command_executed.emit(command)
        self.history_changed.emit()

    def undo(self) -> bool:
        """Отменить последнюю команду. Returns False when there is nothing to undo."""
        if not self.can_undo():
            print("[History] Nothing to undo.")
            self.nothing_to_undo.emit()
            return False

        print("[History] Undoing last command...")
        command = self._undo_stack.pop()
        command.undo()
        self._redo_stack.append(command)

        self.command_undone.emit(command)
        self.history_changed.emit()
        return True

    def redo(self) -> bool:
        """Повторить отменённую команду. Returns False when there is nothing to redo."""
        if not self.can_redo():
            print("[History] Nothing to redo.")
            self.nothing_to_redo.emit()
            return False

        print("[History] Redoing last undone command...")
        command = self._redo_stack.pop()
        command.execute()
        self._undo_stack.append(command)

        self.command_redone.emit(command)
        self.history_changed.emit()
        return True

    def can_undo(self) -> bool:
        """Проверить, можно ли отменить."""
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        """Проверить, можно ли повторить."""
        return len(self._redo_stack) > 0

    def clear_history(self):
        """Очистить всю историю."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self.history_changed.emit()
