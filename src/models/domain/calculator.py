from PySide6.QtCore import QObject, Signal


class Calculator(QObject):
    """Receiver: holds a single integer value mutated only through commands."""

    # Сигнал изменения значения
    value_changed = Signal(int)

    def __init__(self, initial_value: int = 0):
        super().__init__()
        self._value = initial_value

    @property
    def value(self) -> int:
        """Get current value."""
        return self._value

    def apply(self, delta: int) -> None:
        """Add delta to the current value (negative delta subtracts)."""
        self._value += delta
        self._log()
        self.value_changed.emit(self._value)

    def add(self, amount: int) -> None:
        self.apply(amount)

    def subtract(self, amount: int) -> None:
        self.apply(-amount)

    def _log(self) -> None:
        print(f"[Calculator] Current value: {self._value}")
