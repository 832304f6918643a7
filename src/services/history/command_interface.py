from dataclasses import dataclass, field
from enum import Enum

from models.domain.calculator import Calculator


class OperationKind(Enum):
    """Kind of arithmetic command, carrying the sign it applies with."""

    ADD = 1
    SUBTRACT = -1

    @property
    def sign(self) -> int:
        return self.value

    @property
    def inverse(self) -> 'OperationKind':
        return OperationKind.SUBTRACT if self is OperationKind.ADD else OperationKind.ADD


@dataclass(frozen=True)
class Command:
    """Invertible operation bound to a Calculator.

    Add and Subtract differ only by ``kind``; both execute through the same
    ``receiver.apply(sign * amount)`` path, and undo applies the negated delta.
    """

    kind: OperationKind
    amount: int
    receiver: Calculator = field(compare=False, repr=False)

    @classmethod
    def add(cls, receiver: Calculator, amount: int) -> 'Command':
        """Create an Add command."""
        return cls(OperationKind.ADD, amount, receiver)

    @classmethod
    def subtract(cls, receiver: Calculator, amount: int) -> 'Command':
        """Create a Subtract command."""
        return cls(OperationKind.SUBTRACT, amount, receiver)

    @property
    def delta(self) -> int:
        """Signed change this command applies on execute."""
        return self.kind.sign * self.amount

    @property
    def description(self) -> str:
        verb = "Add" if self.kind is OperationKind.ADD else "Subtract"
        return f"{verb} {self.amount}"

    def execute(self) -> None:
        """Выполнить команду."""
        self.receiver.apply(self.delta)

    def undo(self) -> None:
        """Отменить команду."""
        self.receiver.apply(-self.delta)

    def inverted(self) -> 'Command':
        """Return the command with the opposite kind and the same amount."""
        return Command(self.kind.inverse, self.amount, self.receiver)
