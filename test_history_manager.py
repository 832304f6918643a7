#!/usr/bin/env python3
"""
Тест истории команд: execute / undo / redo на калькуляторе.
"""

import sys
import os
import io
import random
import unittest
from contextlib import redirect_stdout

# Добавляем src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from models.config.app_settings import AppSettings
from models.domain.calculator import Calculator
from services.history import Command, HistoryManager, OperationKind


class TestHistoryManager(unittest.TestCase):
    """Тесты для HistoryManager."""

    def setUp(self):
        self.calculator = Calculator()
        self.history = HistoryManager()
        self.output = io.StringIO()

    def run_quiet(self, func, *args):
        with redirect_stdout(self.output):
            return func(*args)

    def test_initial_state(self):
        self.assertEqual(self.calculator.value, 0)
        self.assertEqual(self.history.undo_stack, [])
        self.assertEqual(self.history.redo_stack, [])
        self.assertFalse(self.history.can_undo())
        self.assertFalse(self.history.can_redo())

    def test_reference_scenario(self):
        """0 -> +10 -> +5 -> -3 -> undo -> undo -> redo -> undo -> undo -> undo."""
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 10))
        self.assertEqual(self.calculator.value, 10)
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 5))
        self.assertEqual(self.calculator.value, 15)
        self.run_quiet(self.history.execute_command, Command.subtract(self.calculator, 3))
        self.assertEqual(self.calculator.value, 12)

        self.assertTrue(self.run_quiet(self.history.undo))
        self.assertEqual(self.calculator.value, 15)
        self.assertTrue(self.run_quiet(self.history.undo))
        self.assertEqual(self.calculator.value, 10)

        self.assertTrue(self.run_quiet(self.history.redo))
        self.assertEqual(self.calculator.value, 15)

        self.assertTrue(self.run_quiet(self.history.undo))
        self.assertEqual(self.calculator.value, 10)
        self.assertTrue(self.run_quiet(self.history.undo))
        self.assertEqual(self.calculator.value, 0)

        self.assertFalse(self.run_quiet(self.history.undo))
        self.assertEqual(self.calculator.value, 0)
        self.assertTrue(self.output.getvalue().rstrip().endswith("[History] Nothing to undo."))

    def test_sum_of_deltas(self):
        rng = random.Random(1234)
        expected = 0
        for _ in range(50):
            amount = rng.randint(0, 100)
            if rng.random() < 0.5:
                command = Command.add(self.calculator, amount)
                expected += amount
            else:
                command = Command.subtract(self.calculator, amount)
                expected -= amount
            self.run_quiet(self.history.execute_command, command)

        self.assertEqual(self.calculator.value, expected)
        self.assertEqual(sum(c.delta for c in self.history.undo_stack), expected)

    def test_undo_then_redo_is_noop(self):
        for amount in (7, 11, 4):
            self.run_quiet(self.history.execute_command, Command.add(self.calculator, amount))
        self.run_quiet(self.history.execute_command, Command.subtract(self.calculator, 9))

        before = self.calculator.value
        self.run_quiet(self.history.undo)
        self.assertNotEqual(self.calculator.value, before)
        self.run_quiet(self.history.redo)
        self.assertEqual(self.calculator.value, before)

    def test_execute_clears_redo_stack(self):
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 10))
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 5))
        self.run_quiet(self.history.undo)
        self.assertTrue(self.history.can_redo())

        self.run_quiet(self.history.execute_command, Command.subtract(self.calculator, 1))
        self.assertFalse(self.history.can_redo())
        self.assertEqual(self.history.redo_stack, [])

        self.assertFalse(self.run_quiet(self.history.redo))
        self.assertEqual(self.calculator.value, 9)

    def test_done_stack_order(self):
        add10 = Command.add(self.calculator, 10)
        sub3 = Command.subtract(self.calculator, 3)
        add1 = Command.add(self.calculator, 1)
        for command in (add10, sub3, add1):
            self.run_quiet(self.history.execute_command, command)

        self.assertEqual(self.history.undo_stack, [add10, sub3, add1])
        self.run_quiet(self.history.undo)
        self.assertEqual(self.history.undo_stack, [add10, sub3])
        self.assertEqual(self.history.redo_stack, [add1])

    def test_nothing_to_undo_signal(self):
        calls = []
        self.history.nothing_to_undo.connect(lambda: calls.append("undo"))

        result = self.run_quiet(self.history.undo)

        self.assertFalse(result)
        self.assertEqual(calls, ["undo"])
        self.assertEqual(self.calculator.value, 0)
        self.assertIn("[History] Nothing to undo.", self.output.getvalue())

    def test_nothing_to_redo_signal(self):
        calls = []
        self.history.nothing_to_redo.connect(lambda: calls.append("redo"))
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 2))

        result = self.run_quiet(self.history.redo)

        self.assertFalse(result)
        self.assertEqual(calls, ["redo"])
        self.assertEqual(self.calculator.value, 2)
        self.assertIn("[History] Nothing to redo.", self.output.getvalue())

    def test_command_signals(self):
        executed, undone, redone = [], [], []
        self.history.command_executed.connect(lambda c: executed.append(c))
        self.history.command_undone.connect(lambda c: undone.append(c))
        self.history.command_redone.connect(lambda c: redone.append(c))

        command = Command.add(self.calculator, 3)
        self.run_quiet(self.history.execute_command, command)
        self.run_quiet(self.history.undo)
        self.run_quiet(self.history.redo)

        self.assertEqual(executed, [command])
        self.assertEqual(undone, [command])
        self.assertEqual(redone, [command])

    def test_clear_history(self):
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 3))
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 4))
        self.run_quiet(self.history.undo)

        self.history.clear_history()

        self.assertFalse(self.history.can_undo())
        self.assertFalse(self.history.can_redo())
        self.assertEqual(self.calculator.value, 3)

    def test_max_history_evicts_oldest(self):
        history = HistoryManager(max_history=2)
        first = Command.add(self.calculator, 1)
        for command in (first, Command.add(self.calculator, 2), Command.add(self.calculator, 3)):
            self.run_quiet(history.execute_command, command)

        self.assertEqual(len(history.undo_stack), 2)
        self.assertNotIn(first, history.undo_stack)
        self.assertEqual(self.calculator.value, 6)

    def test_invalid_max_history_means_unbounded(self):
        for raw in (0, -1, "abc", [3]):
            history = HistoryManager(max_history=raw)
            self.assertIsNone(history.max_history)

            for amount in (1, 2, 3):
                self.run_quiet(history.execute_command, Command.add(self.calculator, amount))
            self.assertEqual(len(history.undo_stack), 3)

    def test_string_max_history_from_settings(self):
        settings = AppSettings.from_dict({'max_history': "2"})
        history = HistoryManager(max_history=settings.max_history)
        executed = []
        history.command_executed.connect(lambda c: executed.append(c))

        for amount in (1, 2, 3):
            self.run_quiet(history.execute_command, Command.add(self.calculator, amount))

        self.assertEqual(history.max_history, 2)
        self.assertEqual(len(history.undo_stack), 2)
        self.assertEqual(len(executed), 3)
        self.assertEqual(self.output.getvalue().count("[History] Command executed and logged."), 3)

    def test_stack_snapshots_are_copies(self):
        self.run_quiet(self.history.execute_command, Command.add(self.calculator, 1))
        self.history.undo_stack.clear()
        self.assertTrue(self.history.can_undo())


def test_trace_lines(capsys):
    """Trace matches the documented order of calculator and history lines."""
    calculator = Calculator()
    history = HistoryManager()

    history.execute_command(Command.add(calculator, 10))
    history.undo()
    history.redo()
    history.redo()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[Calculator] Current value: 10",
        "[History] Command executed and logged.",
        "[History] Undoing last command...",
        "[Calculator] Current value: 0",
        "[History] Redoing last undone command...",
        "[Calculator] Current value: 10",
        "[History] Nothing to redo.",
    ]


def test_command_kinds():
    calculator = Calculator()

    add = Command.add(calculator, 4)
    subtract = Command.subtract(calculator, 4)

    assert add.kind is OperationKind.ADD
    assert add.delta == 4
    assert subtract.delta == -4
    assert add.description == "Add 4"
    assert subtract.description == "Subtract 4"
    assert add.inverted() == subtract
    assert OperationKind.ADD.inverse is OperationKind.SUBTRACT


def test_command_is_immutable():
    command = Command.add(Calculator(), 1)
    try:
        command.amount = 5
    except AttributeError:
        pass
    else:
        raise AssertionError("Command fields must be read-only")


def test_calculator_apply(capsys):
    calculator = Calculator()
    values = []
    calculator.value_changed.connect(lambda v: values.append(v))

    calculator.apply(5)
    calculator.subtract(8)
    calculator.add(1)

    assert calculator.value == -2
    assert values == [5, -3, -2]
    assert "[Calculator] Current value: -3" in capsys.readouterr().out


if __name__ == "__main__":
    unittest.main()
