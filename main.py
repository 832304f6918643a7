#!/usr/bin/env python3
"""
Design Patterns Gallery
Main entry point: python main.py [pattern ...]
"""

import sys
import os

# Добавить src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from controllers.main_controller import MainController


def main(argv=None):
    """Запуск демонстраций."""
    args = sys.argv[1:] if argv is None else argv

    controller = MainController()
    if not controller.run(args):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
