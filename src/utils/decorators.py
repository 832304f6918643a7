"""Method decorators: execution timing and deprecation notices."""

import functools
import time
import warnings


def measure_time(func):
    """Print how long the wrapped call took, in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        print(f"[MeasureTime] Starting execution of {func.__name__}...")
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(f"[MeasureTime] {func.__name__} executed in {elapsed_ms:.2f} ms.")
        return result

    return wrapper


def deprecated(func):
    """Warn on every call that the wrapped method is going away."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        message = f'Method "{func.__name__}" is deprecated and will be removed in a future version.'
        print(f"[Deprecated] {message}")
        warnings.warn(message, DeprecationWarning, stacklevel=2)
        return func(*args, **kwargs)

    return wrapper


class ReportGenerator:
    """Сервис отчётов, методы которого обёрнуты декораторами."""

    @measure_time
    def generate_sales_report(self, days: int) -> int:
        print(f"Generating sales report for the last {days} days...")
        total = sum(range(10_000_000))
        print("Sales report generated successfully.")
        return total

    @deprecated
    @measure_time
    def generate_old_report(self) -> int:
        print("Generating the old, inefficient report...")
        total = sum(range(5_000_000))
        print("Old report generated.")
        return total
