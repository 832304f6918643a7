"""Utilities - вспомогательные декораторы."""

from .decorators import ReportGenerator, deprecated, measure_time

__all__ = ['measure_time', 'deprecated', 'ReportGenerator']
