"""Events - паттерн Observer."""

from .subject import EmailNotifier, NewsReader, Observer, Subject

__all__ = ['Observer', 'Subject', 'NewsReader', 'EmailNotifier']
