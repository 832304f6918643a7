"""
Subject - издатель с подпиской наблюдателей.

Observers are plain objects with an ``update(data)`` method. Qt code can
listen to the ``published`` signal instead of subscribing.
"""

from typing import Any, List, Protocol

from PySide6.QtCore import QObject, Signal


class Observer(Protocol):
    def update(self, data: Any) -> None:
        ...


class Subject(QObject):
    """Notifies every subscribed observer, in subscription order."""

    published = Signal(object)
    observers_changed = Signal(int)

    def __init__(self):
        super().__init__()
        self._observers: List[Observer] = []

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: Observer) -> None:
        """Добавить наблюдателя (повторная подписка игнорируется)."""
        if any(obs is observer for obs in self._observers):
            return

        self._observers.append(observer)
        print(f"[Subject] New observer subscribed. Total: {len(self._observers)}")
        self.observers_changed.emit(len(self._observers))

    def unsubscribe(self, observer: Observer) -> None:
        """Удалить наблюдателя."""
        self._observers = [obs for obs in self._observers if obs is not observer]
        print(f"[Subject] An observer unsubscribed. Total: {len(self._observers)}")
        self.observers_changed.emit(len(self._observers))

    def notify(self, data: Any) -> None:
        """Разослать данные всем наблюдателям."""
        print(f"[Subject] Notifying {len(self._observers)} observers...")
        for observer in list(self._observers):
            observer.update(data)
        self.published.emit(data)


class NewsReader:
    """Prints every article title it receives."""

    def __init__(self, name: str):
        self.name = name
        self.received: List[str] = []

    def update(self, article_title: str) -> None:
        self.received.append(article_title)
        print(f'[{self.name}] Received new article: "{article_title}"')


class EmailNotifier:
    def update(self, article_title: str) -> None:
        print(f'[Email Notifier] Simulating sending email for new article: "{article_title}"')
