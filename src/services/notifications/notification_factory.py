from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Type, Union


class Notification(ABC):
    """Общий интерфейс уведомлений."""

    @abstractmethod
    def send(self, message: str) -> None:
        pass


class EmailNotification(Notification):
    def send(self, message: str) -> None:
        print(f'Sending Email: "{message}"')


class SMSNotification(Notification):
    def send(self, message: str) -> None:
        print(f'Sending SMS: "{message}"')


class PushNotification(Notification):
    def send(self, message: str) -> None:
        print(f'Sending Push Notification: "{message}"')


class NotificationType(Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class NotificationFactory:
    """Собирает логику создания уведомлений в одном месте."""

    _REGISTRY: Dict[NotificationType, Type[Notification]] = {
        NotificationType.EMAIL: EmailNotification,
        NotificationType.SMS: SMSNotification,
        NotificationType.PUSH: PushNotification,
    }

    @staticmethod
    def create_notification(notification_type: Union[NotificationType, str]) -> Notification:
        """Create a notification of the given type.

        Accepts either a NotificationType or its string value ("email", "sms", "push").
        Raises ValueError for anything else.
        """
        try:
            kind = NotificationType(notification_type)
        except ValueError:
            raise ValueError("Invalid notification type specified.") from None

        return NotificationFactory._REGISTRY[kind]()
