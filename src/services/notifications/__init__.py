"""Notifications - фабрика уведомлений."""

from .notification_factory import (
    EmailNotification,
    Notification,
    NotificationFactory,
    NotificationType,
    PushNotification,
    SMSNotification,
)

__all__ = [
    'Notification',
    'EmailNotification',
    'SMSNotification',
    'PushNotification',
    'NotificationType',
    'NotificationFactory'
]
