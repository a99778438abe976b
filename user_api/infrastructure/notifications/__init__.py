"""Notification adapters for user-changed events"""

from .sns_user_notifier import SnsUserNotifier
from .kafka_user_notifier import KafkaUserNotifier

__all__ = [
    "SnsUserNotifier",
    "KafkaUserNotifier",
]
