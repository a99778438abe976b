from .user_notifier import UserNotifier

__all__ = ["UserNotifier"]
