from typing import TYPE_CHECKING
from ...domain.notifications.user_notifier import UserNotifier
from ...infrastructure.notifications.sns_user_notifier import SnsUserNotifier
from ...infrastructure.notifications.kafka_user_notifier import KafkaUserNotifier

if TYPE_CHECKING:
    from ..base_container import BaseContainer


NOTIFIER_BACKENDS = {
    "sns": SnsUserNotifier,
    "kafka": KafkaUserNotifier,
}


class NotificationProvider:
    """Notifier registration provider - picks the backend named by NOTIFIER_BACKEND"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the user notifier.
        
        Raises:
            ValueError: If NOTIFIER_BACKEND names an unknown backend
        """
        settings = container.get("settings")
        notifier_class = NOTIFIER_BACKENDS.get(settings.notifier_backend)
        if notifier_class is None:
            raise ValueError(
                f"Unknown NOTIFIER_BACKEND {settings.notifier_backend!r}, "
                f"expected one of {sorted(NOTIFIER_BACKENDS)}"
            )
        
        notifier = notifier_class.from_settings(settings)
        container.register_singleton("user_notifier", notifier)
        container.register_singleton(UserNotifier, notifier)
