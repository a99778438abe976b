from abc import ABC, abstractmethod

from ..models.user import User


class UserNotifier(ABC):
    """Notification interface - publishes user-changed events"""
    
    @abstractmethod
    async def publish(self, user: User) -> None:
        """Publish the user; raises NotifyError on failure, no retries"""
        pass
