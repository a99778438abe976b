"""SNS publisher for user-changed events"""

# Standard library imports
import asyncio
import logging
from typing import Any, Optional

# External package imports
import boto3
from botocore.exceptions import BotoCoreError, ClientError

# Local application imports
from ...core.config import Settings
from ...domain.exceptions import NotifyError
from ...domain.models.user import User
from ...domain.notifications.user_notifier import UserNotifier
from .payload import serialize_user

logger = logging.getLogger(__name__)


class SnsUserNotifier(UserNotifier):
    """
    Publishes updated users to an SNS topic.
    
    The boto3 client is created on first publish, so a missing or wrong
    SNS configuration surfaces as a NotifyError on the update that needed
    it rather than at startup.
    """
    
    def __init__(
        self,
        topic_arn: str,
        region: str,
        endpoint_url: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        self.topic_arn = topic_arn
        self.region = region
        self.endpoint_url = endpoint_url or None
        self._client = client
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "SnsUserNotifier":
        return cls(
            topic_arn=settings.sns_topic,
            region=settings.aws_region,
            endpoint_url=settings.sns_endpoint,
        )
    
    def _get_client(self) -> Any:
        if self._client is None:
            self._client = boto3.client(
                "sns",
                region_name=self.region,
                endpoint_url=self.endpoint_url,
            )
        return self._client
    
    def _publish_sync(self, message: str) -> None:
        self._get_client().publish(TopicArn=self.topic_arn, Message=message)
    
    async def publish(self, user: User) -> None:
        """
        Publish the user as a JSON message
        
        Args:
            user: Updated user (password already hashed)
            
        Raises:
            NotifyError: If the SNS call or client setup fails
        """
        message = serialize_user(user)
        try:
            # boto3 is blocking; keep the event loop free
            await asyncio.to_thread(self._publish_sync, message)
        except (BotoCoreError, ClientError, ValueError) as e:
            logger.error(f"Failed to publish user {user.nickname} to SNS topic {self.topic_arn}: {e}")
            raise NotifyError(str(e)) from e
        
        logger.info(f"notifying updated user {message}")
