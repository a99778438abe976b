"""Kafka publisher for user-changed events"""

# Standard library imports
import asyncio
import json
import logging
import threading
from typing import Any, Optional

# External package imports
from kafka import KafkaProducer
from kafka.errors import KafkaError

# Local application imports
from ...core.config import Settings
from ...domain.exceptions import NotifyError
from ...domain.models.user import User
from ...domain.notifications.user_notifier import UserNotifier
from .payload import user_to_message

logger = logging.getLogger(__name__)


class KafkaUserNotifier(UserNotifier):
    """
    Publishes updated users to a Kafka topic, keyed by nickname.
    
    The producer is created on first publish and reused afterwards;
    close() flushes and releases it on shutdown.
    """
    
    def __init__(
        self,
        bootstrap_servers: str,
        topic: str,
        send_timeout: float = 10.0,
        producer: Optional[Any] = None,
    ) -> None:
        self.bootstrap_servers = bootstrap_servers
        self.topic = topic
        self.send_timeout = send_timeout
        self._producer = producer
        self._producer_lock = threading.Lock()
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "KafkaUserNotifier":
        return cls(
            bootstrap_servers=settings.kafka_bootstrap_servers,
            topic=settings.kafka_topic,
        )
    
    def _create_producer(self) -> KafkaProducer:
        """
        Create and configure Kafka producer.
        
        Returns:
            Configured KafkaProducer instance
        """
        producer = KafkaProducer(
            bootstrap_servers=self.bootstrap_servers.split(','),
            key_serializer=lambda k: k.encode('utf-8'),
            value_serializer=lambda v: json.dumps(v, separators=(",", ":")).encode('utf-8'),
        )
        
        logger.info(
            f"Created Kafka producer: topic={self.topic}, "
            f"bootstrap_servers={self.bootstrap_servers}"
        )
        
        return producer
    
    def _send_sync(self, key: str, value: dict) -> None:
        with self._producer_lock:
            if self._producer is None:
                self._producer = self._create_producer()
        future = self._producer.send(self.topic, key=key, value=value)
        future.get(timeout=self.send_timeout)
    
    async def publish(self, user: User) -> None:
        """
        Publish the user as a JSON message and wait for the broker ack
        
        Args:
            user: Updated user (password already hashed)
            
        Raises:
            NotifyError: If the producer cannot be created or the send fails
        """
        value = user_to_message(user)
        try:
            await asyncio.to_thread(self._send_sync, user.nickname, value)
        except KafkaError as e:
            logger.error(f"Failed to publish user {user.nickname} to Kafka topic {self.topic}: {e}")
            raise NotifyError(str(e)) from e
        
        logger.info(f"notifying updated user {json.dumps(value)}")
    
    def close(self) -> None:
        """Flush and close the producer if one was created"""
        if self._producer is not None:
            try:
                self._producer.close()
            except KafkaError as e:
                logger.error(f"Error closing Kafka producer: {e}")
            self._producer = None
