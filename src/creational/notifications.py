#!/usr/bin/env python3
"""
Factory Method Pattern Implementation
Notification creators that defer the choice of notification channel
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Union
import logging

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]

REGISTERED_MESSAGE = "Notification registered"

class Channel(str, Enum):
    """Notification channels"""
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"

    @property
    def label(self) -> str:
        return CHANNEL_LABELS[self]

CHANNEL_LABELS: Dict[Channel, str] = {
    Channel.EMAIL: "Email",
    Channel.SMS: "SMS",
    Channel.PUSH: "Push",
}

@dataclass(frozen=True)
class Notification:
    """Notification product, identified only by its channel"""
    channel: Channel

    def announce(self, out: OutputSink = print) -> str:
        """Write the sent line for this channel and return it"""
        line = f"{self.channel.label} notification sent"
        out(line)
        return line

class BaseCreator(ABC):
    """Abstract notification creator"""

    @abstractmethod
    def produce(self) -> Notification:
        """Create the notification this creator is responsible for"""
        pass

    def dispatch(self, out: OutputSink = print) -> List[str]:
        """
        Produce a notification, announce it and register the dispatch

        Args:
            out: Sink receiving each output line

        Returns:
            Lines written, in order
        """
        notification = self.produce()
        lines = [notification.announce(out)]

        # common post-send step shared by every channel
        out(REGISTERED_MESSAGE)
        lines.append(REGISTERED_MESSAGE)

        logger.debug(f"Dispatched {notification.channel.value} notification")
        return lines

@dataclass(frozen=True)
class NotificationCreator(BaseCreator):
    """Creator bound to a single channel at construction"""
    channel: Channel

    def produce(self) -> Notification:
        return Notification(self.channel)

    @classmethod
    def for_channel(cls, channel: Union[Channel, str]) -> 'NotificationCreator':
        return cls(Channel(channel))

email_creator = NotificationCreator(Channel.EMAIL)
sms_creator = NotificationCreator(Channel.SMS)
push_creator = NotificationCreator(Channel.PUSH)

CREATORS: Dict[Channel, NotificationCreator] = {
    Channel.EMAIL: email_creator,
    Channel.SMS: sms_creator,
    Channel.PUSH: push_creator,
}

def get_creator(key: Union[Channel, str]) -> NotificationCreator:
    """
    Look up the creator for a channel

    Args:
        key: Channel or its string value ('email', 'sms', 'push')

    Returns:
        The shared creator for that channel

    Raises:
        ValueError: If the channel is unknown
    """
    try:
        channel = Channel(key.lower() if isinstance(key, str) else key)
    except ValueError:
        raise ValueError(
            f"Notification channel '{key}' not available. "
            f"Available: {', '.join(c.value for c in CREATORS)}"
        ) from None

    return CREATORS[channel]

def send_notification(creator: BaseCreator, out: OutputSink = print) -> List[str]:
    """Client code: depends only on the creator abstraction"""
    return creator.dispatch(out)
