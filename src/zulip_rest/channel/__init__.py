"""Channel, folder, subscription and topic endpoints."""

from .channel import (
    archive_channel,
    create_channel,
    get_channel_by_id,
    get_channel_id,
    get_channels,
    update_channel,
)
from .folder import create_channel_folder, get_channel_folders, update_channel_folder
from .subscription import (
    get_subscribers,
    get_subscription_status,
    get_subscriptions,
    subscribe,
    unsubscribe,
    update_subscription_settings,
)
from .topic import delete_topic, get_channel_topics, update_user_topic

__all__ = [
    "archive_channel",
    "create_channel",
    "create_channel_folder",
    "delete_topic",
    "get_channel_by_id",
    "get_channel_folders",
    "get_channel_id",
    "get_channel_topics",
    "get_channels",
    "get_subscribers",
    "get_subscription_status",
    "get_subscriptions",
    "subscribe",
    "unsubscribe",
    "update_channel",
    "update_channel_folder",
    "update_subscription_settings",
    "update_user_topic",
]
