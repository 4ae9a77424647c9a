"""Enumerated values used in Zulip parameters and responses."""

from __future__ import annotations

from typing import Literal

# Topic visibility policy (update-user-topic visibility_policy)
VISIBILITY_NONE = 0
VISIBILITY_MUTED = 1
VISIBILITY_UNMUTED = 2
VISIBILITY_FOLLOWED = 3

TopicVisibilityValues = Literal[0, 1, 2, 3]

# Channel post policy. Deprecated server-side in favour of can_send_message_group.
STREAM_POST_POLICY_EVERYONE = 1
STREAM_POST_POLICY_ADMINS = 2
STREAM_POST_POLICY_FULL_MEMBERS = 3
STREAM_POST_POLICY_MODERATORS = 4

StreamPostPolicyValues = Literal[1, 2, 3, 4]

# Organization-level user roles
USER_ROLE_OWNER = 100
USER_ROLE_ADMINISTRATOR = 200
USER_ROLE_MODERATOR = 300
USER_ROLE_MEMBER = 400
USER_ROLE_GUEST = 600

UserRoleValues = Literal[100, 200, 300, 400, 600]

BOT_TYPE_GENERIC = 1
BOT_TYPE_INCOMING_WEBHOOK = 2
BOT_TYPE_OUTGOING_WEBHOOK = 3
BOT_TYPE_EMBEDDED = 4

BotTypeValues = Literal[1, 2, 3, 4]

EmojiTypes = Literal["unicode_emoji", "realm_emoji", "zulip_extra_emoji"]

TopicsPolicyValues = Literal[
    "inherit", "allow_empty_topic", "disable_empty_topic", "empty_topic_only"
]
