"""Message endpoints: sending, editing, fetching, reactions and flags."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any, Literal, NotRequired, Self, TypedDict, get_args

import httpx
from pydantic import Field, model_validator

from .api import ErrorResponse, GeneralSuccessResponse, call_api
from .constants import EmojiTypes, TopicVisibilityValues
from .params import ApiModel, ApiParams, coerce_params

UPLOAD_FIELD_NAME = "filename"

ChannelMessageType = Literal["stream", "channel"]
DirectMessageType = Literal["direct", "private"]
MessageType = ChannelMessageType | DirectMessageType

# Channel ID or name for channel messages; user IDs or emails for direct messages
Destination = int | str | list[int] | list[str]

UploadFile = (
    str
    | os.PathLike[str]
    | IO[bytes]
    | tuple[str, bytes | IO[bytes]]
    | tuple[str, bytes | IO[bytes], str]
)


def check_destination(message_type: str, to: Destination, topic: str | None) -> None:
    """Validate the ``type``/``to``/``topic`` combination of an outgoing message."""
    if message_type in get_args(ChannelMessageType):
        if isinstance(to, list):
            raise ValueError("Channel messages take a single channel ID or name in `to`")
        if topic is None:
            raise ValueError("Channel messages require a topic")
    else:
        if not isinstance(to, list):
            raise ValueError("Direct messages take a list of user IDs or emails in `to`")
        if topic is not None:
            raise ValueError("Direct messages cannot have a topic")


class NarrowItem(ApiModel):
    """One narrow filter term, e.g. ``channel:general`` or ``dm:[8, 9]``."""

    operator: str = Field(..., min_length=1)
    operand: str | int | list[int] | list[str]
    negated: bool | None = None


class SendMessageParams(ApiParams):
    """Parameters for POST /messages.

    ``queue_id`` and ``local_id`` are only meaningful together: they let the
    sending client match the message event from its own event queue.
    """

    type: MessageType
    to: Destination
    topic: str | None = None
    content: str
    queue_id: str | None = None
    local_id: str | None = None
    read_by_sender: bool | None = None

    @model_validator(mode="after")
    def _check_message(self) -> Self:
        check_destination(self.type, self.to, self.topic)
        if (self.queue_id is None) != (self.local_id is None):
            raise ValueError("queue_id and local_id must be supplied together")
        return self


class SendMessageResponse(GeneralSuccessResponse):
    id: int
    automatic_new_visibility_policy: NotRequired[TopicVisibilityValues]


class UploadFileResponse(GeneralSuccessResponse):
    """``uri`` is the pre-9.0 name of ``url``."""

    uri: str
    url: str
    filename: str


class EditMessageParams(ApiParams):
    """Parameters for PATCH /messages/{message_id}.

    Content edits and moves to another channel are separate requests.
    """

    exclusive_groups = (("content",), ("stream_id",))

    content: str | None = None
    stream_id: int | None = None
    topic: str | None = None
    propagate_mode: Literal["change_later", "change_one", "change_all"] | None = None
    send_notification_to_old_thread: bool | None = None
    send_notification_to_new_thread: bool | None = None
    prev_content_sha256: str | None = None

    @model_validator(mode="after")
    def _check_propagate_mode(self) -> Self:
        content_only = self.content is not None and self.topic is None
        if content_only and self.propagate_mode not in (None, "change_one"):
            raise ValueError("Content-only edits only support propagate_mode='change_one'")
        return self


class DetachedUploadMessage(TypedDict):
    date_sent: int
    id: int


class DetachedUpload(TypedDict):
    """An upload whose last reference was removed by an edit.

    ``create_time`` is seconds since the Epoch from Zulip 12.0 (feature
    level 443), milliseconds before that.
    """

    id: int
    name: str
    path_id: str
    size: int
    create_time: int
    messages: list[DetachedUploadMessage]


class EditMessageResponse(GeneralSuccessResponse):
    detached_uploads: NotRequired[list[DetachedUpload]]


class GetMessagesParams(ApiParams):
    """Parameters for GET /messages.

    Either an anchor window (``anchor``, ``num_before``, ``num_after``) or an
    explicit ``message_ids`` list. ``anchor="date"`` takes its ISO 8601
    timestamp from ``anchor_date``.
    """

    exclusive_groups = (
        ("anchor", "anchor_date", "include_anchor", "num_before", "num_after"),
        ("message_ids",),
    )

    anchor: int | Literal["newest", "oldest", "first_unread", "date"] | None = None
    anchor_date: str | None = None
    include_anchor: bool | None = None
    num_before: int | None = Field(None, ge=0)
    num_after: int | None = Field(None, ge=0)
    narrow: list[NarrowItem] | None = None
    client_gravatar: bool | None = None
    apply_markdown: bool | None = None
    message_ids: list[int] | None = None
    allow_empty_topic_name: bool | None = None

    @model_validator(mode="after")
    def _check_window(self) -> Self:
        if self.message_ids is None and (self.num_before is None or self.num_after is None):
            raise ValueError("num_before and num_after are required unless message_ids is given")
        if (self.anchor == "date") != (self.anchor_date is not None):
            raise ValueError("anchor_date must be given exactly when anchor is 'date'")
        return self


class Reaction(TypedDict):
    emoji_name: str
    emoji_code: str
    reaction_type: EmojiTypes
    user_id: int


class EditHistoryEntry(TypedDict):
    timestamp: int
    user_id: int | None
    prev_content: NotRequired[str]
    prev_rendered_content: NotRequired[str]
    prev_topic: NotRequired[str]
    prev_stream: NotRequired[int]
    topic: NotRequired[str]
    stream: NotRequired[int]


class Message(TypedDict):
    """A message as returned by GET /messages.

    ``display_recipient`` is the channel name for channel messages and a list
    of user dicts for direct messages.
    """

    id: int
    type: Literal["stream", "private"]
    sender_id: int
    sender_full_name: str
    sender_email: str
    sender_realm_str: str
    recipient_id: int
    display_recipient: str | list[dict[str, Any]]
    stream_id: NotRequired[int]
    subject: str
    topic_links: list[dict[str, str]]
    content: str
    content_type: str
    timestamp: int
    client: str
    avatar_url: str | None
    is_me_message: bool
    reactions: list[Reaction]
    submessages: list[dict[str, Any]]
    flags: list[str]
    edit_history: NotRequired[list[EditHistoryEntry]]
    last_edit_timestamp: NotRequired[int]
    last_moved_timestamp: NotRequired[int]
    match_content: NotRequired[str]
    match_subject: NotRequired[str]


class GetMessagesResponse(GeneralSuccessResponse):
    anchor: int
    found_newest: bool
    found_oldest: bool
    found_anchor: bool
    history_limited: bool
    messages: list[Message]


class GetMessageParams(ApiParams):
    apply_markdown: bool | None = None
    allow_empty_topic_name: bool | None = None


class GetMessageResponse(GeneralSuccessResponse):
    message: Message
    raw_content: NotRequired[str]


class MessageSnapshot(TypedDict):
    topic: str
    content: str
    rendered_content: str
    timestamp: int
    user_id: int | None
    prev_content: NotRequired[str]
    prev_rendered_content: NotRequired[str]
    prev_topic: NotRequired[str]
    content_html_diff: NotRequired[str]


class GetMessageHistoryResponse(GeneralSuccessResponse):
    message_history: list[MessageSnapshot]


class GetReadReceiptsResponse(GeneralSuccessResponse):
    user_ids: list[int]


class AddReactionParams(ApiParams):
    emoji_name: str = Field(..., min_length=1)
    emoji_code: str | None = None
    reaction_type: EmojiTypes | None = None


class RemoveReactionParams(ApiParams):
    emoji_name: str | None = None
    emoji_code: str | None = None
    reaction_type: EmojiTypes | None = None


class UpdateMessageFlagsParams(ApiParams):
    messages: list[int]
    op: Literal["add", "remove"]
    flag: str = Field(..., description="e.g. read, starred, collapsed")


class UpdateMessageFlagsResponse(GeneralSuccessResponse):
    messages: list[int]


class MarkAllAsReadResponse(GeneralSuccessResponse):
    complete: NotRequired[bool]


class MarkChannelAsReadParams(ApiParams):
    stream_id: int


class MarkTopicAsReadParams(ApiParams):
    stream_id: int
    topic_name: str


class RenderMessageParams(ApiParams):
    content: str


class RenderMessageResponse(GeneralSuccessResponse):
    rendered: str


class SetTypingStatusParams(ApiParams):
    """Typing notification for a direct conversation or a channel topic."""

    exclusive_groups = (("to",), ("stream_id", "topic"))

    op: Literal["start", "stop"]
    type: Literal["direct", "stream", "channel"] | None = None
    to: list[int] | None = None
    stream_id: int | None = None
    topic: str | None = None

    @model_validator(mode="after")
    def _check_target(self) -> Self:
        if self.type in ("stream", "channel"):
            if self.stream_id is None or self.topic is None:
                raise ValueError("Channel typing notifications require stream_id and topic")
        elif self.to is None:
            raise ValueError("Direct typing notifications require `to` user IDs")
        return self


def _upload_field(file: UploadFile) -> Any:
    if isinstance(file, (str, os.PathLike)):
        path = Path(file)
        return (path.name, path.read_bytes())
    return file


async def send_message(
    client: httpx.AsyncClient, params: SendMessageParams | Mapping[str, Any]
) -> SendMessageResponse | ErrorResponse:
    """Send a channel or direct message.

    Args:
        client: Client created by ``generate_call_api``
        params: Message destination and content

    Returns:
        The response of the SendMessage API.
    """
    return await call_api(client, "POST", "messages", coerce_params(SendMessageParams, params))


async def upload_file(
    client: httpx.AsyncClient, file: UploadFile
) -> UploadFileResponse | ErrorResponse:
    """Upload a file for linking from message content.

    Args:
        client: Client created by ``generate_call_api``
        file: Local path, binary file object, or ``(name, content[, content_type])``

    Returns:
        The response of the UploadFile API; link ``url`` in a message to share it.
    """
    return await call_api(
        client, "POST", "user_uploads", files={UPLOAD_FIELD_NAME: _upload_field(file)}
    )


async def edit_message(
    client: httpx.AsyncClient,
    message_id: int,
    params: EditMessageParams | Mapping[str, Any],
) -> EditMessageResponse | ErrorResponse:
    """Edit a message's content, or move it to another topic or channel."""
    return await call_api(
        client, "PATCH", f"messages/{message_id}", coerce_params(EditMessageParams, params)
    )


async def delete_message(
    client: httpx.AsyncClient, message_id: int
) -> GeneralSuccessResponse | ErrorResponse:
    """Permanently delete a message."""
    return await call_api(client, "DELETE", f"messages/{message_id}")


async def get_messages(
    client: httpx.AsyncClient, params: GetMessagesParams | Mapping[str, Any]
) -> GetMessagesResponse | ErrorResponse:
    """Fetch messages around an anchor, optionally filtered by a narrow.

    Args:
        client: Client created by ``generate_call_api``
        params: Anchor window or message IDs, plus narrow and rendering options

    Returns:
        The response of the GetMessages API.
    """
    return await call_api(client, "GET", "messages", coerce_params(GetMessagesParams, params))


async def get_message(
    client: httpx.AsyncClient,
    message_id: int,
    params: GetMessageParams | Mapping[str, Any] | None = None,
) -> GetMessageResponse | ErrorResponse:
    """Fetch a single message."""
    query = coerce_params(GetMessageParams, params) if params is not None else None
    return await call_api(client, "GET", f"messages/{message_id}", query)


async def get_message_history(
    client: httpx.AsyncClient, message_id: int
) -> GetMessageHistoryResponse | ErrorResponse:
    """Fetch the edit history of a message."""
    return await call_api(client, "GET", f"messages/{message_id}/history")


async def get_read_receipts(
    client: httpx.AsyncClient, message_id: int
) -> GetReadReceiptsResponse | ErrorResponse:
    """Get the IDs of users who have read a message."""
    return await call_api(client, "GET", f"messages/{message_id}/read_receipts")


async def add_reaction(
    client: httpx.AsyncClient,
    message_id: int,
    params: AddReactionParams | Mapping[str, Any],
) -> GeneralSuccessResponse | ErrorResponse:
    """Add an emoji reaction to a message."""
    return await call_api(
        client,
        "POST",
        f"messages/{message_id}/reactions",
        coerce_params(AddReactionParams, params),
    )


async def remove_reaction(
    client: httpx.AsyncClient,
    message_id: int,
    params: RemoveReactionParams | Mapping[str, Any] | None = None,
) -> GeneralSuccessResponse | ErrorResponse:
    """Remove an emoji reaction from a message.

    Without ``params`` the DELETE carries no body at all. With ``params``,
    even an empty one, the fields go in a form-encoded body.
    """
    body = coerce_params(RemoveReactionParams, params) if params is not None else None
    return await call_api(
        client, "DELETE", f"messages/{message_id}/reactions", body, location="body"
    )


async def update_message_flags(
    client: httpx.AsyncClient, params: UpdateMessageFlagsParams | Mapping[str, Any]
) -> UpdateMessageFlagsResponse | ErrorResponse:
    """Add or remove a personal flag (read, starred, ...) on messages."""
    return await call_api(
        client, "POST", "messages/flags", coerce_params(UpdateMessageFlagsParams, params)
    )


async def mark_all_as_read(client: httpx.AsyncClient) -> MarkAllAsReadResponse | ErrorResponse:
    return await call_api(client, "POST", "mark_all_as_read")


async def mark_channel_as_read(
    client: httpx.AsyncClient, params: MarkChannelAsReadParams | Mapping[str, Any]
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(
        client, "POST", "mark_stream_as_read", coerce_params(MarkChannelAsReadParams, params)
    )


async def mark_topic_as_read(
    client: httpx.AsyncClient, params: MarkTopicAsReadParams | Mapping[str, Any]
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(
        client, "POST", "mark_topic_as_read", coerce_params(MarkTopicAsReadParams, params)
    )


async def render_message(
    client: httpx.AsyncClient, params: RenderMessageParams | Mapping[str, Any]
) -> RenderMessageResponse | ErrorResponse:
    """Render Zulip-flavored Markdown to HTML without sending it."""
    return await call_api(
        client, "POST", "messages/render", coerce_params(RenderMessageParams, params)
    )


async def set_typing_status(
    client: httpx.AsyncClient, params: SetTypingStatusParams | Mapping[str, Any]
) -> GeneralSuccessResponse | ErrorResponse:
    """Send a start/stop typing notification."""
    return await call_api(client, "POST", "typing", coerce_params(SetTypingStatusParams, params))
