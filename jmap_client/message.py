"""The Message entity, aggregate root of the JMAP data model."""

from __future__ import annotations

import re
from collections.abc import Awaitable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import InvalidArgumentError
from .interface import ClientInterface
from .models import Attachment, EMailer, MailboxRole

logger = structlog.get_logger()

# Properties that are passed positionally and must not be read from ``opts``.
_REQUIRED_KEYS = frozenset({"id", "threadId", "thread_id", "mailboxIds", "mailbox_ids"})

_ISO_DATE_TIME = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


def _unknown_mailers() -> list[EMailer]:
    return [EMailer.unknown()]


class Message(BaseModel):
    """A JMAP message.

    ``id``, ``thread_id`` and a non-empty ``mailbox_ids`` are mandatory and
    checked, in that order, before anything else is built.  Every other
    property is optional and falls back to a fixed default when absent::

        message = Message(client, "m1", "t1", ["inbox"], {"subject": "Hi"})
        message.to        # [EMailer.unknown()]
        message.size      # 0

    Instances are immutable.  The mutation methods (:meth:`move`,
    :meth:`destroy`, :meth:`move_to_mailbox_with_role`) act on the server
    through the client the message was built with and leave the local object
    untouched; re-fetch the message to observe the new state.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    thread_id: str
    mailbox_ids: list[str]
    in_reply_to_message_id: str | None = None
    is_unread: bool = False
    is_flagged: bool = False
    is_answered: bool = False
    is_draft: bool = False
    has_attachment: bool = False
    headers: dict[str, str] = Field(default_factory=dict)
    from_: EMailer = Field(default_factory=EMailer.unknown, alias="from")
    to: list[EMailer] = Field(default_factory=_unknown_mailers)
    cc: list[EMailer] = Field(default_factory=_unknown_mailers)
    bcc: list[EMailer] = Field(default_factory=_unknown_mailers)
    reply_to: EMailer = Field(default_factory=EMailer.unknown)
    subject: str | None = None
    date: datetime | None = None
    size: int = 0
    preview: str | None = None
    text_body: str | None = None
    html_body: str | None = None
    attachments: list[Attachment] = Field(default_factory=list)

    _client: ClientInterface = PrivateAttr()

    def __init__(
        self,
        client: ClientInterface,
        id: str | None = None,
        thread_id: str | None = None,
        mailbox_ids: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
    ) -> None:
        if not id:
            raise InvalidArgumentError("id must be defined")
        if not thread_id:
            raise InvalidArgumentError("thread_id must be defined")
        if mailbox_ids is None:
            raise InvalidArgumentError("mailbox_ids must be defined")
        if not isinstance(mailbox_ids, Sequence) or isinstance(mailbox_ids, (str, bytes)):
            raise InvalidArgumentError("mailbox_ids must be a sequence")
        if len(mailbox_ids) == 0:
            raise InvalidArgumentError("mailbox_ids must contain at least one mailbox")

        fields = self._normalize_opts(client, opts)
        try:
            super().__init__(id=id, thread_id=thread_id, mailbox_ids=list(mailbox_ids), **fields)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid message {id}: {exc}") from exc

        self._client = client

    @staticmethod
    def _normalize_opts(client: ClientInterface, opts: Mapping[str, Any] | None) -> dict[str, Any]:
        """Drop absent values from *opts* and build attachments against *client*."""
        fields = {
            key: value
            for key, value in (opts or {}).items()
            if value is not None and key not in _REQUIRED_KEYS
        }

        attachments = fields.pop("attachments", None)
        if attachments is not None:
            if not isinstance(attachments, Sequence) or isinstance(attachments, (str, bytes)):
                raise InvalidArgumentError("attachments must be a sequence")
            fields["attachments"] = [_build_attachment(client, item) for item in attachments]

        return fields

    @field_validator("date", mode="before")
    @classmethod
    def _parse_iso_date(cls, value: Any) -> Any:
        if value is None or isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not _ISO_DATE_TIME.match(value):
            raise ValueError(f"date must be an ISO-8601 date-time string, got {value!r}")
        return datetime.fromisoformat(value)

    @field_validator("date")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    # ------------------------------------------------------------------
    # Construction from wire JSON
    # ------------------------------------------------------------------

    @classmethod
    def from_json_object(cls, client: ClientInterface, obj: Mapping[str, Any] | None) -> Message:
        """Build a message from a flat JMAP ``Message`` object."""
        if obj is None:
            raise InvalidArgumentError("obj must be defined")

        return cls(client, obj.get("id"), obj.get("threadId"), obj.get("mailboxIds"), obj)

    @property
    def client(self) -> ClientInterface:
        return self._client

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def move(self, mailbox_ids: Sequence[str]) -> Awaitable[Any]:
        """Move this message to *mailbox_ids*, replacing its current mailboxes."""
        return self._client.move_message(self.id, mailbox_ids)

    def destroy(self) -> Awaitable[Any]:
        """Permanently delete this message on the server."""
        return self._client.destroy_message(self.id)

    def move_to_mailbox_with_role(self, role: MailboxRole | str) -> Awaitable[Any]:
        """Move this message to the mailbox having *role*.

        *role* is a :class:`MailboxRole` or its string form.  An unknown role
        raises :class:`InvalidArgumentError` immediately, before the client is
        contacted.  Otherwise the returned awaitable looks the mailbox up and
        then moves the message to it alone.  A failed lookup or move is raised
        as-is; when the move fails after a successful lookup the message stays
        where it was.
        """
        resolved = MailboxRole.from_string(role)
        if resolved is MailboxRole.UNKNOWN:
            raise InvalidArgumentError(f"unknown role: {role!r}")

        return self._move_to_role(resolved)

    async def _move_to_role(self, role: MailboxRole) -> Any:
        mailbox = await self._client.get_mailbox_with_role(role)
        logger.debug(
            "mailbox_role_resolved",
            message_id=self.id,
            role=str(role),
            mailbox_id=mailbox.id,
        )
        return await self.move([mailbox.id])


def _build_attachment(client: ClientInterface, item: Any) -> Attachment:
    if isinstance(item, Attachment):
        return item
    if not isinstance(item, Mapping):
        raise InvalidArgumentError(f"Invalid attachment: {item!r}")
    return Attachment.from_blob_id(client, item.get("blobId") or item.get("blob_id"))
