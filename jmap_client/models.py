"""Value objects of the JMAP data model: mailers, attachments and mailboxes."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .interface import ClientInterface

UNKNOWN_NAME = "@"
UNKNOWN_EMAIL = "none"


class EMailer(BaseModel):
    """A name/email pair as found in the ``from``/``to``/``cc`` properties.

    Both fields are optional: a missing value falls back to the value of
    :meth:`unknown`, so ``EMailer()`` is the unknown mailer itself.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=UNKNOWN_NAME, description="Display name")
    email: str = Field(default=UNKNOWN_EMAIL, description="Email address")

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> Any:
        return UNKNOWN_NAME if value is None else value

    @field_validator("email", mode="before")
    @classmethod
    def _default_email(cls, value: Any) -> Any:
        return UNKNOWN_EMAIL if value is None else value

    @classmethod
    def unknown(cls) -> EMailer:
        """Return the shared placeholder used when a mailer is not known."""
        return _UNKNOWN_MAILER

    @classmethod
    def from_json_object(cls, obj: dict[str, Any] | None) -> EMailer:
        if obj is None:
            return cls.unknown()
        try:
            return cls.model_validate(obj)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid mailer: {exc}") from exc

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


_UNKNOWN_MAILER = EMailer()


class Attachment(BaseModel):
    """A blob attached to a message, with its resolved download URL."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    blob_id: str = Field(min_length=1, description="Identifier of the attachment blob")
    download_url: str = Field(default="", description="Download URL built from the client's template")

    @classmethod
    def from_blob_id(cls, client: ClientInterface, blob_id: str | None) -> Attachment:
        """Build an attachment, resolving its URL from ``client.download_url``.

        The ``{blobId}`` placeholder of the template is replaced by *blob_id*.
        A client without a template yields an empty URL.
        """
        if not blob_id:
            raise InvalidArgumentError("blob_id must be defined")

        template = client.download_url
        download_url = template.replace("{blobId}", blob_id) if template else ""
        return cls(blob_id=blob_id, download_url=download_url)


class MailboxRole(str, Enum):
    """Well-known mailbox roles. Unrecognised roles map to ``UNKNOWN``."""

    INBOX = "inbox"
    ARCHIVE = "archive"
    DRAFTS = "drafts"
    OUTBOX = "outbox"
    SENT = "sent"
    TRASH = "trash"
    SPAM = "spam"
    TEMPLATES = "templates"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> MailboxRole:
        return cls.UNKNOWN

    @classmethod
    def from_string(cls, value: str | None) -> MailboxRole:
        """Map a role name to its member, ignoring case and surrounding whitespace."""
        if isinstance(value, str):
            value = value.strip().lower()
        return cls(value)


class Mailbox(BaseModel):
    """A mailbox as returned by ``getMailboxes``."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    parent_id: str | None = None
    role: MailboxRole = MailboxRole.UNKNOWN
    must_be_only_mailbox: bool = False
    may_add_messages: bool = False
    may_remove_messages: bool = False
    may_create_child: bool = False
    may_rename_mailbox: bool = False
    may_delete_mailbox: bool = False
    total_messages: int = 0
    unread_messages: int = 0
    total_threads: int = 0
    unread_threads: int = 0

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, value: Any) -> MailboxRole:
        return MailboxRole.from_string(value)

    @classmethod
    def from_json_object(cls, obj: dict[str, Any] | None) -> Mailbox:
        if obj is None:
            raise InvalidArgumentError("obj must be defined")
        try:
            return cls.model_validate(obj)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid mailbox: {exc}") from exc
