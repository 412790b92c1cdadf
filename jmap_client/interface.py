"""ClientInterface: the capabilities a Message needs from its client."""

from __future__ import annotations

import abc
from collections.abc import Sequence

from .models import Mailbox, MailboxRole


class ClientInterface(abc.ABC):
    """Abstract contract between the data model and a JMAP client.

    :class:`~jmap_client.message.Message` and
    :class:`~jmap_client.models.Attachment` only ever talk to their client
    through this surface, so any implementation (the HTTP-backed
    :class:`~jmap_client.client.Client`, a test double, ...) can be injected.
    Errors raised by an implementation are propagated to callers unchanged.
    """

    download_url: str | None = None
    """URL template for blob downloads, containing a ``{blobId}`` placeholder."""

    @abc.abstractmethod
    async def move_message(self, id: str, mailbox_ids: Sequence[str]) -> None:
        """Replace the mailboxes of message *id* with *mailbox_ids*."""
        ...

    @abc.abstractmethod
    async def destroy_message(self, id: str) -> None:
        """Permanently delete message *id*."""
        ...

    @abc.abstractmethod
    async def get_mailbox_with_role(self, role: MailboxRole | str) -> Mailbox:
        """Return the mailbox having *role*.

        Implementations raise when no such mailbox exists.
        """
        ...
