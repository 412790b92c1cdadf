"""Client: a ClientInterface speaking JMAP method calls over a Transport."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from .config import ClientConfig
from .errors import InvalidArgumentError, JmapError, MailboxNotFoundError, MethodError, SetError
from .interface import ClientInterface
from .message import Message
from .models import Mailbox, MailboxRole
from .transport import HttpxTransport, Transport

logger = structlog.get_logger()

CLIENT_ID = "#0"


class Client(ClientInterface):
    """JMAP client issuing one method call per request.

    The client keeps no state besides its configuration: mailbox lists are
    fetched on every call and failures are never retried.
    """

    def __init__(self, transport: Transport, config: ClientConfig) -> None:
        self._transport = transport
        self._config = config

    @classmethod
    def from_config(cls, config: ClientConfig) -> Client:
        """Build a client over an :class:`HttpxTransport` honouring *config*.

        The transport still has to be started before the first call.
        """
        return cls(HttpxTransport.from_config(config), config)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def download_url(self) -> str | None:  # type: ignore[override]
        return self._config.download_url

    # ------------------------------------------------------------------
    # Mailboxes
    # ------------------------------------------------------------------

    async def get_mailboxes(self, options: dict[str, Any] | None = None) -> list[Mailbox]:
        """Fetch all mailboxes of the account."""
        response = await self._invoke("getMailboxes", options or {}, "mailboxes")
        return [Mailbox.from_json_object(item) for item in response.get("list", [])]

    async def get_mailbox_with_role(self, role: MailboxRole | str) -> Mailbox:
        """Return the first mailbox whose role is *role*.

        Raises :class:`MailboxNotFoundError` when the account has none.
        """
        resolved = MailboxRole.from_string(role)
        if resolved is MailboxRole.UNKNOWN:
            raise InvalidArgumentError(f"unknown role: {role!r}")

        for mailbox in await self.get_mailboxes():
            if mailbox.role is resolved:
                return mailbox

        raise MailboxNotFoundError(str(resolved))

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    async def get_messages(
        self,
        ids: Sequence[str],
        properties: Sequence[str] | None = None,
    ) -> list[Message]:
        """Fetch the messages identified by *ids*."""
        args: dict[str, Any] = {"ids": list(ids)}
        if properties is not None:
            args["properties"] = list(properties)

        response = await self._invoke("getMessages", args, "messages")
        return [Message.from_json_object(self, item) for item in response.get("list", [])]

    async def move_message(self, id: str, mailbox_ids: Sequence[str]) -> None:
        response = await self._invoke(
            "setMessages",
            {"update": {id: {"mailboxIds": list(mailbox_ids)}}},
            "messagesSet",
        )
        not_updated = response.get("notUpdated") or {}
        if id in not_updated:
            raise SetError(id, not_updated[id])
        logger.info("message_moved", message_id=id, mailbox_ids=list(mailbox_ids))

    async def destroy_message(self, id: str) -> None:
        response = await self._invoke("setMessages", {"destroy": [id]}, "messagesSet")
        not_destroyed = response.get("notDestroyed") or {}
        if id in not_destroyed:
            raise SetError(id, not_destroyed[id])
        logger.info("message_destroyed", message_id=id)

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._config.auth_token is not None:
            headers["Authorization"] = self._config.auth_token.get_secret_value()
        return headers

    async def _invoke(self, method: str, args: dict[str, Any], expected: str) -> dict[str, Any]:
        """Send a single method call and return the arguments of its response."""
        logger.debug("jmap_request", method=method)
        data = await self._transport.post(
            self._config.api_url,
            self._headers(),
            [[method, args, CLIENT_ID]],
        )

        if not isinstance(data, list) or not data:
            raise JmapError(f"Malformed response to {method}")

        entry = data[0]
        if (
            not isinstance(entry, (list, tuple))
            or len(entry) < 2
            or not isinstance(entry[0], str)
            or not isinstance(entry[1], dict)
        ):
            raise JmapError(f"Malformed response to {method}: {entry!r}")

        name, response = entry[0], entry[1]
        if name == "error":
            raise MethodError(response.get("type", "unknown"), response.get("description"))
        if name != expected:
            raise JmapError(f"Unexpected response {name!r} to {method}, expected {expected!r}")

        return response
