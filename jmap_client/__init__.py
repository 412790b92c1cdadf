"""JMAP client data model.

Public API re-exported here for convenience::

    from jmap_client import Client, HttpxTransport, Message, MailboxRole
"""

from .client import Client
from .config import ClientConfig
from .errors import (
    InvalidArgumentError,
    JmapError,
    MailboxNotFoundError,
    MethodError,
    SetError,
)
from .interface import ClientInterface
from .logging import setup_logging
from .message import Message
from .models import Attachment, EMailer, Mailbox, MailboxRole
from .transport import HttpxTransport, Transport

__all__ = [
    "Attachment",
    "Client",
    "ClientConfig",
    "ClientInterface",
    "EMailer",
    "HttpxTransport",
    "InvalidArgumentError",
    "JmapError",
    "Mailbox",
    "MailboxNotFoundError",
    "MailboxRole",
    "Message",
    "MethodError",
    "SetError",
    "Transport",
    "setup_logging",
]
