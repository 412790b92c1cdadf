"""Shared test fixtures for the jmap_client test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from jmap_client.config import ClientConfig
from jmap_client.interface import ClientInterface
from jmap_client.transport import Transport

DOWNLOAD_URL = "https://jmap.org/dl/{blobId}"
API_URL = "https://jmap.org/api"


@pytest.fixture
def mock_client() -> MagicMock:
    """A ClientInterface double whose async methods are AsyncMocks."""
    client = MagicMock(spec=ClientInterface)
    client.download_url = DOWNLOAD_URL
    return client


@pytest.fixture
def mock_transport() -> AsyncMock:
    transport = AsyncMock(spec=Transport)
    transport.post = AsyncMock()
    return transport


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        api_url=API_URL,
        download_url=DOWNLOAD_URL,
        auth_token="secret-token",
    )


@pytest.fixture
def message_json() -> dict[str, Any]:
    return {
        "id": "fm2u12",
        "inReplyToMessageId": "fm2u11",
        "threadId": "fed75e7fb4f512aa",
        "mailboxIds": ["mailbox2"],
        "isUnread": True,
        "isFlagged": True,
        "isAnswered": True,
        "isDraft": True,
        "hasAttachment": True,
        "headers": {"To": "To"},
        "from": {"name": "Jane Doe", "email": "janedoe@open-paas.org"},
        "to": [
            {"name": "James Connor", "email": "jamesconnorwork@open-paas.org"},
            {"name": "Joe Bloggs", "email": "joebloggs@open-paas.org"},
        ],
        "replyTo": {"name": "Jane Doe", "email": "janedoe@open-paas.org"},
        "subject": "Re: I need the swallow velocity report ASAP",
        "date": "2014-07-24T11:32:15Z",
        "size": 100,
        "preview": "It's on its way. Jane.",
        "textBody": "It's on its way. Jane. Keep on rocking !",
        "htmlBody": "<html>It's on its way. Jane. <b>Keep on rocking !</b></html>",
        "attachments": [{"blobId": "1234"}],
    }


@pytest.fixture
def mailboxes_json() -> list[dict[str, Any]]:
    return [
        {
            "id": "mailbox1",
            "name": "Inbox",
            "parentId": None,
            "role": "inbox",
            "mustBeOnlyMailbox": False,
            "mayAddMessages": True,
            "mayRemoveMessages": True,
            "mayCreateChild": False,
            "mayRenameMailbox": True,
            "mayDeleteMailbox": False,
            "totalMessages": 1424,
            "unreadMessages": 3,
            "totalThreads": 1213,
            "unreadThreads": 2,
        },
        {
            "id": "mailbox2",
            "name": "Sent",
            "parentId": None,
            "role": "sent",
            "totalMessages": 41,
            "unreadMessages": 0,
            "totalThreads": 32,
            "unreadThreads": 2,
        },
        {
            "id": "mailbox3",
            "name": "Trash",
            "parentId": None,
            "role": "trash",
            "mustBeOnlyMailbox": True,
        },
        {
            "id": "mailbox4",
            "name": "Awaiting Reply",
            "parentId": "mailbox2",
            "role": None,
            "mayCreateChild": True,
            "mayDeleteMailbox": True,
        },
    ]
