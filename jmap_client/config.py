"""Client configuration loaded from keyword arguments or environment variables.

Uses pydantic-settings so every field can be overridden with a ``JMAP_``
prefixed environment variable (``JMAP_API_URL``, ``JMAP_AUTH_TOKEN``, ...).
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class ClientConfig(BaseSettings):
    """Connection settings for a JMAP account."""

    model_config = {"env_prefix": "JMAP_"}

    api_url: str = Field(description="URL of the JMAP API endpoint method calls are POSTed to")
    download_url: str | None = Field(
        default=None,
        description="Blob download URL template containing a {blobId} placeholder",
    )
    auth_token: SecretStr | None = Field(
        default=None,
        description="Value sent in the Authorization header",
    )
    timeout_seconds: float = Field(default=30.0, description="HTTP request timeout")
