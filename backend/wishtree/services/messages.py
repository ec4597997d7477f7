"""Message collaborators and the fetch-or-empty wrapper around them.

A collaborator is anything with ``list_messages()``. Failures never reach
the page: they are logged and turn into an empty list.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx
from pydantic import TypeAdapter

from wishtree.models.message import Message

logger = logging.getLogger(__name__)

_MESSAGE_LIST = TypeAdapter(list[Message])


class MessageSource(Protocol):
    def list_messages(self) -> list[Message]: ...


class HttpMessageSource:
    """Reads ``GET {base_url}/api/messages`` from another wish tree instance."""

    def __init__(self, base_url: str, client: httpx.Client | None = None, timeout: float = 5.0) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def list_messages(self) -> list[Message]:
        response = self._client.get(f"{self.base_url}/api/messages")
        response.raise_for_status()
        return _MESSAGE_LIST.validate_python(response.json())

    def close(self) -> None:
        self._client.close()


def fetch_messages(source: MessageSource) -> list[Message]:
    """Ordered messages from ``source``, or [] if anything goes wrong."""
    try:
        messages = list(source.list_messages())
    except Exception as e:
        logger.warning("Message fetch from %s failed: %s", type(source).__name__, e)
        return []
    logger.debug("Fetched %d messages", len(messages))
    return messages


class MessageSnapshot:
    """The message list as of the last page load.

    Clicks resolve against this list, so an ornament the page showed stays
    selectable even if the collaborator fails afterwards.
    """

    def __init__(self, source: MessageSource) -> None:
        self.source = source
        self._messages: list[Message] | None = None

    def refresh(self) -> list[Message]:
        self._messages = fetch_messages(self.source)
        return self._messages

    def current(self) -> list[Message]:
        if self._messages is None:
            return self.refresh()
        return self._messages
