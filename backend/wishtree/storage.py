"""In-process message store -- the default message collaborator."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from wishtree.models.message import Message

logger = logging.getLogger(__name__)

SEED_MESSAGES: tuple[str, ...] = (
    "I love you",
    "Merry Christmas and Happy New Year!",
    "May the magic of Christmas shine in your heart.",
    "Health, love, and success!",
    "Happy holidays and may all your wishes come true!",
    "A new year full of hope and dreams!",
    "Gratitude for all the beautiful moments.",
    "Believe in your dreams!",
    "The best gift is love.",
    "Smile, it's Christmas!",
    "Spread light wherever you go.",
    "Live each moment with joy and passion.",
)


class MessageStore(ABC):
    @abstractmethod
    def list_messages(self) -> list[Message]:
        """All messages in creation order."""

    @abstractmethod
    def create_message(self, text: str) -> Message: ...


class MemoryMessageStore(MessageStore):
    """List-backed store, ids assigned sequentially from 1."""

    def __init__(self, seed: tuple[str, ...] | list[str] = SEED_MESSAGES) -> None:
        self._messages: list[Message] = []
        self._next_id = 1
        for text in seed:
            self.create_message(text)
        logger.debug("Seeded %d messages", len(self._messages))

    def list_messages(self) -> list[Message]:
        return list(self._messages)

    def create_message(self, text: str) -> Message:
        message = Message(id=self._next_id, text=text)
        self._messages.append(message)
        self._next_id += 1
        return message
