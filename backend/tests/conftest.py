"""Shared test fixtures."""

from __future__ import annotations

import pytest

from wishtree.engine.silhouette import BoxSilhouette, RoundedTieredSilhouette, TieredSilhouette
from wishtree.models.message import Message
from wishtree.storage import MemoryMessageStore


class BrokenSource:
    """Message collaborator whose backing store is down."""

    def list_messages(self) -> list[Message]:
        raise ConnectionError("store unavailable")


class RecordingEffect:
    def __init__(self) -> None:
        self.requests = []

    def burst(self, request) -> None:
        self.requests.append(request)


class ExplodingEffect:
    def burst(self, request) -> None:
        raise RuntimeError("confetti library not loaded")


@pytest.fixture
def tree() -> TieredSilhouette:
    return TieredSilhouette()


@pytest.fixture
def rounded_tree() -> RoundedTieredSilhouette:
    return RoundedTieredSilhouette()


@pytest.fixture
def photo_box() -> BoxSilhouette:
    return BoxSilhouette()


@pytest.fixture(params=["triangular", "rounded", "box"])
def any_silhouette(request):
    return {
        "triangular": TieredSilhouette(),
        "rounded": RoundedTieredSilhouette(),
        "box": BoxSilhouette(),
    }[request.param]


@pytest.fixture
def messages() -> list[Message]:
    return MemoryMessageStore().list_messages()


@pytest.fixture
def broken_source() -> BrokenSource:
    return BrokenSource()


@pytest.fixture
def recording_effect() -> RecordingEffect:
    return RecordingEffect()


@pytest.fixture
def exploding_effect() -> ExplodingEffect:
    return ExplodingEffect()
