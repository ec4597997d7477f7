"""Tests for selection state and the celebration burst."""

from __future__ import annotations

import pytest

from wishtree.models.message import Message
from wishtree.shell.scene import compose_scene
from wishtree.shell.selection import (
    BURST_COLORS,
    ClickEvent,
    DialogView,
    SelectionState,
    TreeShell,
    Viewport,
)


@pytest.fixture
def scene(tree, messages):
    return compose_scene(messages, tree)


def test_click_reveals_love_message_and_bursts(scene, recording_effect):
    shell = TreeShell(Viewport(1000, 800), effect=recording_effect)
    burst = shell.select_item(scene.star, ClickEvent(500, 200))

    assert shell.selected is not None
    assert shell.selected.id == 1
    assert shell.selected.text == "I love you"
    assert shell.dialog().title == "My Special Message"

    assert burst.origin_x == pytest.approx(0.5)
    assert burst.origin_y == pytest.approx(0.25)
    assert burst.colors == BURST_COLORS
    assert burst.particle_count == 40
    assert recording_effect.requests == [burst]


def test_select_is_idempotent(scene):
    shell = TreeShell(Viewport(800, 600))
    ornament = scene.ornaments[2]
    shell.select_item(ornament, ClickEvent(10, 10))
    shell.select_item(ornament, ClickEvent(10, 10))
    assert shell.selected == ornament.message


def test_last_selection_wins(scene):
    shell = TreeShell(Viewport(800, 600))
    shell.select_item(scene.ornaments[0], ClickEvent(10, 10))
    shell.select_item(scene.ornaments[1], ClickEvent(10, 10))
    assert shell.selected == scene.ornaments[1].message


def test_dismiss_always_clears(scene):
    shell = TreeShell(Viewport(800, 600))
    shell.dismiss()
    assert shell.selected is None
    shell.select_item(scene.ornaments[0], ClickEvent(10, 10))
    shell.dismiss()
    assert shell.selected is None
    assert shell.dialog() is None


def test_broken_effect_does_not_block_reveal(scene, exploding_effect):
    shell = TreeShell(Viewport(800, 600), effect=exploding_effect)
    burst = shell.select_item(scene.ornaments[0], ClickEvent(400, 300))
    assert shell.selected == scene.ornaments[0].message
    assert burst is not None


def test_item_without_message_is_ignored(tree, recording_effect):
    empty_scene = compose_scene([], tree)
    shell = TreeShell(Viewport(800, 600), effect=recording_effect)
    assert shell.select_item(empty_scene.star, ClickEvent(1, 1)) is None
    assert shell.selected is None
    assert recording_effect.requests == []


def test_shared_selection_state(scene):
    state = SelectionState()
    TreeShell(Viewport(800, 600), state).select_item(scene.ornaments[3], ClickEvent(0, 0))
    assert state.message == scene.ornaments[3].message
    TreeShell(Viewport(800, 600), state).dismiss()
    assert state.message is None


class TestViewport:
    def test_normalize(self):
        assert Viewport(200, 100).normalize(ClickEvent(50, 25)) == (0.25, 0.25)

    def test_clamps_outside_clicks(self):
        assert Viewport(200, 100).normalize(ClickEvent(-10, 5000)) == (0.0, 1.0)

    def test_degenerate_viewport_uses_centre(self):
        assert Viewport(0, 0).normalize(ClickEvent(10, 10)) == (0.5, 0.5)


class TestDialog:
    def test_wish(self):
        view = DialogView.for_message(Message(id=2, text="Merry Christmas and Happy New Year!"))
        assert view.title == "A Christmas Wish"
        assert view.icon == "\U0001f384"

    def test_love(self):
        view = DialogView.for_message(Message(id=9, text="The best gift is love."))
        assert view.title == "My Special Message"
        assert view.text == "The best gift is love."
