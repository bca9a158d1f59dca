import pytest

from whack.components.game_state import GameMode
from whack.constants import KEY_ENTER, KEY_ESCAPE
from whack.events.bus import EVENT_KEY_PRESS
from whack.events.game_events import Quit, ReturnToMenu, StartGame, Whack
from whack.systems.input import InputSystem, map_key
from whack.utils.game_state import current_mode, get_board

from tests.helpers import fresh_world


def test_menu_keys():
    assert map_key(GameMode.MENU, "q") == Quit()
    assert map_key(GameMode.MENU, "p") == StartGame()
    assert map_key(GameMode.MENU, "x") is None
    assert map_key(GameMode.MENU, KEY_ESCAPE) is None


@pytest.mark.parametrize("key,index", [("q", 0), ("w", 1), ("a", 2), ("s", 3)])
def test_playing_keys_2x2(key, index):
    assert map_key(GameMode.PLAYING, key, 2) == Whack(index)


@pytest.mark.parametrize(
    "key,index",
    [("q", 0), ("w", 1), ("e", 2), ("a", 3), ("s", 4), ("d", 5), ("z", 6), ("x", 7), ("c", 8)],
)
def test_playing_keys_3x3(key, index):
    assert map_key(GameMode.PLAYING, key, 3) == Whack(index)


def test_playing_escape_quits_and_other_keys_ignored():
    assert map_key(GameMode.PLAYING, KEY_ESCAPE) == Quit()
    assert map_key(GameMode.PLAYING, "p") is None
    assert map_key(GameMode.PLAYING, "e", 2) is None


@pytest.mark.parametrize("mode", [GameMode.WON, GameMode.LOST])
def test_end_screen_keys(mode):
    assert map_key(mode, KEY_ENTER) == ReturnToMenu()
    assert map_key(mode, "m") == ReturnToMenu()
    assert map_key(mode, "q") == Quit()
    assert map_key(mode, KEY_ESCAPE) == Quit()
    assert map_key(mode, "w") is None


def test_no_keys_after_exit():
    for key in ("q", "p", KEY_ESCAPE, KEY_ENTER):
        assert map_key(GameMode.EXITED, key) is None


def test_empty_key_maps_to_nothing():
    assert map_key(GameMode.MENU, None) is None
    assert map_key(GameMode.MENU, "") is None


def test_input_system_dispatches_key_press_from_bus():
    bus, world = fresh_world()
    InputSystem(world, bus)
    bus.emit(EVENT_KEY_PRESS, key="p")
    assert current_mode(world) == GameMode.PLAYING
    assert len(get_board(world).active_cells()) == 1


def test_input_system_ignores_unmapped_keys():
    bus, world = fresh_world()
    system = InputSystem(world, bus)
    assert system.handle_key("z") == []
    assert current_mode(world) == GameMode.MENU


def test_input_system_uses_board_size():
    bus, world = fresh_world(board_size=3, mode=GameMode.PLAYING)
    system = InputSystem(world, bus)
    applied = system.handle_key("c")
    assert applied[0] == Whack(8)
