from minex3.asset_tracking import ResourceHandles
from minex3.screens import ScreenFlow
from minex3.states import GameStates, Menu, Screen


def flow(screen=Screen.GAMEPLAY, menu=Menu.NONE):
    states = GameStates()
    states.screen.current = screen
    states.menu.current = menu
    return ScreenFlow(states, ResourceHandles(), level_factory=lambda: "level"), states


def test_pause_key_opens_pause_menu():
    f, states = flow()
    f.handle_key("Escape")
    assert states.pause.pending is True
    assert states.menu.pending is Menu.PAUSE
    assert f.pause_overlay


def test_keys_ignored_outside_gameplay():
    f, states = flow(screen=Screen.TITLE)
    f.handle_key("p")
    assert states.menu.pending is None and states.pause.pending is None


def test_p_closes_menu_escape_does_not():
    f, states = flow(menu=Menu.PAUSE)
    f.handle_key("escape")
    assert states.menu.pending is None
    f.handle_key("p")
    assert states.menu.pending is Menu.NONE


def test_loading_moves_to_gameplay_when_done():
    f, states = flow(screen=Screen.LOADING)
    f.resources.load_resource("k", ["a"], lambda: 1)
    f.update()
    assert states.screen.pending is None
    f.resources.poll(lambda p: True)
    f.update()
    assert states.screen.pending is Screen.GAMEPLAY


def test_enter_gameplay_spawns_level_and_exit_clears():
    f, states = flow(screen=Screen.LOADING)
    f.on_transition("screen", Screen.LOADING, Screen.GAMEPLAY)
    assert f.level == "level"
    f.on_transition("screen", Screen.GAMEPLAY, Screen.TITLE)
    assert f.level is None
    assert states.menu.pending is Menu.MAIN
    assert states.pause.pending is False


def test_menu_none_unpauses_in_gameplay():
    f, states = flow(menu=Menu.PAUSE)
    f.pause_overlay = True
    f.on_transition("menu", Menu.PAUSE, Menu.NONE)
    assert states.pause.pending is False
    f.on_transition("pause", True, False)
    assert not f.pause_overlay