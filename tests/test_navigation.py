import pytest

from domain.models import AppState, Screen
from services import session as sess
from services.navigation import NavigationError, NavigationStack, entry_screen


def test_push_and_pop():
    nav = NavigationStack()
    nav.push(Screen.PROJECT_LIST)
    nav.push(Screen.ADD_PROJECT)
    assert nav.top == Screen.ADD_PROJECT
    assert nav.pop() == [Screen.ADD_PROJECT]
    assert nav.screens == [Screen.LOGIN, Screen.PROJECT_LIST]


def test_pop_to_named_screen():
    nav = NavigationStack()
    nav.push(Screen.FORGOT_PASSWORD)
    nav.push(Screen.CHANGE_PASSWORD)
    removed = nav.pop_to(Screen.LOGIN)
    assert removed == [Screen.CHANGE_PASSWORD, Screen.FORGOT_PASSWORD]
    assert nav.screens == [Screen.LOGIN]


def test_pop_to_missing_screen_raises():
    nav = NavigationStack()
    with pytest.raises(NavigationError):
        nav.pop_to(Screen.MAP_SELECTION)


def test_root_cannot_be_popped():
    nav = NavigationStack()
    with pytest.raises(NavigationError):
        nav.pop()


def test_pop_listeners_see_each_removed_screen():
    seen = []
    nav = NavigationStack()
    nav.add_pop_listener(seen.append)
    nav.push(Screen.PROJECT_LIST)
    nav.push(Screen.ADD_PROJECT)
    nav.push(Screen.MAP_SELECTION)
    nav.pop_to(Screen.PROJECT_LIST)
    assert seen == [Screen.MAP_SELECTION, Screen.ADD_PROJECT]


def test_reset_replaces_root():
    seen = []
    nav = NavigationStack(Screen.PROJECT_LIST)
    nav.add_pop_listener(seen.append)
    nav.push(Screen.ADD_PROJECT)
    nav.reset(Screen.LOGIN)
    assert nav.screens == [Screen.LOGIN]
    assert seen == [Screen.ADD_PROJECT, Screen.PROJECT_LIST]


def test_entry_screen_is_login_either_way():
    assert entry_screen(AppState(is_logged_out=False)) == Screen.LOGIN
    assert entry_screen(AppState(is_logged_out=True)) == Screen.LOGIN


def test_app_state_is_single_instance():
    session = {}
    first = sess.get_app_state(session)
    first.is_logged_out = True
    assert sess.get_app_state(session) is first
    assert sess.get_app_state(session).is_logged_out


def test_leaving_forgot_password_cancels_cooldown_and_clears_fields():
    session = {}
    nav = sess.get_navigation(session)
    nav.push(Screen.FORGOT_PASSWORD)
    session[sess.widget_key(Screen.FORGOT_PASSWORD, "email")] = "grower@farm.io"
    session[sess.widget_key(Screen.LOGIN, "email")] = "grower@farm.io"
    reset = sess.get_reset_session(session)
    reset.email = "grower@farm.io"
    reset.send_code()
    timer = reset.timer

    nav.push(Screen.CHANGE_PASSWORD)
    nav.pop_to(Screen.LOGIN)

    assert not timer.active
    assert sess.RESET_KEY not in session
    assert sess.widget_key(Screen.FORGOT_PASSWORD, "email") not in session
    assert session[sess.widget_key(Screen.LOGIN, "email")] == "grower@farm.io"


def test_reentering_forgot_password_gets_fresh_session():
    session = {}
    nav = sess.get_navigation(session)
    nav.push(Screen.FORGOT_PASSWORD)
    first = sess.get_reset_session(session)
    nav.pop()
    nav.push(Screen.FORGOT_PASSWORD)
    assert sess.get_reset_session(session) is not first
