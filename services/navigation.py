"""Explicit navigation stack of screen identifiers.

The router renders whatever is on top. Screens leave by name (`pop_to`)
rather than by counting levels, and pop listeners are told about every
screen removed so they can release per-screen resources.
"""
from __future__ import annotations
import logging
from typing import Callable, List

from domain.models import AppState, Screen

logger = logging.getLogger(__name__)

PopListener = Callable[[Screen], None]


class NavigationError(Exception):
    pass


class NavigationStack:
    def __init__(self, root: Screen = Screen.LOGIN):
        self._screens: List[Screen] = [root]
        self._listeners: List[PopListener] = []

    @property
    def screens(self) -> List[Screen]:
        return list(self._screens)

    @property
    def top(self) -> Screen:
        return self._screens[-1]

    @property
    def depth(self) -> int:
        return len(self._screens)

    def add_pop_listener(self, listener: PopListener):
        self._listeners.append(listener)

    def push(self, screen: Screen):
        logger.debug("push %s onto %s", screen.value, [s.value for s in self._screens])
        self._screens.append(screen)

    def pop(self, count: int = 1) -> List[Screen]:
        """Remove the top `count` screens. The root always stays."""
        if count < 0:
            raise NavigationError("count must be non-negative")
        if count >= len(self._screens):
            raise NavigationError(
                f"cannot pop {count} of {len(self._screens)} screens; the root must remain")
        removed = []
        for _ in range(count):
            screen = self._screens.pop()
            removed.append(screen)
            self._notify(screen)
        return removed

    def pop_to(self, target: Screen) -> List[Screen]:
        """Pop until `target` is on top (the nearest occurrence)."""
        if target not in self._screens:
            raise NavigationError(f"{target.value} is not on the navigation stack")
        idx = len(self._screens) - 1 - self._screens[::-1].index(target)
        return self.pop(len(self._screens) - 1 - idx)

    def reset(self, root: Screen):
        while len(self._screens) > 1:
            self._notify(self._screens.pop())
        old_root = self._screens[0]
        if old_root != root:
            self._screens[0] = root
            self._notify(old_root)

    def _notify(self, screen: Screen):
        for listener in self._listeners:
            listener(screen)


def entry_screen(app_state: AppState) -> Screen:
    # Both branches open the login screen, matching the shipped app.
    if app_state.is_logged_out:
        return Screen.LOGIN
    return Screen.LOGIN
