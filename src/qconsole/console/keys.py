from __future__ import annotations

from enum import Enum


class Key(Enum):
    """
    Non-character keys the host can forward to the console.

    Values are Panda3D button event names so window events map directly
    (`Key("arrow_up")`). Only the arrows do anything; the rest are accepted and
    ignored.
    """

    UP = "arrow_up"
    DOWN = "arrow_down"
    LEFT = "arrow_left"
    RIGHT = "arrow_right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ESCAPE = "escape"
    OTHER = "other"


ARROW_KEYS: tuple[Key, ...] = (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT)
