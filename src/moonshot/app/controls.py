"""Keyboard bindings for the four flight actions (plus reset)."""

from __future__ import annotations

from enum import Enum


class Action(Enum):
    TOGGLE_THRUST = "toggle_thrust"
    ROTATE_NEGATIVE = "rotate_negative"
    ROTATE_POSITIVE = "rotate_positive"
    STOP_ROTATION = "stop_rotation"
    RESET = "reset"


KEY_BINDINGS: dict[str, Action] = {
    " ": Action.TOGGLE_THRUST,
    "a": Action.ROTATE_NEGATIVE,
    "d": Action.ROTATE_POSITIVE,
    "s": Action.STOP_ROTATION,
    "r": Action.RESET,
}

HELP_TEXT = "Space: thrust on/off | A: turn left | D: turn right | S: stop turning | R: restart"


def action_for_key(text: str) -> Action | None:
    if not text:
        return None
    return KEY_BINDINGS.get(text.lower())
