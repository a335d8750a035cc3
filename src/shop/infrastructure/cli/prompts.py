"""Line-based input helpers for the interactive menu.

Every prompt reads one line. Malformed numbers raise ``click.BadParameter``
so the calling action can report them and return to the menu.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TypeVar

import click

# Compared after trimming and lower-casing. "н" is the key under "y" on a
# Ukrainian layout.
AFFIRMATIVE_ANSWERS = frozenset({"y", "yes", "н", "так"})

E = TypeVar("E", bound=Enum)

# Plain ASCII digits with an optional sign; no underscores, no other scripts.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def ask(text: str) -> str:
    """Read one line; an empty line yields an empty string."""
    return click.prompt(text, default="", show_default=False, prompt_suffix=": ")


def ask_int(text: str, what: str) -> int:
    raw = ask(text)
    if not _INTEGER.fullmatch(raw.strip()):
        raise click.BadParameter(f"Invalid input: '{raw}' is not a valid {what}.")
    return int(raw.strip())


def ask_positive_int(text: str, what: str) -> int:
    value = ask_int(text, what)
    if value <= 0:
        raise click.BadParameter(f"Invalid {what}!")
    return value


def ask_choice(text: str, choices: type[E]) -> E | None:
    """Match a line against an Enum of menu codes; None if nothing matches."""
    raw = ask(text).strip()
    try:
        return choices(raw)
    except ValueError:
        return None


def is_affirmative(answer: str | None) -> bool:
    if answer is None:
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def confirm(text: str) -> bool:
    return is_affirmative(ask(text))
