"""Severity levels and the rendered form of a log record"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict


RESET = "\x1b[0m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"


class Level(IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2
    CRITICAL = 3


LEVEL_STYLES = {
    Level.INFO: ("INFO", BLUE),
    Level.WARNING: ("WARNING", YELLOW),
    Level.ERROR: ("ERROR", RED),
    Level.CRITICAL: ("CRITICAL", MAGENTA),
}
UNKNOWN_STYLE = ("UNKNOWN", RESET)


def coerce_level(value):
    """
    Level from a name in any case, a number or a Level.
    Numbers outside the known levels are kept as plain ints.
    """

    if isinstance(value, str):
        name = value.strip().upper()
        if name.isdigit():
            value = int(name)
        else:
            try:
                return Level[name]
            except KeyError as exc:
                raise ValueError(f"Unknown log level {value!r}") from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Log level must be a name or a number, not {value!r}")
    try:
        return Level(value)
    except ValueError:
        return value


def level_style(level):
    """Display name and color of a level; unknown values fall back to no color"""

    try:
        return LEVEL_STYLES[Level(level)]
    except ValueError:
        return UNKNOWN_STYLE


class RenderedMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    display: str
    plain: str
    truncated: bool = False
