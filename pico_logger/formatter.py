"""Rendering of leveled messages for the terminal and for the log store"""

from collections.abc import Mapping
from datetime import datetime

from pico_logger.config import LINE_BUFFER_SIZE, MESSAGE_BUFFER_SIZE, TIME_FORMAT
from pico_logger.log import logger
from pico_logger.models import RESET, RenderedMessage, level_style


def truncate(text: str, limit: int) -> tuple[str, bool]:
    """Cut text to at most limit characters, telling whether anything was lost"""

    if len(text) > limit:
        return text[:limit], True
    return text, False


class MessageFormatter:
    """
    Produces two renderings of a record: a colored one for display
    and a plain one for storage.
    Buffer sizes count a terminating character, so the message body keeps
    at most message_buffer_size - 1 characters and the plain line line_buffer_size - 1.
    """

    def __init__(self, message_buffer_size=MESSAGE_BUFFER_SIZE,
                 line_buffer_size=LINE_BUFFER_SIZE, clock=datetime.now):
        self.message_buffer_size = message_buffer_size
        self.line_buffer_size = line_buffer_size
        self.clock = clock

    def timestamp(self):
        return self.clock().strftime(TIME_FORMAT)

    def render(self, level, file, line, function, fmt, *args) -> RenderedMessage:
        name, color = level_style(level)

        if len(args) == 1 and isinstance(args[0], Mapping):
            body = str(fmt) % args[0]
        elif args:
            body = str(fmt) % args
        else:
            body = str(fmt)
        body, body_cut = truncate(body, self.message_buffer_size - 1)

        stamp = self.timestamp()
        location = f"[{file}:{line}] {function}: {body}"
        plain, line_cut = truncate(f"[{stamp}] {name} {location}", self.line_buffer_size - 1)
        display = f"[{stamp}] {color}{name}{RESET} {location}"

        if body_cut or line_cut:
            logger.debug("Message from {}:{} truncated", file, line)
        return RenderedMessage(display=display, plain=plain, truncated=body_cut or line_cut)
