"""Diagnostics of the logger itself"""

import sys
from collections import deque

from loguru import logger


diagnostics = deque(maxlen=1000)


def buffer_sink(message):
    diagnostics.append(message.strip())


# Only records of this package; sinks of the host application are left alone
logger.add(
    buffer_sink, format="{time:HH:mm:ss} | {level} | {message}", level="DEBUG", filter="pico_logger"
)
logger.add(sys.stderr, format="{level}: {message}", level="WARNING", filter="pico_logger")


__all__ = ["logger", "diagnostics"]
