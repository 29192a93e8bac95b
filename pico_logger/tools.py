"""Debugging aids: performance timer, stack trace and memory dump"""

import time
import traceback

from pico_logger.config import DUMP_WIDTH, STACK_DEPTH


class PerformanceTimer:
    """Holds a single start timestamp; reading it does not disarm the timer"""

    def __init__(self, clock=time.perf_counter_ns):
        self.clock = clock
        self.start = None

    @property
    def armed(self):
        return self.start is not None

    def arm(self):
        self.start = self.clock()

    def elapsed(self):
        """Seconds since arming, or None when the timer was never armed"""

        if self.start is None:
            return None
        return (self.clock() - self.start) / 1e9


def format_stack_trace(frame, depth=STACK_DEPTH):
    """Lines describing at most depth frames, starting from the given one outwards"""

    stack = traceback.extract_stack(frame, limit=depth)
    return [f"{entry.filename}:{entry.lineno} {entry.name}" for entry in reversed(stack)]


def print_stack_trace(stream, frame, depth=STACK_DEPTH):
    stream.write("\nStack trace:\n")
    for line in format_stack_trace(frame, depth):
        stream.write(f"{line}\n")


def format_memory(label, buffer, size=None, width=DUMP_WIDTH):
    """
    Hex representation of a bytes-like object, width bytes per line.
    size limits the dump to the first bytes of the buffer and is clamped to its length.
    """

    data = memoryview(buffer).tobytes()
    size = len(data) if size is None else max(0, min(size, len(data)))

    parts = [f"\nMemory dump ({label}):\n"]
    for idx in range(size):
        parts.append(f"{data[idx]:02x} ")
        if (idx + 1) % width == 0:
            parts.append("\n")
    if size % width != 0:
        parts.append("\n")
    return "".join(parts)


def dump_memory(stream, label, buffer, size=None, width=DUMP_WIDTH):
    stream.write(format_memory(label, buffer, size, width))
