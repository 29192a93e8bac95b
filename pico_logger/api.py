"""Logger context object plus module level functions bound to a process-wide default"""

import os
import sys

from pico_logger import tools
from pico_logger.config import Settings
from pico_logger.formatter import MessageFormatter
from pico_logger.gate import LevelGate
from pico_logger.log import logger
from pico_logger.models import Level
from pico_logger.store import LogStore


class PicoLogger:
    """
    Everything a log call needs: the gate, the formatter, the store and the timer.
    Display goes to the given stream, or to whatever sys.stdout is at the time of writing.
    """

    def __init__(self, settings=None, stream=None, formatter=None):
        self.stream = stream
        self.custom_formatter = formatter
        self.store = None
        self.configure(settings)

    def configure(self, settings=None):
        """Rebuild all state from settings, releasing previously stored entries"""

        if self.store is not None:
            self.store.clear()
        self.settings = settings or Settings()
        self.gate = LevelGate(self.settings.enabled, self.settings.min_level)
        self.store = LogStore(self.settings.initial_capacity)
        self.formatter = self.custom_formatter or MessageFormatter(
            self.settings.message_buffer_size, self.settings.line_buffer_size
        )
        self.timer = tools.PerformanceTimer()

    def close(self):
        self.store.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def output(self):
        return self.stream if self.stream is not None else sys.stdout

    def log(self, level, file, line, function, fmt, *args):
        """
        Display the record and keep its plain form in the store.
        Returns the rendered message, or None when the gate rejected it.
        """

        if not self.gate.allows(level):
            return None
        rendered = self.formatter.render(level, file, line, function, fmt, *args)
        self.output().write(f"{rendered.display}\n")
        self.store.append(rendered.plain)
        return rendered

    def log_at(self, level, frame, fmt, args):
        """Log with the source location taken from the given frame"""

        code = frame.f_code
        return self.log(level, os.path.basename(code.co_filename), frame.f_lineno, code.co_name, fmt, *args)

    def info(self, fmt, *args):
        return self.log_at(Level.INFO, sys._getframe(1), fmt, args)

    def warning(self, fmt, *args):
        return self.log_at(Level.WARNING, sys._getframe(1), fmt, args)

    def error(self, fmt, *args):
        return self.log_at(Level.ERROR, sys._getframe(1), fmt, args)

    def critical(self, fmt, *args):
        return self.log_at(Level.CRITICAL, sys._getframe(1), fmt, args)

    def set_logging_enabled(self, enabled):
        self.gate.set_enabled(enabled)

    def set_minimum_log_level(self, level):
        self.gate.set_min_level(level)

    def begin_performance_timer(self):
        self.timer.arm()

    def end_performance_timer(self, label):
        return self.report_performance(label, sys._getframe(1))

    def log_performance(self, message=None):
        """Without a message arm the timer, with one report the time elapsed since arming"""

        if message is None:
            self.timer.arm()
            return None
        return self.report_performance(message, sys._getframe(1))

    def report_performance(self, label, frame):
        elapsed = self.timer.elapsed()
        if elapsed is None:
            self.log_at(Level.ERROR, frame, "Start time not defined.", ())
            return None
        self.output().write(f"METRICS Function {label} took {elapsed:.9f} seconds to execute.\n")
        return elapsed

    def save_log_file(self, path=None):
        """
        Write all stored entries to path, or to the configured log path.
        Returns False when the file could not be written; the error is only reported.
        """

        if path is None:
            path = self.settings.log_path
            directory = os.path.dirname(path)
            try:
                if directory:
                    os.makedirs(directory, exist_ok=True)
            except OSError as exc:
                logger.warning("Cannot create log directory {}: {}", directory, exc)
        return self.store.flush_to_file(path)

    def print_stack_trace(self):
        tools.print_stack_trace(self.output(), sys._getframe(1), self.settings.stack_depth)

    def dump_memory(self, label, buffer, size=None):
        tools.dump_memory(self.output(), label, buffer, size, self.settings.dump_width)


_default = PicoLogger()


def get_default():
    return _default


def reset_default(settings=None):
    """Release the default logger's entries and start over with fresh state"""

    _default.configure(settings)
    return _default


# Bound methods of the default instance keep the caller's frame one level up
log = _default.log
info = _default.info
warning = _default.warning
error = _default.error
critical = _default.critical
set_logging_enabled = _default.set_logging_enabled
set_minimum_log_level = _default.set_minimum_log_level
begin_performance_timer = _default.begin_performance_timer
end_performance_timer = _default.end_performance_timer
log_performance = _default.log_performance
save_log_file = _default.save_log_file
print_stack_trace = _default.print_stack_trace
dump_memory = _default.dump_memory
