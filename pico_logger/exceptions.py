"""Errors raised by the logger"""


class PicoLoggerError(Exception):
    pass


class StoreAllocationError(PicoLoggerError, MemoryError):
    """The log store could not grow or copy an entry; nothing was appended"""
