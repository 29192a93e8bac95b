"""In-memory retention of rendered log lines"""

from pico_logger.config import INITIAL_CAPACITY
from pico_logger.exceptions import StoreAllocationError
from pico_logger.log import logger


class LogStore:
    """
    Append-only sequence of plain log lines.
    Backing slots grow geometrically (initial capacity, then doubling),
    so count never exceeds capacity and appends are amortized O(1).
    """

    def __init__(self, initial_capacity=INITIAL_CAPACITY):
        self.initial_capacity = initial_capacity
        self._slots = []
        self._count = 0

    @property
    def capacity(self):
        return len(self._slots)

    @property
    def count(self):
        return self._count

    def __len__(self):
        return self._count

    def __iter__(self):
        for idx in range(self._count):
            yield self._slots[idx]

    def entries(self):
        """Snapshot of stored lines in insertion order"""

        return tuple(self._slots[:self._count])

    def append(self, text):
        """
        Store a private copy of the text as the newest entry.
        Bytes are decoded as UTF-8; running out of memory leaves the store
        unchanged and raises StoreAllocationError.
        """

        try:
            if isinstance(text, (bytes, bytearray, memoryview)):
                entry = bytes(text).decode('utf-8', errors='replace')
            else:
                entry = str(text)
            if self._count == len(self._slots):
                self._grow()
        except MemoryError as exc:
            logger.critical("Failed to allocate memory for log entry number {}", self._count + 1)
            raise StoreAllocationError("Failed to allocate memory for log entries") from exc

        self._slots[self._count] = entry
        self._count += 1

    def _grow(self):
        old_capacity = len(self._slots)
        new_capacity = self.initial_capacity if old_capacity == 0 else old_capacity * 2
        self._slots.extend([None] * (new_capacity - old_capacity))
        logger.debug("Log store grown from {} to {} slots", old_capacity, new_capacity)

    def flush_to_file(self, path):
        """
        Overwrite the file with every entry, one per line, oldest first.
        The store keeps its content. Failures are reported, not raised.
        """

        try:
            with open(path, 'w', encoding='utf-8', newline='\n') as log_file:
                for entry in self:
                    log_file.write(f"{entry}\n")
        except OSError as exc:
            logger.error("Failed to open log file {}: {}", path, exc)
            return False
        logger.debug("Saved {} entries to {}", self._count, path)
        return True

    def clear(self):
        """Release all entries and backing slots"""

        self._slots = []
        self._count = 0
