"""Enable flag and minimum severity consulted before every log call"""

from pico_logger.models import Level, coerce_level


class LevelGate:

    def __init__(self, enabled=True, min_level=Level.INFO):
        self.enabled = enabled
        self.min_level = min_level

    def set_enabled(self, enabled):
        self.enabled = bool(enabled)

    def set_min_level(self, level):
        """Accepts Level members, level names and numbers; anything else raises at once"""

        self.min_level = coerce_level(level)

    def allows(self, level):
        """Whether a record at this level should be rendered at all"""

        return self.enabled and level >= self.min_level
