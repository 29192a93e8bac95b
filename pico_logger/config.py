"""Static configuration plus optional user settings from an env file"""

import os

from dotenv import load_dotenv
from platformdirs import user_log_dir
from pydantic import BaseModel, Field, field_validator

from pico_logger.models import Level, coerce_level


APP_NAME = "pico_logger"
INITIAL_CAPACITY = 16
MESSAGE_BUFFER_SIZE = 512
LINE_BUFFER_SIZE = 1024
STACK_DEPTH = 10
DUMP_WIDTH = 16
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

log_dir = user_log_dir(APP_NAME)
LOG_PATH = os.path.join(log_dir, f"{APP_NAME}.log")


class Settings(BaseModel):
    enabled: bool = True
    min_level: Level = Level.INFO
    initial_capacity: int = Field(default=INITIAL_CAPACITY, ge=1)
    message_buffer_size: int = Field(default=MESSAGE_BUFFER_SIZE, ge=2)
    line_buffer_size: int = Field(default=LINE_BUFFER_SIZE, ge=2)
    stack_depth: int = Field(default=STACK_DEPTH, ge=1)
    dump_width: int = Field(default=DUMP_WIDTH, ge=1)
    log_path: str = LOG_PATH

    @field_validator('min_level', mode='before')
    @classmethod
    def parse_level(cls, v):
        """Accept level names in any case as well as their numbers"""

        if isinstance(v, str):
            return coerce_level(v)
        return v


def load_settings(env_path=None):
    """
    Build settings from PICO_LOG_* variables;
    when env_path points to an existing file, load it into the environment first.
    """

    if env_path and os.path.exists(env_path):
        load_dotenv(env_path)

    values = {}
    if os.getenv("PICO_LOG_ENABLED"):
        values['enabled'] = os.getenv("PICO_LOG_ENABLED")
    if os.getenv("PICO_LOG_LEVEL"):
        values['min_level'] = os.getenv("PICO_LOG_LEVEL")
    if os.getenv("PICO_LOG_PATH"):
        values['log_path'] = os.getenv("PICO_LOG_PATH")
    if os.getenv("PICO_LOG_INITIAL_CAPACITY"):
        values['initial_capacity'] = os.getenv("PICO_LOG_INITIAL_CAPACITY")
    return Settings(**values)
