from .either import (
    Either,
    Left,
    Right,
    left,
    right,
    of,
    attempt,
    from_async,
)
from .errors import InvalidValueError
from .logger import ConsoleLogger, log_left, log_right
