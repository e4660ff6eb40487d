from __future__ import annotations


class InvalidValueError(ValueError):
    """Raised when a guarded factory is handed ``None`` as a payload."""

    def __init__(self, side: str):
        super().__init__(f"{side} value cannot be None"); self.side = side
