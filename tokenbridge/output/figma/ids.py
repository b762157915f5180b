"""Temporary ids for Figma create requests."""

from loguru import logger


class IdCounter:
    """Monotonic source of temporary ids such as ``temp_col_1``.

    One counter belongs to one transform call. Pass the same counter to
    several calls to continue numbering, or ``reset()`` it between calls for
    reproducible ids.
    """

    def __init__(self, start: int = 0):
        self._start = start
        self._value = start

    @property
    def value(self) -> int:
        return self._value

    def next_id(self, prefix: str = "temp") -> str:
        self._value += 1
        temp_id = f"{prefix}_{self._value}"
        logger.debug(f"Allocated temporary id {temp_id}")
        return temp_id

    def reset(self) -> None:
        self._value = self._start
