"""Queue token dispenser that limits how many tokens are live at once."""

from __future__ import annotations

from .text import MutableString

DEFAULT_MAX_LIVE_TOKENS = 5
DEFAULT_AVERAGE_PROCESSING_TIME = 3.0


def _signed(number: int) -> str:
    buffer = MutableString()
    buffer.set_number(number)
    return str(buffer)


class TokenMachine:
    """Issues numbered tokens and tracks how many are waiting for service."""

    def __init__(
        self,
        max_live_tokens: int = DEFAULT_MAX_LIVE_TOKENS,
        average_processing_time: float = DEFAULT_AVERAGE_PROCESSING_TIME,
    ) -> None:
        if max_live_tokens < 0:
            raise ValueError("max_live_tokens cannot be negative")
        self._max_live_tokens = max_live_tokens
        self._average_processing_time = average_processing_time
        self._issued = 0
        self._active = 0

    def next_token(self) -> str:
        """Issue a token and describe it, or explain that the queue is full."""
        if self._active >= self._max_live_tokens:
            return (
                "We are sorry. There can't be more than "
                f"{_signed(self._max_live_tokens)}"
                " tokens in system for service. "
                "Please wait for some clients to get serviced"
            )
        self._issued += 1
        wait = int(self._average_processing_time * self._active)
        message = (
            f"Token Id: {_signed(self._issued)}"
            f"\nPerson before you in Line are: {self._active}"
            f"\nExpected Waiting Time: {_signed(wait)} minutes"
        )
        self._active += 1
        return message

    def active_count(self) -> int:
        return self._active

    def person_serviced(self) -> None:
        if self._active > 0:
            self._active -= 1

    def serviced_count(self) -> int:
        return self._issued - self._active

    def reset(self) -> None:
        self._issued = 0
        self._active = 0