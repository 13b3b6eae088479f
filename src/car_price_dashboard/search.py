# This file implements the debounce used by the car model search box.
# Streamlit text inputs submit on Enter or blur, not per keystroke, so the delay applies per submitted term.
# A newer submission abandons the running script, so a superseded term sleeping here never reaches the backend.

from __future__ import annotations

import time
from collections.abc import Callable

_UNSET = object()


class SearchDebouncer:
    def __init__(
        self,
        *,
        delay_seconds: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self._last_term: object = _UNSET

    @property
    def last_term(self) -> str | None:
        return None if self._last_term is _UNSET else str(self._last_term)

    def needs_fetch(self, term: str) -> bool:
        return term != self._last_term

    def settle(self, term: str) -> bool:
        """Wait out the debounce window and report whether `term` needs a fresh fetch.

        The initial catalogue load is not delayed. The term only counts as fetched
        once `record` is called, so a run abandoned mid-fetch is retried.
        """

        if not self.needs_fetch(term):
            return False
        if self._last_term is not _UNSET and self.delay_seconds > 0:
            self._sleep(self.delay_seconds)
        return True

    def record(self, term: str) -> None:
        self._last_term = term
