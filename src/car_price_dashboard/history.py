# This file keeps the rolling list of predictions shown on the prediction page.
# Only the most recent entries are kept; the oldest are dropped first.

from __future__ import annotations

from dataclasses import asdict, dataclass

import pandas as pd

HISTORY_COLUMNS = ["name", "year", "miles", "price"]


@dataclass(frozen=True)
class PredictionRecord:
    name: str
    year: int
    miles: int
    price: float


class PredictionHistory:
    def __init__(self, *, max_items: int = 5) -> None:
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self.max_items = max_items
        self._records: list[PredictionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> list[PredictionRecord]:
        return list(self._records)

    @property
    def latest(self) -> PredictionRecord | None:
        return self._records[-1] if self._records else None

    def append(self, record: PredictionRecord) -> None:
        self._records = [*self._records, record][-self.max_items :]

    def to_frame(self) -> pd.DataFrame:
        if not self._records:
            return pd.DataFrame(columns=HISTORY_COLUMNS)
        return pd.DataFrame([asdict(record) for record in self._records], columns=HISTORY_COLUMNS)
