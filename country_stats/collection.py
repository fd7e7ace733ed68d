from __future__ import annotations

from dataclasses import fields
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional

import pandas as pd

from country_stats.record import CountryStats


DERIVED_COLUMNS = ["average_goals_per_game", "win_rate_percent", "efficiency_index"]


class CountryStatsCollection:
    """
    Ordered, read-only set of CountryStats in dataset order.

    All queries are linear scans; there is one row per country so the
    collection stays small.
    """

    def __init__(self, countries: Iterable[CountryStats] = ()):
        self._countries = tuple(countries)

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> "CountryStatsCollection":
        return cls(CountryStats.from_row(row) for row in rows)

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[CountryStats]:
        return iter(self._countries)

    def __repr__(self) -> str:
        return f"CountryStatsCollection({len(self._countries)} countries)"

    def find_by_name(self, name: str) -> Optional[CountryStats]:
        for country in self._countries:
            if country.name == name:
                return country
        return None

    def top_by(self, key: Callable[[CountryStats], float]) -> Optional[CountryStats]:
        """
        Country with the largest key(country), or None when empty.

        Strict > keeps the first of any tied countries.
        """
        best: Optional[CountryStats] = None
        best_value = None
        for country in self._countries:
            value = key(country)
            if best is None or value > best_value:
                best, best_value = country, value
        return best

    def top_by_titles(self) -> Optional[CountryStats]:
        return self.top_by(lambda c: c.titles)

    def top_by_win_rate(self) -> Optional[CountryStats]:
        return self.top_by(lambda c: c.win_rate_percent())

    def most_efficient(self) -> Optional[CountryStats]:
        return self.top_by(lambda c: c.efficiency_index())

    def to_frame(self) -> pd.DataFrame:
        columns: List[str] = [f.name for f in fields(CountryStats)] + DERIVED_COLUMNS
        return pd.DataFrame([c.as_dict() for c in self._countries], columns=columns)
