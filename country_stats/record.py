from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from country_stats.metrics import is_missing, safe_ratio, to_int


# dataset column -> attribute
COLUMNS = {
    "Country": "name",
    "Participated": "participated",
    "Titles": "titles",
    "Played": "played",
    "Win": "wins",
    "Draw": "draws",
    "Loss": "losses",
    "Goals For": "goals_for",
    "Goals Against": "goals_against",
    "Pts": "points",
    "Goal Diff": "goal_diff",
}

POINTS_PER_WIN = 3
POINTS_PER_DRAW = 1


@dataclass(frozen=True)
class CountryStats:
    name: str
    participated: int = 0
    titles: int = 0
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0
    goal_diff: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CountryStats":
        """
        Build a record from one raw dataset row keyed by column name.

        Integer columns go through to_int, so missing or malformed cells
        load as 0 rather than raising. played is not checked against
        wins + draws + losses.
        """
        name = row.get("Country")
        kwargs = {"name": "" if is_missing(name) else str(name)}
        for column, attr in COLUMNS.items():
            if attr == "name":
                continue
            kwargs[attr] = to_int(row.get(column))
        return cls(**kwargs)

    def average_goals_per_game(self) -> float:
        return safe_ratio(self.goals_for, self.played)

    def win_rate_percent(self) -> float:
        return safe_ratio(self.wins, self.played, scale=100)

    def efficiency_index(self) -> float:
        """Points earned as a percentage of the maximum available (3 per match)."""
        earned = self.wins * POINTS_PER_WIN + self.draws * POINTS_PER_DRAW
        return safe_ratio(earned, self.played * POINTS_PER_WIN, scale=100)

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        out["average_goals_per_game"] = self.average_goals_per_game()
        out["win_rate_percent"] = self.win_rate_percent()
        out["efficiency_index"] = self.efficiency_index()
        return out
