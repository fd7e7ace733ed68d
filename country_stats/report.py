from __future__ import annotations

from typing import List, Optional

from country_stats.collection import CountryStatsCollection
from country_stats.record import CountryStats


RATIO_DECIMALS = 4


def title_win_rate_ratio(country: CountryStats) -> Optional[float]:
    """Titles per win-rate percentage point; None when the win rate is 0."""
    win_rate = country.win_rate_percent()
    if win_rate <= 0:
        return None
    return round(country.titles / win_rate, RATIO_DECIMALS)


def format_country_summary(country: CountryStats) -> str:
    header = f"Statistics for {country.name}:"
    lines: List[str] = [
        header,
        "-" * len(header),
        f"Matches played: {country.played}",
        f"Goals scored: {country.goals_for}",
        f"Wins: {country.wins}",
        f"Average goals per game: {country.average_goals_per_game()}",
        f"Win rate: {country.win_rate_percent()}%",
        f"Goal difference: {country.goal_diff}",
        f"Efficiency index: {country.efficiency_index()}%",
        f"Titles: {country.titles}",
    ]
    ratio = title_win_rate_ratio(country)
    if ratio is not None:
        lines.append(f"Titles to win-rate ratio: {ratio}")
    return "\n".join(lines)


def format_leaders(countries: CountryStatsCollection) -> str:
    most_titles = countries.top_by_titles()
    best_win_rate = countries.top_by_win_rate()
    most_efficient = countries.most_efficient()
    if most_titles is None or best_win_rate is None or most_efficient is None:
        return "No countries loaded."
    return "\n".join([
        f"Most titles: {most_titles.name} ({most_titles.titles})",
        f"Highest win rate: {best_win_rate.name} ({best_win_rate.win_rate_percent()}%)",
        f"Most efficient: {most_efficient.name} (index {most_efficient.efficiency_index()}%)",
    ])
