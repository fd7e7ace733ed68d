"""
Tests for CountryStatsCollection lookups and leader queries.
"""

import pandas as pd

from country_stats.collection import CountryStatsCollection
from country_stats.record import CountryStats


def _collection(*countries):
    return CountryStatsCollection(countries)


class TestFindByName:
    """Tests for find_by_name."""

    def test_found(self):
        spain = CountryStats(name="Spain", titles=1)
        brazil = CountryStats(name="Brazil", titles=5)
        assert _collection(spain, brazil).find_by_name("Brazil") is brazil

    def test_not_found(self):
        coll = _collection(CountryStats(name="Spain"), CountryStats(name="Brazil"))
        assert coll.find_by_name("France") is None

    def test_case_sensitive(self):
        coll = _collection(CountryStats(name="Brazil"))
        assert coll.find_by_name("brazil") is None

    def test_first_match_on_duplicates(self):
        first = CountryStats(name="Brazil", titles=5)
        second = CountryStats(name="Brazil", titles=0)
        assert _collection(first, second).find_by_name("Brazil") is first


class TestTopQueries:
    """Tests for the max-by queries and their tie-break."""

    def test_top_by_titles_unique_max(self):
        brazil = CountryStats(name="Brazil", titles=5)
        germany = CountryStats(name="Germany", titles=4)
        italy = CountryStats(name="Italy", titles=4)
        assert _collection(brazil, germany, italy).top_by_titles() is brazil

    def test_top_by_titles_tie_goes_to_first(self):
        germany = CountryStats(name="Germany", titles=4)
        italy = CountryStats(name="Italy", titles=4)
        assert _collection(germany, italy).top_by_titles() is germany
        assert _collection(italy, germany).top_by_titles() is italy

    def test_top_by_win_rate(self):
        a = CountryStats(name="A", wins=14, played=20)  # 70%
        b = CountryStats(name="B", wins=9, played=10)  # 90%
        c = CountryStats(name="C", wins=0, played=0)
        assert _collection(a, b, c).top_by_win_rate() is b

    def test_top_by_win_rate_tie_goes_to_first(self):
        a = CountryStats(name="A", wins=1, played=2)
        b = CountryStats(name="B", wins=5, played=10)
        assert _collection(a, b).top_by_win_rate() is a

    def test_most_efficient(self):
        wins_only = CountryStats(name="W", wins=10, draws=0, played=20)  # 50.0
        draws_heavy = CountryStats(name="D", wins=10, draws=5, played=20)  # 58.33
        assert _collection(wins_only, draws_heavy).most_efficient() is draws_heavy

    def test_all_zero_played_returns_first(self):
        a = CountryStats(name="A")
        b = CountryStats(name="B")
        coll = _collection(a, b)
        assert coll.top_by_win_rate() is a
        assert coll.most_efficient() is a

    def test_empty_collection(self):
        coll = _collection()
        assert coll.top_by_titles() is None
        assert coll.top_by_win_rate() is None
        assert coll.most_efficient() is None
        assert coll.find_by_name("Brazil") is None

    def test_top_by_custom_key(self):
        a = CountryStats(name="A", goal_diff=-3)
        b = CountryStats(name="B", goal_diff=-1)
        assert _collection(a, b).top_by(lambda c: c.goal_diff) is b


class TestCollectionProtocol:
    """Tests for construction, ordering and export."""

    def test_from_rows_keeps_order(self):
        rows = [
            {"Country": "Spain", "Titles": "1"},
            {"Country": "Brazil", "Titles": "5"},
            {"Country": "Italy", "Titles": "4"},
        ]
        coll = CountryStatsCollection.from_rows(rows)
        assert len(coll) == 3
        assert [c.name for c in coll] == ["Spain", "Brazil", "Italy"]
        assert coll.top_by_titles().name == "Brazil"

    def test_detached_from_source_list(self):
        countries = [CountryStats(name="Spain")]
        coll = CountryStatsCollection(countries)
        countries.append(CountryStats(name="Brazil"))
        assert len(coll) == 1

    def test_to_frame(self):
        coll = _collection(
            CountryStats(name="A", wins=14, played=20, goals_for=7),
            CountryStats(name="B"),
        )
        df = coll.to_frame()
        assert list(df["name"]) == ["A", "B"]
        assert df.loc[0, "win_rate_percent"] == 70.0
        assert df.loc[1, "efficiency_index"] == 0
        assert "goal_diff" in df.columns

    def test_to_frame_empty(self):
        df = _collection().to_frame()
        assert isinstance(df, pd.DataFrame)
        assert df.empty
        assert "efficiency_index" in df.columns
