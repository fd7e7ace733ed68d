from country_stats.collection import CountryStatsCollection
from country_stats.loader import DatasetError, read_country_stats
from country_stats.record import CountryStats

__all__ = ["CountryStats", "CountryStatsCollection", "DatasetError", "read_country_stats"]
