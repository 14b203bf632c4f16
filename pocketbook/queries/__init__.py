"""Query package."""

from pocketbook.queries.statistics import StatisticsQuery

__all__ = ["StatisticsQuery"]
