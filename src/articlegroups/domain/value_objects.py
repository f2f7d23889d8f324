"""Module including value objects used across the domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GroupStatistics:
    """Value object summarizing the groups held by a manager.

    Conventions:
      - `total_articles` counts article references, so an article held by
        two groups is counted twice.
      - `max_articles_in_group` is 0 when there are no groups.
    """

    total_groups: int
    total_articles: int
    max_articles_in_group: int
    empty_groups: int
