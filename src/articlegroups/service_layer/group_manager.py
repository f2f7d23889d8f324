"""Article group manager.

The manager owns every `ArticleGroup` in its collection and assigns their
identifiers from a counter local to the manager instance. It exposes create,
read, update and delete operations on groups, membership edits on a single
group and a few collection-wide queries.

Failure modes
- Missing or blank names/descriptions raise `InvalidArgumentError`; the
  manager is left unchanged.
- Unknown group ids are reported with a `False`/`None` return, never an
  exception.

Note:
    Not thread-safe. Callers sharing a manager between threads must
    serialize access themselves.
"""

from __future__ import annotations

import logging

from articlegroups.domain.article_group import ArticleGroup
from articlegroups.domain.value_objects import GroupStatistics

logger = logging.getLogger(__name__)

FIRST_GROUP_ID = 1


class ArticleGroupManager:
    """In-memory registry of article groups keyed by group id.

    Groups are kept in creation order; every list returned by the manager is a
    new list, so later changes to the manager never alter it. The groups in
    that list are the owned instances, not copies.
    """

    def __init__(self) -> None:
        self._groups: dict[int, ArticleGroup] = {}
        self._next_group_id = FIRST_GROUP_ID

    @property
    def next_group_id(self) -> int:
        """The id the next successfully created group will receive."""
        return self._next_group_id

    # --- Create / read ---

    def create_group(self, name: str, description: str) -> ArticleGroup:
        """Create and store a new group.

        Args:
            name: The name for the new group.
            description: The description for the new group.

        Returns:
            The newly created group.

        Raises:
            InvalidArgumentError: If `name` or `description` is missing or blank.
        """
        group = ArticleGroup(self._next_group_id, name, description)
        self._groups[group.group_id] = group
        self._next_group_id += 1
        logger.debug("Created article group %d (%r)", group.group_id, group.name)
        return group

    def get_group(self, group_id: int) -> ArticleGroup | None:
        """Return the group with the given id, or None if not found."""
        return self._groups.get(group_id)

    def get_all_groups(self) -> list[ArticleGroup]:
        """Return all groups in creation order."""
        return list(self._groups.values())

    # --- Update / delete ---

    def update_group_name(self, group_id: int, name: str) -> bool:
        """Rename a group.

        Returns:
            bool: True if the group was updated, False if it was not found.

        Raises:
            InvalidArgumentError: If `name` is missing or blank.
        """
        if (group := self._groups.get(group_id)) is None:
            return False
        group.name = name
        logger.debug("Renamed article group %d to %r", group_id, group.name)
        return True

    def update_group_description(self, group_id: int, description: str) -> bool:
        """Replace the description of a group.

        Returns:
            bool: True if the group was updated, False if it was not found.

        Raises:
            InvalidArgumentError: If `description` is missing or blank.
        """
        if (group := self._groups.get(group_id)) is None:
            return False
        group.description = description
        logger.debug("Updated description of article group %d", group_id)
        return True

    def update_group(self, group_id: int, name: str, description: str) -> bool:
        """Replace both name and description of a group.

        Either both fields change or neither does.

        Returns:
            bool: True if the group was updated, False if it was not found.

        Raises:
            InvalidArgumentError: If `name` or `description` is missing or blank.
        """
        if (group := self._groups.get(group_id)) is None:
            return False
        group.update(name, description)
        logger.debug("Updated article group %d (%r)", group_id, group.name)
        return True

    def delete_group(self, group_id: int) -> bool:
        """Delete a group.

        Returns:
            bool: True if the group was deleted, False if it was not found.
        """
        if self._groups.pop(group_id, None) is None:
            return False
        logger.debug("Deleted article group %d", group_id)
        return True

    # --- Membership ---

    def add_article_to_group(self, group_id: int, article_id: int) -> bool:
        """Add an article to a group.

        Returns:
            bool: False if the group was not found or already holds the article.
        """
        if (group := self._groups.get(group_id)) is None:
            return False
        added = group.add_article(article_id)
        if added:
            logger.debug("Added article %d to group %d", article_id, group_id)
        return added

    def remove_article_from_group(self, group_id: int, article_id: int) -> bool:
        """Remove an article from a group.

        Returns:
            bool: False if the group was not found or does not hold the article.
        """
        if (group := self._groups.get(group_id)) is None:
            return False
        removed = group.remove_article(article_id)
        if removed:
            logger.debug("Removed article %d from group %d", article_id, group_id)
        return removed

    def group_contains_article(self, group_id: int, article_id: int) -> bool:
        """Return True if the group exists and holds the article."""
        if (group := self._groups.get(group_id)) is None:
            return False
        return group.contains_article(article_id)

    def clear_group_articles(self, group_id: int) -> bool:
        """Remove every article from a group, keeping its name and description.

        Returns:
            bool: False if the group was not found.
        """
        if (group := self._groups.get(group_id)) is None:
            return False
        count = group.article_count()
        group.clear_articles()
        logger.debug("Cleared %d article(s) from group %d", count, group_id)
        return True

    # --- Queries ---

    def get_groups_containing_article(self, article_id: int) -> list[ArticleGroup]:
        """Return every group that holds the article, in creation order."""
        return [
            group
            for group in self._groups.values()
            if group.contains_article(article_id)
        ]

    def search_groups_by_name(self, term: str | None) -> list[ArticleGroup]:
        """Case-insensitive substring search over group names.

        Args:
            term: The text to look for. Surrounding whitespace is ignored.

        Returns:
            Matching groups in creation order; an empty list if `term` is
            None or blank.
        """
        if term is None or not term.strip():
            return []
        needle = term.strip().casefold()
        return [
            group
            for group in self._groups.values()
            if needle in group.name.casefold()
        ]

    def group_count(self) -> int:
        """Return the number of groups."""
        return len(self._groups)

    def group_exists(self, group_id: int) -> bool:
        """Return True if a group with this id exists."""
        return group_id in self._groups

    def clear_all_groups(self) -> None:
        """Delete every group and restart ids at 1.

        This cannot be undone.
        """
        count = len(self._groups)
        self._groups.clear()
        self._next_group_id = FIRST_GROUP_ID
        logger.info(
            "Cleared %d article group(s); ids restart at %d", count, FIRST_GROUP_ID
        )

    def get_statistics(self) -> GroupStatistics:
        """Summarize the groups in a single pass."""
        total_articles = 0
        max_articles = 0
        empty_groups = 0
        for group in self._groups.values():
            count = group.article_count()
            total_articles += count
            max_articles = max(max_articles, count)
            if count == 0:
                empty_groups += 1
        return GroupStatistics(
            total_groups=len(self._groups),
            total_articles=total_articles,
            max_articles_in_group=max_articles,
            empty_groups=empty_groups,
        )
