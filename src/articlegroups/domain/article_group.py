"""The ArticleGroup record.

An article group is a named, described container of unique article
references. Staff use groups to categorize help content by topic.

Conventions:
  - `group_id` is assigned once by the owning manager and never changes.
  - `name` and `description` are stored trimmed and are never blank.
  - Article references are opaque integers owned by the article store; the
    group only keeps them unique and in insertion order.
"""

from __future__ import annotations

from .errors import InvalidArgumentError

_LABELS = {"name": "Group name", "description": "Description"}


def require_text(value: object, field: str) -> str:
    """Return `value` trimmed, or raise if it is missing or blank.

    Args:
        value: The candidate value.
        field: Name of the field being set, used in the error.

    Returns:
        str: The trimmed value.

    Raises:
        InvalidArgumentError: If `value` is not a string or is empty after trimming.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(field, _LABELS.get(field))
    return value.strip()


class ArticleGroup:
    """A group of help articles organized by topic.

    Two groups are equal when their `group_id` values match, whatever their
    other fields hold; the hash is derived from `group_id` alone.

    Args:
        group_id: Identifier assigned by the owning manager.
        name: Name of the group.
        description: What the group contains.

    Raises:
        InvalidArgumentError: If `name` or `description` is missing or blank.
    """

    __slots__ = ("_group_id", "_name", "_description", "_article_ids")

    def __init__(self, group_id: int, name: str, description: str) -> None:
        self._group_id = group_id
        self._name = require_text(name, "name")
        self._description = require_text(description, "description")
        # dict keys act as an insertion-ordered set
        self._article_ids: dict[int, None] = {}

    @property
    def group_id(self) -> int:
        """The identifier of this group."""
        return self._group_id

    @property
    def name(self) -> str:
        """The group name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_text(value, "name")

    @property
    def description(self) -> str:
        """The group description."""
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = require_text(value, "description")

    def update(self, name: str, description: str) -> None:
        """Replace both name and description, or neither.

        Raises:
            InvalidArgumentError: If either value is missing or blank.
        """
        new_name = require_text(name, "name")
        new_description = require_text(description, "description")
        self._name, self._description = new_name, new_description

    @property
    def article_ids(self) -> list[int]:
        """A copy of the article ids in this group, in insertion order."""
        return list(self._article_ids)

    def add_article(self, article_id: int) -> bool:
        """Add an article to this group.

        Returns:
            bool: True if the article was added, False if it was already present.
        """
        if article_id in self._article_ids:
            return False
        self._article_ids[article_id] = None
        return True

    def remove_article(self, article_id: int) -> bool:
        """Remove an article from this group.

        Returns:
            bool: True if the article was removed, False if it was not present.
        """
        if article_id not in self._article_ids:
            return False
        del self._article_ids[article_id]
        return True

    def contains_article(self, article_id: int) -> bool:
        """Return True if the article is in this group."""
        return article_id in self._article_ids

    def article_count(self) -> int:
        """Return the number of articles in this group."""
        return len(self._article_ids)

    def clear_articles(self) -> None:
        """Remove every article; the group itself is kept."""
        self._article_ids.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArticleGroup):
            return NotImplemented
        return self._group_id == other._group_id

    def __hash__(self) -> int:
        return hash(self._group_id)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(group_id={self._group_id}, name={self._name!r}, "
            f"description={self._description!r}, article_count={len(self._article_ids)})"
        )
