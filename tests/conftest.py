"""Global pytest fixtures for articlegroups."""

from __future__ import annotations

import pytest

from articlegroups.service_layer import ArticleGroupManager


@pytest.fixture
def manager() -> ArticleGroupManager:
    """Return a fresh, empty manager."""
    return ArticleGroupManager()


@pytest.fixture
def populated_manager(manager: ArticleGroupManager) -> ArticleGroupManager:
    """Return a manager holding three groups.

    - 1 "Java Basics": articles 101, 102
    - 2 "Advanced Java": article 101
    - 3 "Python Tips": no articles
    """
    java = manager.create_group("Java Basics", "Introductory Java articles")
    advanced = manager.create_group("Advanced Java", "Generics, streams and more")
    manager.create_group("Python Tips", "Short Python recipes")
    java.add_article(101)
    java.add_article(102)
    advanced.add_article(101)
    return manager
