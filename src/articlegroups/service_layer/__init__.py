"""Service layer for articlegroups.

Implements the application use-cases over the domain objects: the article
group registry and its collection-wide queries.

Dependency rule: may import `articlegroups.domain`, but not
`articlegroups.entrypoints`.
"""

from .group_manager import ArticleGroupManager

__all__ = ["ArticleGroupManager"]
