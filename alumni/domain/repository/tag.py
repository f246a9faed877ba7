"""Tag repository interface."""

from abc import ABC, abstractmethod

from alumni.domain.model.tag import Tag


class TagRepository(ABC):
    """Repository interface for Tag lookup entries."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Find all tags.

        Args:
            limit: Maximum number of tags to return
            order_by: 'name' (ascending) or 'created_at' (newest first)

        Returns:
            List of tags
        """
        pass
