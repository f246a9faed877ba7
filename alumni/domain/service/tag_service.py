"""Tag domain service."""

import logfire

from alumni.domain.model.tag import Tag
from alumni.domain.repository import TagRepository

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_all_tags(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Get all available tags.

        Args:
            limit: Maximum number of tags to return
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", limit=limit, order_by=order_by):
            tags = await self.tag_repository.find_all(limit=limit, order_by=order_by)
            logfire.info("Tags retrieved", count=len(tags))
            return tags
