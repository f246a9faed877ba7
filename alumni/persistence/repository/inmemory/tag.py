"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy

from alumni.domain.model.tag import Tag
from alumni.domain.repository.tag import TagRepository
from alumni.domain.value import TagId


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._tags[tag.id] = deepcopy(tag)
        return deepcopy(tag)

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Find all tags."""
        tags = list(self._tags.values())

        if order_by == "created_at":
            tags.sort(key=lambda t: t.created_at, reverse=True)
        else:
            tags.sort(key=lambda t: t.name.root)

        return [deepcopy(tag) for tag in tags[:limit]]
