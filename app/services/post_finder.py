from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from models.post import Post, PostTag
from app.services.search import SearchFilter


class PostFinder:
    """Selects a page of posts and the total match count for a SearchFilter.

    Page and count queries share the predicates built by ``predicates`` so the
    count always reflects the same filter as the page.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def predicates(search: SearchFilter) -> list:
        filters = []
        if search.text is not None:
            filters.append(Post.title.icontains(search.text, autoescape=True))
        if search.tags:
            # a post matches only when every requested tag is attached to it
            tagged = (
                select(PostTag.post_id)
                .where(PostTag.tag.in_(sorted(search.tags)))
                .group_by(PostTag.post_id)
                .having(func.count(func.distinct(PostTag.tag)) == len(search.tags))
            )
            filters.append(Post.id.in_(tagged))
        return filters

    async def find_page(self, search: SearchFilter, page_number: int, page_size: int) -> list[Post]:
        if page_number < 1 or page_size < 1:
            raise ValueError(f"page_number and page_size must be positive, got {page_number} and {page_size}")
        res = await self.db.execute(
            select(Post)
            .where(*self.predicates(search))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        return list(res.scalars().all())

    async def count(self, search: SearchFilter) -> int:
        res = await self.db.execute(
            select(func.count(Post.id)).where(*self.predicates(search))
        )
        return res.scalar() or 0
