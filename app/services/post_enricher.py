from collections import defaultdict
from dataclasses import dataclass, field
from typing import List, Set
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from models.post import Post, PostTag, Comment


@dataclass
class EnrichedPost:
    post: Post
    tags: Set[str] = field(default_factory=set)
    comments_count: int = 0


class PostEnricher:
    """Read-through lookups of data not stored on the post row: tags and comment count."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def tags_for(self, post_id: int) -> Set[str]:
        res = await self.db.execute(select(PostTag.tag).where(PostTag.post_id == post_id))
        return {tag for (tag,) in res}

    async def comments_count(self, post_id: int) -> int:
        res = await self.db.execute(select(func.count(Comment.id)).where(Comment.post_id == post_id))
        return res.scalar() or 0

    async def enrich(self, post: Post) -> EnrichedPost:
        return EnrichedPost(
            post=post,
            tags=await self.tags_for(post.id),
            comments_count=await self.comments_count(post.id),
        )

    async def enrich_many(self, posts: List[Post]) -> List[EnrichedPost]:
        post_ids = [p.id for p in posts]
        if not post_ids:
            return []
        tags_map: dict[int, set[str]] = defaultdict(set)
        tag_rows = await self.db.execute(
            select(PostTag.post_id, PostTag.tag).where(PostTag.post_id.in_(post_ids))
        )
        for post_id, tag in tag_rows:
            tags_map[post_id].add(tag)
        count_rows = await self.db.execute(
            select(Comment.post_id, func.count(Comment.id))
            .where(Comment.post_id.in_(post_ids))
            .group_by(Comment.post_id)
        )
        counts = {post_id: count for post_id, count in count_rows}
        return [
            EnrichedPost(post=p, tags=tags_map.get(p.id, set()), comments_count=counts.get(p.id, 0))
            for p in posts
        ]
