import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable
from sqlalchemy import select, delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.errors import ErrorKind, Result, ServiceError
from app.services.assembler import ResponseAssembler
from app.services.post_enricher import PostEnricher
from app.services.post_finder import PostFinder
from app.services.search import parse_search
from models.post import Post, PostTag, Comment
from schemas.post import PostCreate, PostUpdate, PostResponse, PostListResponse

logger = logging.getLogger("blog.posts")

DEFAULT_IMAGE_TYPE = "image/jpeg"


@dataclass(frozen=True)
class PostImage:
    data: bytes
    content_type: str


class PostService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.finder = PostFinder(db)
        self.enricher = PostEnricher(db)
        self.assembler = ResponseAssembler()

    async def _get(self, post_id: int) -> Post | None:
        return (await self.db.execute(select(Post).where(Post.id == post_id))).scalar_one_or_none()

    async def _exists(self, post_id: int) -> bool:
        row = await self.db.execute(select(Post.id).where(Post.id == post_id))
        return row.first() is not None

    async def list_posts(self, search: str | None, page_number: int, page_size: int) -> Result[PostListResponse]:
        logger.debug("Listing posts search=%r page=%s page_size=%s", search, page_number, page_size)
        search_filter = parse_search(search)
        posts = await self.finder.find_page(search_filter, page_number, page_size)
        total = await self.finder.count(search_filter)
        enriched = await self.enricher.enrich_many(posts)
        return Result.success(self.assembler.to_page(enriched, total, page_number, page_size))

    async def get_post(self, post_id: int) -> Result[PostResponse]:
        logger.debug("Getting post %s", post_id)
        post = await self._get(post_id)
        if not post:
            return Result.failure(ServiceError.post_not_found(post_id))
        return Result.success(self.assembler.to_detail(await self.enricher.enrich(post)))

    async def create_post(self, payload: PostCreate) -> Result[PostResponse]:
        logger.debug("Creating post with title %r", payload.title)
        post = Post(title=payload.title, text=payload.text or "", likes_count=0)
        self.db.add(post)
        await self.db.flush()
        await self._save_tags(post.id, payload.tags)
        await self.db.commit()
        await self.db.refresh(post)
        return Result.success(self.assembler.to_detail(await self.enricher.enrich(post)))

    async def update_post(self, post_id: int, payload: PostUpdate) -> Result[PostResponse]:
        logger.debug("Updating post %s", post_id)
        post = await self._get(post_id)
        if not post:
            return Result.failure(ServiceError.post_not_found(post_id))
        post.title = payload.title
        post.text = payload.text or ""
        # tag-only edits leave the row unchanged, so onupdate would not fire
        post.updated_at = datetime.now()
        await self.db.flush()
        await self._delete_tags(post_id)
        await self._save_tags(post_id, payload.tags)
        await self.db.commit()
        await self.db.refresh(post)
        return Result.success(self.assembler.to_detail(await self.enricher.enrich(post)))

    async def delete_post(self, post_id: int) -> Result[None]:
        logger.debug("Deleting post %s", post_id)
        if not await self._exists(post_id):
            return Result.failure(ServiceError.post_not_found(post_id))
        await self.db.execute(delete(Comment).where(Comment.post_id == post_id))
        await self._delete_tags(post_id)
        await self.db.execute(delete(Post).where(Post.id == post_id))
        await self.db.commit()
        return Result.success()

    async def add_like(self, post_id: int) -> Result[int]:
        logger.debug("Adding like to post %s", post_id)
        # single UPDATE so concurrent increments are never lost
        res = await self.db.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(likes_count=Post.likes_count + 1, updated_at=datetime.now())
            .execution_options(synchronize_session=False)
        )
        if res.rowcount == 0:
            return Result.failure(ServiceError.post_not_found(post_id))
        likes = (await self.db.execute(select(Post.likes_count).where(Post.id == post_id))).scalar_one()
        await self.db.commit()
        return Result.success(likes)

    async def update_image(self, post_id: int, data: bytes, content_type: str | None) -> Result[None]:
        logger.debug("Updating image for post %s (%s bytes)", post_id, len(data))
        post = await self._get(post_id)
        if not post:
            return Result.failure(ServiceError.post_not_found(post_id))
        if not data:
            return Result.failure(ServiceError(ErrorKind.INVALID, "Image file is empty"))
        if len(data) > settings.MAX_IMAGE_BYTES:
            return Result.failure(ServiceError(
                ErrorKind.TOO_LARGE,
                f"Image too large (max {settings.MAX_IMAGE_BYTES} bytes)",
            ))
        post.image = data
        post.image_content_type = content_type or DEFAULT_IMAGE_TYPE
        post.updated_at = datetime.now()
        await self.db.commit()
        return Result.success()

    async def get_image(self, post_id: int) -> Result[PostImage]:
        logger.debug("Getting image for post %s", post_id)
        post = await self._get(post_id)
        if not post:
            return Result.failure(ServiceError.post_not_found(post_id))
        if not post.image:
            return Result.failure(ServiceError.image_not_found(post_id))
        return Result.success(PostImage(data=post.image, content_type=post.image_content_type or DEFAULT_IMAGE_TYPE))

    async def _save_tags(self, post_id: int, tags: Iterable[str]):
        for tag in sorted({t for t in (tags or []) if t}):
            self.db.add(PostTag(post_id=post_id, tag=tag))
        await self.db.flush()

    async def _delete_tags(self, post_id: int):
        await self.db.execute(delete(PostTag).where(PostTag.post_id == post_id))
