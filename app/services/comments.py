import logging
from datetime import datetime
from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.errors import Result, ServiceError
from models.post import Post, Comment
from schemas.comment import CommentCreate, CommentUpdate, CommentResponse

logger = logging.getLogger("blog.comments")


def _build_comment_response(comment: Comment) -> CommentResponse:
    return CommentResponse(id=comment.id, text=comment.text or "", post_id=comment.post_id)


class CommentService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _post_exists(self, post_id: int) -> bool:
        row = await self.db.execute(select(Post.id).where(Post.id == post_id))
        return row.first() is not None

    async def _get(self, post_id: int, comment_id: int) -> Comment | None:
        res = await self.db.execute(
            select(Comment).where(Comment.id == comment_id, Comment.post_id == post_id)
        )
        return res.scalar_one_or_none()

    async def list_comments(self, post_id: int) -> Result[List[CommentResponse]]:
        logger.debug("Listing comments for post %s", post_id)
        if not await self._post_exists(post_id):
            return Result.failure(ServiceError.post_not_found(post_id))
        res = await self.db.execute(
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return Result.success([_build_comment_response(c) for c in res.scalars().all()])

    async def get_comment(self, post_id: int, comment_id: int) -> Result[CommentResponse]:
        logger.debug("Getting comment %s for post %s", comment_id, post_id)
        comment = await self._get(post_id, comment_id)
        if not comment:
            return Result.failure(ServiceError.comment_not_found_in_post(post_id, comment_id))
        return Result.success(_build_comment_response(comment))

    async def create_comment(self, post_id: int, payload: CommentCreate) -> Result[CommentResponse]:
        logger.debug("Creating comment for post %s", post_id)
        if not await self._post_exists(post_id):
            return Result.failure(ServiceError.post_not_found(post_id))
        comment = Comment(post_id=post_id, text=payload.text)
        self.db.add(comment)
        await self.db.commit()
        await self.db.refresh(comment)
        return Result.success(_build_comment_response(comment))

    async def update_comment(self, post_id: int, comment_id: int, payload: CommentUpdate) -> Result[CommentResponse]:
        logger.debug("Updating comment %s for post %s", comment_id, post_id)
        comment = await self._get(post_id, comment_id)
        if not comment:
            return Result.failure(ServiceError.comment_not_found_in_post(post_id, comment_id))
        comment.text = payload.text
        comment.updated_at = datetime.now()
        await self.db.commit()
        await self.db.refresh(comment)
        return Result.success(_build_comment_response(comment))

    async def delete_comment(self, post_id: int, comment_id: int) -> Result[None]:
        logger.debug("Deleting comment %s for post %s", comment_id, post_id)
        comment = await self._get(post_id, comment_id)
        if not comment:
            return Result.failure(ServiceError.comment_not_found_in_post(post_id, comment_id))
        await self.db.delete(comment)
        await self.db.commit()
        return Result.success()
