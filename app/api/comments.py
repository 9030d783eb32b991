from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.responses import error_response
from app.database import get_db
from app.services.comments import CommentService
from schemas.comment import CommentCreate, CommentUpdate, CommentResponse
from schemas.error import ErrorResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


def get_comment_service(db: AsyncSession = Depends(get_db)) -> CommentService:
    return CommentService(db)


@router.get("/{post_id}/comments", response_model=List[CommentResponse], responses=NOT_FOUND)
async def list_comments(post_id: int, service: CommentService = Depends(get_comment_service)):
    result = await service.list_comments(post_id)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.get("/{post_id}/comments/{comment_id}", response_model=CommentResponse, responses=NOT_FOUND)
async def get_comment(post_id: int, comment_id: int, service: CommentService = Depends(get_comment_service)):
    result = await service.get_comment(post_id, comment_id)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def create_comment(post_id: int, payload: CommentCreate, service: CommentService = Depends(get_comment_service)):
    result = await service.create_comment(post_id, payload)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.put("/{post_id}/comments/{comment_id}", response_model=CommentResponse, responses=NOT_FOUND)
async def update_comment(
    post_id: int,
    comment_id: int,
    payload: CommentUpdate,
    service: CommentService = Depends(get_comment_service),
):
    result = await service.update_comment(post_id, comment_id, payload)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.delete("/{post_id}/comments/{comment_id}", responses=NOT_FOUND)
async def delete_comment(post_id: int, comment_id: int, service: CommentService = Depends(get_comment_service)):
    result = await service.delete_comment(post_id, comment_id)
    if not result.ok:
        return error_response(result.error)
    return Response(status_code=status.HTTP_200_OK)
