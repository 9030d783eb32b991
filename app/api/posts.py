from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.responses import error_response
from app.config import settings
from app.database import get_db
from app.services.posts import PostService
from schemas.error import ErrorResponse
from schemas.post import PostCreate, PostUpdate, PostResponse, PostListResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


@router.get("", response_model=PostListResponse)
async def list_posts(
    search: str = "",
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(10, alias="pageSize", ge=1),
    service: PostService = Depends(get_post_service),
):
    result = await service.list_posts(search, page_number, page_size)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.get("/{post_id}", response_model=PostResponse, responses=NOT_FOUND)
async def get_post(post_id: int, service: PostService = Depends(get_post_service)):
    result = await service.get_post(post_id)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(payload: PostCreate, service: PostService = Depends(get_post_service)):
    result = await service.create_post(payload)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.put("/{post_id}", response_model=PostResponse, responses=NOT_FOUND)
async def update_post(post_id: int, payload: PostUpdate, service: PostService = Depends(get_post_service)):
    result = await service.update_post(post_id, payload)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.delete("/{post_id}", responses=NOT_FOUND)
async def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    result = await service.delete_post(post_id)
    if not result.ok:
        return error_response(result.error)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{post_id}/likes", response_model=int, responses=NOT_FOUND)
async def add_like(post_id: int, service: PostService = Depends(get_post_service)):
    result = await service.add_like(post_id)
    if not result.ok:
        return error_response(result.error)
    return result.value


@router.put("/{post_id}/image", responses=NOT_FOUND)
async def update_post_image(
    post_id: int,
    image: UploadFile = File(...),
    service: PostService = Depends(get_post_service),
):
    # one byte past the cap is enough to reject an oversized upload
    data = await image.read(settings.MAX_IMAGE_BYTES + 1)
    result = await service.update_image(post_id, data, image.content_type)
    if not result.ok:
        return error_response(result.error)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{post_id}/image", responses=NOT_FOUND)
async def get_post_image(post_id: int, service: PostService = Depends(get_post_service)):
    result = await service.get_image(post_id)
    if not result.ok:
        return error_response(result.error)
    return Response(content=result.value.data, media_type=result.value.content_type)
