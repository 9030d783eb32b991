from dataclasses import dataclass
from typing import List
from app.config import settings
from app.services.post_enricher import EnrichedPost
from schemas.post import PostResponse, PostListResponse

ELLIPSIS = "…"


@dataclass(frozen=True)
class PageMeta:
    has_prev: bool
    has_next: bool
    last_page: int


class ResponseAssembler:
    """Builds post DTOs. List views carry truncated previews, detail views the full text."""

    def __init__(self, preview_length: int | None = None):
        self.preview_length = settings.PREVIEW_LENGTH if preview_length is None else preview_length

    def truncate(self, text: str | None) -> str:
        text = text or ""
        if len(text) > self.preview_length:
            return text[:self.preview_length] + ELLIPSIS
        return text

    @staticmethod
    def page_meta(total: int, page_number: int, page_size: int) -> PageMeta:
        # ceil division, with an empty result still reported as page 1 of 1
        last_page = max(1, -(-total // page_size))
        return PageMeta(
            has_prev=page_number > 1,
            has_next=page_number < last_page,
            last_page=last_page,
        )

    def to_detail(self, enriched: EnrichedPost) -> PostResponse:
        post = enriched.post
        return PostResponse(
            id=post.id,
            title=post.title,
            text=post.text or "",
            tags=sorted(enriched.tags),
            likes_count=post.likes_count or 0,
            comments_count=enriched.comments_count,
        )

    def to_preview(self, enriched: EnrichedPost) -> PostResponse:
        response = self.to_detail(enriched)
        response.text = self.truncate(response.text)
        return response

    def to_page(self, enriched: List[EnrichedPost], total: int, page_number: int, page_size: int) -> PostListResponse:
        meta = self.page_meta(total, page_number, page_size)
        return PostListResponse(
            posts=[self.to_preview(e) for e in enriched],
            has_prev=meta.has_prev,
            has_next=meta.has_next,
            last_page=meta.last_page,
        )
