from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PostBase(CamelModel):
    title: str
    text: str = ""
    tags: List[str] = []


class PostCreate(PostBase):
    pass


class PostUpdate(PostBase):
    pass


class PostResponse(CamelModel):
    id: int
    title: str
    text: str
    tags: List[str]
    likes_count: int
    comments_count: int


class PostListResponse(CamelModel):
    posts: List[PostResponse]
    has_prev: bool
    has_next: bool
    last_page: int
