from schemas.post import CamelModel


class CommentBase(CamelModel):
    text: str


class CommentCreate(CommentBase):
    pass


class CommentUpdate(CommentBase):
    pass


class CommentResponse(CommentBase):
    id: int
    post_id: int
