"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    content: str = Field("", max_length=5000, description="Story text")
    age: int | None = Field(None, gt=0, lt=150, description="Poster's age")
    city: str | None = Field(None, max_length=120, description="Poster's city")
    media_ref: str | None = Field(None, description="Storage id of attached media")

    @model_validator(mode="after")
    def _require_content_or_media(self) -> "PostCreate":
        if not self.content.strip() and not self.media_ref:
            raise ValueError("Please enter some text or attach a file")
        return self


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    author_id: int
    content: str
    age: int | None
    city: str | None
    media_ref: str | None
    green_flags: int
    red_flags: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FeedItem(PostResponse):
    """A post joined with its author label and reply count."""

    author_label: str
    reply_count: int


class CommentCreate(BaseModel):
    """Schema for replying to a post."""

    content: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    """Schema for a reply returned by the API."""

    id: int
    post_id: int
    author_id: int
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
