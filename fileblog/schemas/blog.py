from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class Post(BaseModel):
    id: str
    title: str
    content: str
    author: str = "Anonymous"
    tags: List[str] = Field(default_factory=list)
    createdAt: datetime
    updatedAt: datetime
    filename: str

    @field_validator("tags", mode="before")
    @classmethod
    def tags_never_missing(cls, value):
        return [] if value is None else value

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # older files may carry naive timestamps; keep the collection sortable
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class PostCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[Union[str, List[str]]] = None


class PostUpdate(PostCreate):
    pass


class ListingWarning(BaseModel):
    filename: str
    reason: str


class PostListing(BaseModel):
    posts: List[Post] = Field(default_factory=list)
    warnings: List[ListingWarning] = Field(default_factory=list)
