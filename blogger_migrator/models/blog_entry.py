from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlogEntry(BaseModel):
    """One ``<entry>`` of a Blogger export: a post, page, setting or comment."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    entry_id: str = Field(..., alias="id")
    title: Optional[str] = None
    published: str = ""
    draft: bool = False
    in_reply_to: Optional[str] = Field(None, alias="inReplyTo")
    content: str = ""
    categories: list[str] = Field(default_factory=list)

    @field_validator("content", mode="before")
    @classmethod
    def _content_default(cls, v: Optional[str]) -> str:
        return v or ""

    @field_validator("categories", mode="before")
    @classmethod
    def _categories_default(cls, v: Optional[list[str]]) -> list[str]:
        return list(v) if v else []

    @property
    def post_id(self) -> str:
        """Trailing segment of the entry identifier, e.g. ``123`` for ``...post-123``."""
        return self.entry_id.split("-")[-1]


class BlogFeed(BaseModel):
    entries: list[BlogEntry] = Field(default_factory=list)


class MigratedPost(BaseModel):
    title: str
    post_id: str
    filename: str
    path: Optional[str] = None


class MigrationSummary(BaseModel):
    """Accumulator for one run, serialized as ``{"totalPosts": n}``."""

    posts: list[MigratedPost] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)

    @property
    def total_posts(self) -> int:
        return len(self.posts)

    def to_report(self) -> dict[str, int]:
        return {"totalPosts": self.total_posts}
