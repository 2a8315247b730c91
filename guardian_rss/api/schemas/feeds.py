"""Pydantic models for Guardian search results and the service index."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleFields(BaseModel):
    """The subset of ``show-fields=all`` the feed uses."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    trail_text: str | None = Field(default=None, alias="trailText")
    thumbnail: str | None = None


class Article(BaseModel):
    """A single search result from the Guardian content API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(alias="webTitle")
    url: str = Field(alias="webUrl")
    section_name: str = Field(alias="sectionName")
    published_at: datetime = Field(alias="webPublicationDate")
    article_fields: ArticleFields = Field(default_factory=ArticleFields, alias="fields")

    @field_validator("article_fields", mode="before")
    @classmethod
    def _fields_default(cls, value):
        # "fields" can come back as null for non-article content types
        return value if value is not None else {}

    @property
    def trail_text(self) -> str | None:
        return self.article_fields.trail_text or None

    @property
    def thumbnail(self) -> str | None:
        return self.article_fields.thumbnail or None


class ServiceIndex(BaseModel):
    """Response body for ``GET /``."""

    service: str
    status: str
    usage: str
