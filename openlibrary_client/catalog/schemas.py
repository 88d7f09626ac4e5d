"""Catalog API schemas - works, authors, search documents."""

from pydantic import BaseModel, Field


class AuthorKeySchema(BaseModel):
    """Reference to an author: {"key": "/authors/OL..A"}."""

    key: str


class AuthorRoleSchema(BaseModel):
    """Entry of a work's ``authors`` array."""

    author: AuthorKeySchema | None = None
    key: str | None = None

    @property
    def author_key(self) -> str | None:
        if self.author is not None:
            return self.author.key
        return self.key


class WorkDetailSchema(BaseModel):
    """Work detail (GET /works/{id}.json); unknown fields are kept."""

    key: str | None = None
    title: str | None = None
    subjects: list[str] = []
    authors: list[AuthorRoleSchema] = []
    covers: list[int] = []

    class Config:
        extra = "allow"

    @property
    def author_keys(self) -> list[str]:
        return [a.author_key for a in self.authors if a.author_key]


class AuthorSchema(BaseModel):
    """Author detail (GET /authors/{id}.json)."""

    key: str | None = None
    name: str | None = None
    personal_name: str | None = None

    class Config:
        extra = "allow"


class SearchDocSchema(BaseModel):
    """One search hit."""

    key: str
    title: str = ""
    author_name: list[str] = []
    cover_id: int | None = Field(alias="cover_i", default=None)
    first_publish_year: int | None = None

    class Config:
        extra = "allow"
        populate_by_name = True


class SearchResponseSchema(BaseModel):
    """Search page (GET /search.json)."""

    num_found: int = Field(alias="numFound", default=0)
    docs: list[dict] = []

    class Config:
        extra = "allow"
        populate_by_name = True
