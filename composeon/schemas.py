from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .icons import Variation


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    display_name: str = Field(alias="displayName")
    category: str
    tags: tuple[str, ...] = ()
    variations: tuple[Variation, ...] = ()
    # variation value -> path relative to the icons directory (plus the configured prefix)
    paths: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("paths")
    @classmethod
    def freeze_paths(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("paths")
    def serialize_paths(self, paths: Mapping[str, str]) -> dict[str, str]:
        return dict(paths)


class SvgMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    view_box: str | None = Field(None, alias="viewBox")
    width: str | None = None
    height: str | None = None
    title: str | None = None


class IconDetail(CatalogEntry):
    svg: SvgMetadata | None = None


class Manifest(BaseModel):
    version: str
    generated: datetime
    total: int
    categories: dict[str, int]
    icons: list[CatalogEntry]


class PaginatedIcons(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    has_more: bool = Field(alias="hasMore")
    icons: list[CatalogEntry]
    categories: dict[str, int]


class CategoryStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    categories: dict[str, int]
    available_categories: list[str] = Field(alias="availableCategories")


class HealthRead(BaseModel):
    status: str
    timestamp: datetime
    total: int
    source: str


class RescanRead(BaseModel):
    total: int
    source: str
    categories: dict[str, int]


class PostCreate(BaseModel):
    template: str = Field("tools-spotlight", max_length=100)
    icons: list[str] = Field(..., min_length=1, max_length=50)

    @field_validator("icons")
    @classmethod
    def validate_icons(cls, v: list[str]) -> list[str]:
        """Strip names and drop blanks, keeping the caller's order."""
        cleaned = [name.strip() for name in v if isinstance(name, str) and name.strip()]
        if not cleaned:
            raise ValueError("At least one icon must be selected")
        return cleaned

    @field_validator("template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        clean = v.strip()
        return clean or "tools-spotlight"


class SelectedIcon(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    display_name: str = Field(alias="displayName")
    category: str


class PostRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    template: str
    selected_icons: list[SelectedIcon] = Field(alias="selectedIcons")
    post: str
    characters_count: int = Field(alias="charactersCount")
    generated_at: datetime = Field(alias="generatedAt")
