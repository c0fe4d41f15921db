"""Request bodies accepted by the HTTP layer.

The extension sends two different bodies to add profiles in bulk. They are
decoded here into one of two variants so the membership service never has to
look at raw fields.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ValidationError, field_validator

from linkhub.errors import InvalidShape


class Profile(BaseModel):
    linkedin_id: str = ""
    name: str = ""
    photo: str = ""
    url: str = ""
    headline: str = ""

    @field_validator("linkedin_id", "name", "photo", "url", "headline", mode="before")
    @classmethod
    def blank_if_missing(cls, value):
        if value is None:
            return ""
        return str(value)


class SelectedFeeds(BaseModel):
    """One profile added to every feed in ``selected``."""

    selected: List[str]
    profile: Profile


class SingleList(BaseModel):
    """Several profiles added to the feed ``listId``."""

    listId: str
    profiles: List[Profile]

    @field_validator("listId")
    @classmethod
    def not_blank(cls, value):
        if not value:
            raise ValueError("listId must not be empty")
        return value


BulkAdd = Union[SelectedFeeds, SingleList]


def decode_bulk_add(body: dict) -> BulkAdd:
    for variant in (SelectedFeeds, SingleList):
        try:
            return variant.model_validate(body)
        except ValidationError:
            continue
    raise InvalidShape(body.keys())


class FeedCreate(BaseModel):
    name: Optional[str] = None
    is_private: bool = False

    @field_validator("is_private", mode="before")
    @classmethod
    def truthy(cls, value):
        return bool(value)


class FeedUpdate(BaseModel):
    name: Optional[str] = None
    is_private: Optional[bool] = None
    position: Optional[int] = None

    @field_validator("is_private", mode="before")
    @classmethod
    def truthy(cls, value):
        return None if value is None else bool(value)

    def changes(self) -> dict:
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class FeedPosition(BaseModel):
    id: str
    position: int

    @field_validator("id", mode="before")
    @classmethod
    def as_text(cls, value):
        return value if value is None else str(value)


class ReorderRequest(BaseModel):
    feeds: List[FeedPosition] = []

    @field_validator("feeds", mode="before")
    @classmethod
    def empty_unless_list(cls, value):
        return value if isinstance(value, list) else []


class ListDescriptor(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    is_private: bool = False
    position: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def as_text(cls, value):
        return value if value is None else str(value)

    @field_validator("is_private", mode="before")
    @classmethod
    def truthy(cls, value):
        return bool(value)

    @field_validator("position", mode="before")
    @classmethod
    def zero_if_missing(cls, value):
        return value or 0


class SyncListsRequest(BaseModel):
    lists: List[ListDescriptor] = []

    @field_validator("lists", mode="before")
    @classmethod
    def empty_unless_list(cls, value):
        return value if isinstance(value, list) else []


class CommentUpsert(BaseModel):
    post_text: Optional[str] = ""
    comment_text: Optional[str] = ""
    post_urn: Optional[str] = ""


class GenerateRequest(BaseModel):
    post_text: Optional[str] = None
    comment_text: Optional[str] = None
    postContent: Optional[str] = None
    is_reply_to_comment: bool = False

    @field_validator("is_reply_to_comment", mode="before")
    @classmethod
    def truthy(cls, value):
        return bool(value)

    def post_first(self) -> str:
        return self.post_text or self.comment_text or ""

    def comment_first(self) -> str:
        return self.comment_text or self.post_text or ""
