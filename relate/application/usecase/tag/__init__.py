"""Tag use cases."""

from .common import TagItem
from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .get_tag import GetTagRequest, GetTagResponse, GetTagUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .remove_tag import RemoveTagRequest, RemoveTagResponse, RemoveTagUseCase
from .update_tag import UpdateTagRequest, UpdateTagResponse, UpdateTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "GetTagRequest",
    "GetTagResponse",
    "GetTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "RemoveTagRequest",
    "RemoveTagResponse",
    "RemoveTagUseCase",
    "TagItem",
    "UpdateTagRequest",
    "UpdateTagResponse",
    "UpdateTagUseCase",
]
