"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, PostItem
from .get_post import GetPostRequest, GetPostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "PostItem",
]
