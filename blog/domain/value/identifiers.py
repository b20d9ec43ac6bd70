"""Strongly typed identifiers for blog domain entities.

NewType keeps post, comment and user IDs from being mixed up while
remaining plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
