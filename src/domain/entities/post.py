"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """A user's like on a post."""

    user_id: UUID


@dataclass
class Comment:
    """A comment embedded in a post.

    ``name`` and ``avatar`` are a snapshot of the author taken when the
    comment was written.
    """

    user_id: UUID
    text: str
    name: str
    avatar: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a post with its likes and comments, newest first."""

    user_id: UUID
    text: str
    name: str
    avatar: str
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> None:
        self.likes.insert(0, Like(user_id=user_id))

    def remove_like(self, user_id: UUID) -> None:
        """Remove the user's like. Callers check ``is_liked_by`` first."""
        index = next(i for i, like in enumerate(self.likes) if like.user_id == user_id)
        del self.likes[index]

    def find_comment(self, comment_id: UUID) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def add_comment(self, comment: Comment) -> None:
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: UUID) -> None:
        """Remove a comment by its id. Callers check ``find_comment`` first."""
        index = next(i for i, c in enumerate(self.comments) if c.id == comment_id)
        del self.comments[index]
