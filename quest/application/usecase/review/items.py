"""Response items for review use cases."""

from datetime import datetime

from pydantic import BaseModel

from quest.domain.model import Review


class ReviewItem(BaseModel):
    """Review item."""

    id: str
    user_id: str
    game_id: str
    rating: int
    title: str | None
    content: str
    upvotes: int
    downvotes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_review(cls, review: Review) -> "ReviewItem":
        return cls(
            id=str(review.id),
            user_id=str(review.user_id),
            game_id=str(review.game_id),
            rating=review.rating,
            title=review.title,
            content=review.content,
            upvotes=review.upvotes,
            downvotes=review.downvotes,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )
