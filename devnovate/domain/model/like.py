"""Like entity.

The existence of a Like for (blog, user) is what "user liked blog" means.
"""

from datetime import datetime

from pydantic import Field

from devnovate.domain.model.common import DomainModel
from devnovate.domain.value import BlogId, LikeId, UserId


class Like(DomainModel):
    """Like fact.

    Business rules:
    - One like per user per blog (enforced by database unique constraint)
    - Created on like, deleted on unlike, never updated
    """

    id: LikeId
    blog_id: BlogId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
