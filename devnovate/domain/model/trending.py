"""Trending scores for published blogs.

Each algorithm is a weighted sum of the engagement counters; `velocity`
divides by the age in hours and `recent` subtracts the age in days. Blogs
are ranked by score, newest first on ties. `popularity` ranks by likes,
then views, then recency without a score.
"""

from datetime import datetime
from typing import NamedTuple

from devnovate.domain.model.blog import Blog
from devnovate.domain.value import TrendingAlgorithm


class Weights(NamedTuple):
    likes: float
    comments: float
    views: float


WEIGHTS: dict[TrendingAlgorithm, Weights] = {
    TrendingAlgorithm.ENGAGEMENT: Weights(likes=5, comments=10, views=0.1),
    TrendingAlgorithm.VELOCITY: Weights(likes=3, comments=5, views=1),
    TrendingAlgorithm.RECENT: Weights(likes=2, comments=3, views=0.05),
}

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


def weighted(blog: Blog, weights: Weights) -> float:
    return (
        blog.likes * weights.likes
        + blog.comments * weights.comments
        + blog.views * weights.views
    )


def trending_score(blog: Blog, algorithm: TrendingAlgorithm, now: datetime) -> float:
    """Score of a blog under a scored algorithm.

    Raises:
        KeyError: For `popularity`, which has no score
    """
    weights = WEIGHTS[algorithm]
    age = (now - blog.created_at).total_seconds()

    if algorithm == TrendingAlgorithm.VELOCITY:
        hours = age / SECONDS_PER_HOUR
        # Posts dated in the future have no velocity yet
        return weighted(blog, weights) / (hours + 1) if hours > 0 else 0.0
    if algorithm == TrendingAlgorithm.RECENT:
        return weighted(blog, weights) - age / SECONDS_PER_DAY
    return weighted(blog, weights)


def rank_key(algorithm: TrendingAlgorithm, now: datetime):
    """Sort key for `sorted(..., reverse=True)` under an algorithm."""
    if algorithm == TrendingAlgorithm.POPULARITY:
        return lambda b: (b.likes, b.views, b.created_at)
    return lambda b: (trending_score(b, algorithm, now), b.created_at)
