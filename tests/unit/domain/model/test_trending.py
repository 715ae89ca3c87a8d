"""Unit tests for trending scores."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from devnovate.domain.model.trending import rank_key, trending_score
from devnovate.domain.value import TrendingAlgorithm, UserId
from tests.conftest import make_blog

NOW = datetime(2025, 3, 1, 12, 0, 0)


class TestTrendingScore:
    """Tests for trending_score."""

    def test_engagement(self):
        blog = make_blog(UserId(uuid4()), likes=2, views=30, comments=1, created_at=NOW)

        assert trending_score(blog, TrendingAlgorithm.ENGAGEMENT, NOW) == pytest.approx(23)

    def test_velocity_divides_by_age_in_hours_plus_one(self):
        blog = make_blog(
            UserId(uuid4()),
            likes=2,
            views=4,
            comments=1,
            created_at=NOW - timedelta(hours=2),
        )

        # (2*3 + 1*5 + 4) / (2 + 1)
        assert trending_score(blog, TrendingAlgorithm.VELOCITY, NOW) == pytest.approx(5)

    def test_velocity_of_unaged_post_is_zero(self):
        blog = make_blog(UserId(uuid4()), likes=10, created_at=NOW)

        assert trending_score(blog, TrendingAlgorithm.VELOCITY, NOW) == 0

    def test_recent_subtracts_days(self):
        blog = make_blog(
            UserId(uuid4()),
            likes=3,
            views=20,
            comments=2,
            created_at=NOW - timedelta(days=4),
        )

        # 3*2 + 2*3 + 20*0.05 - 4
        assert trending_score(blog, TrendingAlgorithm.RECENT, NOW) == pytest.approx(9)

    def test_popularity_has_no_score(self):
        with pytest.raises(KeyError):
            trending_score(make_blog(UserId(uuid4())), TrendingAlgorithm.POPULARITY, NOW)


class TestRankKey:
    """Tests for rank_key."""

    def test_popularity_orders_by_likes_then_views(self):
        author = UserId(uuid4())
        a = make_blog(author, likes=3, views=1, created_at=NOW)
        b = make_blog(author, likes=3, views=9, created_at=NOW)
        c = make_blog(author, likes=5, views=0, created_at=NOW)

        ranked = sorted(
            [a, b, c], key=rank_key(TrendingAlgorithm.POPULARITY, NOW), reverse=True
        )

        assert ranked == [c, b, a]
