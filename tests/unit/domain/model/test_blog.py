"""Unit tests for the Blog model."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from devnovate.domain.model.blog import EXCERPT_LENGTH, make_excerpt
from devnovate.domain.value import BlogStatus, Tag, UserId
from tests.conftest import make_blog


class TestMakeExcerpt:
    """Tests for make_excerpt."""

    def test_short_content_is_kept(self):
        assert make_excerpt("Short post") == "Short post"

    def test_long_content_is_cut_with_ellipsis(self):
        content = "x" * (EXCERPT_LENGTH + 50)

        excerpt = make_excerpt(content)

        assert excerpt == "x" * EXCERPT_LENGTH + "..."


class TestBlog:
    """Tests for Blog invariants."""

    def test_rejection_reason_requires_rejected_status(self):
        blog = make_blog(UserId(uuid4()), status=BlogStatus.PENDING)

        with pytest.raises(ValidationError):
            blog.revise(rejection_reason="Spam")

    def test_counters_cannot_be_negative(self):
        blog = make_blog(UserId(uuid4()))

        with pytest.raises(ValidationError):
            blog.revise(likes=-1)

    def test_tags_are_normalized(self):
        assert Tag("  Python ").root == "python"
        assert Tag("C++").root == "c++"

    @pytest.mark.parametrize("raw", ["", "has space", "-leading", "x" * 31])
    def test_invalid_tags_rejected(self, raw):
        with pytest.raises(ValidationError):
            Tag(raw)
