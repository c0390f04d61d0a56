"""Unit tests for the naming helpers (artisan.naming).

Tests cover:
- title_case / to_camel_case / to_kebab_case / to_snake_case
- migration_timestamp formatting and UTC normalisation
- NamingContext construction and template variables
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from artisan.naming import (
    NamingContext,
    migration_timestamp,
    title_case,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# title_case
# ---------------------------------------------------------------------------


class TestTitleCase:
    def test_two_words(self):
        assert title_case("hello world") == "Hello World"

    def test_single_word(self):
        assert title_case("post") == "Post"

    def test_already_titled(self):
        assert title_case("UserProfile") == "UserProfile"

    def test_hyphen_starts_new_word(self):
        assert title_case("blog-post") == "Blog-Post"

    def test_underscore_is_part_of_word(self):
        assert title_case("user_name") == "User_name"

    def test_digits_are_word_characters(self):
        assert title_case("v2 api") == "V2 Api"

    def test_empty(self):
        assert title_case("") == ""


# ---------------------------------------------------------------------------
# to_camel_case
# ---------------------------------------------------------------------------


class TestToCamelCase:
    def test_underscore(self):
        assert to_camel_case("user_name") == "userName"

    def test_hyphen(self):
        assert to_camel_case("user-name") == "userName"

    def test_mixed_separators(self):
        assert to_camel_case("blog_post-comment") == "blogPostComment"

    def test_mixed_case_without_separators_unchanged(self):
        assert to_camel_case("UserProfile") == "UserProfile"

    def test_leading_case_preserved(self):
        assert to_camel_case("User_name") == "UserName"

    def test_trailing_separator_kept(self):
        assert to_camel_case("user_") == "user_"

    @pytest.mark.parametrize(
        "value",
        ["user_name", "user-name", "a-b-c", "foo_bar-baz", "order_item_line", "x_1", "Post"],
    )
    def test_separators_are_consumed(self, value):
        assert re.search(r"[-_][a-z]", to_camel_case(value)) is None


# ---------------------------------------------------------------------------
# to_kebab_case / to_snake_case
# ---------------------------------------------------------------------------


class TestToKebabCase:
    def test_pascal(self):
        assert to_kebab_case("UserName") == "user-name"

    def test_underscores(self):
        assert to_kebab_case("user_name") == "user-name"

    def test_whitespace_runs_collapse(self):
        assert to_kebab_case("user   name") == "user-name"

    def test_mixed_runs_collapse(self):
        assert to_kebab_case("user _ name") == "user-name"

    def test_consecutive_capitals_not_split(self):
        assert to_kebab_case("HTTPServer") == "httpserver"


class TestToSnakeCase:
    def test_pascal(self):
        assert to_snake_case("UserName") == "user_name"

    def test_hyphens(self):
        assert to_snake_case("user-name") == "user_name"

    def test_whitespace(self):
        assert to_snake_case("user name") == "user_name"

    def test_camel(self):
        assert to_snake_case("blogPostComment") == "blog_post_comment"


# ---------------------------------------------------------------------------
# migration_timestamp
# ---------------------------------------------------------------------------


class TestMigrationTimestamp:
    def test_format(self):
        moment = datetime(2025, 1, 15, 10, 30, 45, 987654, tzinfo=timezone.utc)
        assert migration_timestamp(moment) == "20250115T103045"

    def test_truncates_to_seconds(self):
        a = datetime(2025, 1, 15, 10, 30, 45, 1, tzinfo=timezone.utc)
        b = datetime(2025, 1, 15, 10, 30, 45, 999999, tzinfo=timezone.utc)
        assert migration_timestamp(a) == migration_timestamp(b)

    def test_converts_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        moment = datetime(2025, 1, 15, 12, 30, 0, tzinfo=plus_two)
        assert migration_timestamp(moment) == "20250115T103000"

    def test_sorts_chronologically(self):
        earlier = migration_timestamp(datetime(2025, 1, 15, 10, 30, 0, tzinfo=timezone.utc))
        later = migration_timestamp(datetime(2025, 1, 15, 10, 30, 1, tzinfo=timezone.utc))
        assert earlier < later

    def test_defaults_to_now(self):
        assert re.fullmatch(r"\d{8}T\d{6}", migration_timestamp())


# ---------------------------------------------------------------------------
# NamingContext
# ---------------------------------------------------------------------------


class TestNamingContext:
    def test_from_raw(self):
        naming = NamingContext.from_raw("blog_post")
        assert naming.raw == "blog_post"
        assert naming.class_name == "Blog_post"
        assert naming.class_name_camel_case == "blogPost"
        assert naming.class_name_lower_case == "blog_post"
        assert naming.timestamp is None

    def test_lower_case_is_plain_lowercase(self):
        naming = NamingContext.from_raw("UserProfile")
        assert naming.class_name_lower_case == "userprofile"

    @pytest.mark.parametrize("raw", ["Post", "UserProfile", "order-item", "Line_Item"])
    def test_fields_consistent(self, raw):
        naming = NamingContext.from_raw(raw)
        assert naming.class_name_lower_case == raw.lower()
        assert naming.class_name == title_case(raw)
        assert naming.class_name_camel_case == to_camel_case(raw)

    def test_deterministic(self):
        assert NamingContext.from_raw("Post") == NamingContext.from_raw("Post")

    def test_frozen(self):
        naming = NamingContext.from_raw("Post")
        with pytest.raises(ValidationError):
            naming.raw = "Other"

    def test_template_context_keys(self):
        context = NamingContext.from_raw("Post").template_context()
        assert context == {
            "className": "Post",
            "classNameCamelCase": "Post",
            "classNameLowerCase": "post",
        }

    def test_template_context_includes_timestamp(self):
        context = NamingContext.from_raw("Post", timestamp="20250115T103000").template_context()
        assert context["timestamp"] == "20250115T103000"
