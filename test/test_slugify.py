"""
Tests for slug generation and validation

Template slugs are the public part of every wedding site URL.
"""

import pytest

from wedsite.utils.slugify import is_valid_slug, slugify


class TestSlugify:
    def test_simple_names(self):
        assert slugify("Anna and David") == "anna-and-david"
        assert slugify("Wedding 2026") == "wedding-2026"

    def test_special_characters_collapse_to_single_hyphen(self):
        assert slugify("Anna & David!") == "anna-david"
        assert slugify("  Too   Many   Spaces  ") == "too-many-spaces"

    def test_transliterates_non_latin_names(self):
        assert slugify("Café Élysée") == "cafe-elysee"
        assert slugify("Анна и Давид") == "anna-i-david"

    def test_armenian_names_transliterate(self):
        slug = slugify("Աննա")
        assert slug
        assert is_valid_slug(slug)

    def test_nothing_sluggable(self):
        assert slugify("!!!") == ""


class TestIsValidSlug:
    @pytest.mark.parametrize("value", ["t1", "anna-david", "wedding-2026", "a"])
    def test_valid(self, value):
        assert is_valid_slug(value)

    @pytest.mark.parametrize("value", ["", "Anna", "anna_david", "t/legacy", "anna david", " anna"])
    def test_invalid(self, value):
        assert not is_valid_slug(value)
