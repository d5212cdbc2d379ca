"""
Tests for the deep-merge helpers behind config composition.
"""

from wedsite.utils.merge import deep_merge, merge_sections, prune_empty


class TestDeepMerge:
    def test_nested_dicts_merge(self):
        base = {"theme": {"colors": {"primary": "#111", "accent": "#222"}, "fonts": {"body": "Inter"}}}
        override = {"theme": {"colors": {"primary": "#999"}}}

        merged = deep_merge(base, override)

        assert merged == {"theme": {"colors": {"primary": "#999", "accent": "#222"}, "fonts": {"body": "Inter"}}}

    def test_lists_replace_wholesale(self):
        base = {"timeline": {"events": [{"title": "Ceremony"}, {"title": "Dinner"}]}}
        merged = deep_merge(base, {"timeline": {"events": [{"title": "Party"}]}})
        assert merged["timeline"]["events"] == [{"title": "Party"}]

    def test_inputs_not_mutated(self):
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}
        merged = deep_merge(base, override)
        merged["a"]["b"] = 100

        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}}

    def test_empty_override(self):
        assert deep_merge({"a": 1}, None) == {"a": 1}
        assert deep_merge({"a": 1}, {}) == {"a": 1}


class TestMergeSections:
    def test_partial_section_keeps_default_fields(self):
        defaults = {"wedding": {"date": "2025-06-15", "venue": "Grand Ballroom"}}
        merged = merge_sections(defaults, {"wedding": {"date": "X"}})

        assert merged["wedding"] == {"date": "X", "venue": "Grand Ballroom"}

    def test_none_section_ignored(self):
        defaults = {"couple": {"brideName": "Jane"}}
        assert merge_sections(defaults, {"couple": None}) == defaults

    def test_new_sections_added(self):
        merged = merge_sections({"couple": {}}, {"custom": {"flag": True}})
        assert merged["custom"] == {"flag": True}

    def test_non_dict_section_replaces(self):
        merged = merge_sections({"venues": [{"id": "a"}]}, {"venues": []})
        assert merged["venues"] == []


class TestPruneEmpty:
    def test_blank_strings_dropped(self):
        assert prune_empty({"title": "  ", "subtitle": "Hi"}) == {"subtitle": "Hi"}

    def test_empty_containers_dropped(self):
        assert prune_empty({"labels": {"days": ""}, "x": "y"}) == {"x": "y"}

    def test_list_with_blank_entry_is_dropped(self):
        assert prune_empty({"dayLabels": ["Sun", "", "Tue"]}) == {}

    def test_non_strings_kept(self):
        assert prune_empty({"maxGuests": 0, "enabled": False}) == {"maxGuests": 0, "enabled": False}
