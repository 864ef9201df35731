"""Unit tests for ai_handler.services.tasks.resolver.map_task."""

import pytest

from ai_handler.services.tasks.resolver import map_task


class TestAliasTable:
    """Explicit task names that go through the alias table."""

    @pytest.mark.parametrize("raw", ["getMarketIntel", "getmarketintel", "GETMARKETINTEL"])
    def test_market_intel_alias_any_case(self, raw):
        assert map_task("/whatever", raw) == "deal-assassin"

    @pytest.mark.parametrize("raw", ["getFutureIntel", "GETFUTUREINTEL"])
    def test_future_intel_alias(self, raw):
        assert map_task(None, raw) == "getFutureIntel"

    def test_default_maps_to_generic(self):
        assert map_task("/getmarketintel", "default") == "generic"

    def test_alias_wins_over_path(self):
        assert map_task("/api/getFutureIntel", "getMarketIntel") == "deal-assassin"


class TestRawPassThrough:
    """Non-aliased task names are returned verbatim."""

    def test_unknown_task_not_coerced_to_generic(self):
        assert map_task("/callGemini", "fooBar") == "fooBar"

    def test_casing_preserved(self):
        assert map_task("", "PING") == "PING"

    def test_known_task_name_passes_through(self):
        assert map_task("", "deal-assassin") == "deal-assassin"
        assert map_task("", "ping") == "ping"


class TestPathFallback:
    """Empty task falls back to the path suffix."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/api/getMarketIntel", "deal-assassin"),
            ("/.netlify/functions/GETMARKETINTEL", "deal-assassin"),
            ("/api/getFutureIntel", "getFutureIntel"),
            ("/callGemini", "generic"),
            ("/something/else", "generic"),
            ("", "generic"),
            (None, "generic"),
        ],
    )
    def test_path_suffix(self, path, expected):
        assert map_task(path, None) == expected

    def test_empty_string_task_uses_path(self):
        assert map_task("/getmarketintel", "") == "deal-assassin"

    def test_suffix_must_be_at_end(self):
        assert map_task("/getmarketintel/extra", None) == "generic"
