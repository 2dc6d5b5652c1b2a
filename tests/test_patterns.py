"""Tests for search pattern construction and guarded replacement."""

import time

import pytest

from replacement.patterns import build_pattern, is_guarded, quote_term, quote_terms, replacer_for
from replacement.strategies import replace_with_strategies
from update.models import Single

CATS = Single("org.typelevel", "cats-core", "1.0.0", ("1.0.1",))


class TestQuoteTerm:
    def test_separators_become_optional_wildcards(self):
        assert quote_term("scala-library") == "scala.?library"
        assert quote_term("scala.library") == "scala.?library"

    def test_common_suffix_removed(self):
        assert quote_term("cats-core") == "cats.?"

    def test_regex_characters_escaped(self):
        assert quote_term("a+b") == "a\\+b"

    def test_degenerate_terms_dropped(self):
        assert quote_terms(["core", "-", ".core", "cats-core"]) == ["cats.?"]


class TestBuildPattern:
    def test_no_usable_terms(self):
        assert build_pattern(["server", ""], "1.0.0") is None

    def test_pattern_is_case_insensitive(self):
        pattern = build_pattern(["cats-core"], "1.0.0")
        assert pattern.search('"CATS-Core" % "1.0.0"') is not None

    def test_group_id_is_required_when_given(self):
        pattern = build_pattern(["cats-core"], "1.0.0", "org.typelevel")
        assert pattern.search('"cats-core" % "1.0.0"') is None
        assert pattern.search('"org.typelevel" %% "cats-core" % "1.0.0"') is not None

    def test_group_id_dots_are_literal(self):
        pattern = build_pattern(["cats-core"], "1.0.0", "org.typelevel")
        assert pattern.search('"orgXtypelevel" %% "cats-core" % "1.0.0"') is None

    def test_version_is_literal(self):
        pattern = build_pattern(["cats-core"], "1.0.0")
        assert pattern.search('"cats-core" % "1x0x0"') is None

    def test_identical_inputs_share_compiled_pattern(self):
        assert build_pattern(["cats-core"], "1.0.0") is build_pattern(["cats-core"], "1.0.0")


class TestGuard:
    @pytest.mark.parametrize("context", ["// ", "   // io.circe %% ", "The Previous version was "])
    def test_guarded(self, context):
        assert is_guarded(context)

    @pytest.mark.parametrize("context", ["", "val x = ", 'libraryDependencies += "'])
    def test_not_guarded(self, context):
        assert not is_guarded(context)


class TestReplacer:
    def test_only_version_literal_changes(self):
        text = 'lazy val x = 1\n"org.typelevel" %% "cats-core" % "1.0.0" // ok\n'
        replaced = replacer_for(CATS, ["cats-core"], include_group_id=False)(text)
        assert replaced == 'lazy val x = 1\n"org.typelevel" %% "cats-core" % "1.0.1" // ok\n'

    def test_only_first_match_replaced(self):
        text = "cats-core 1.0.0\ncats-core 1.0.0\n"
        replaced = replacer_for(CATS, ["cats-core"], include_group_id=False)(text)
        assert replaced == "cats-core 1.0.1\ncats-core 1.0.0\n"

    def test_guarded_first_match_stops_search(self):
        text = '// "cats-core" % "1.0.0"\n"cats-core" % "1.0.0"\n'
        assert replacer_for(CATS, ["cats-core"], include_group_id=False)(text) is None

    def test_no_match(self):
        assert replacer_for(CATS, ["cats-core"], include_group_id=False)("nothing here") is None

    def test_degenerate_terms_never_match(self):
        replace = replacer_for(CATS, ["core", "-"], include_group_id=False)
        assert replace('"core" % "1.0.0"') is None


class TestLongInput:
    """Whole files are scanned, so long single lines must stay fast."""

    def timed(self, func, *args):
        started = time.monotonic()
        result = func(*args)
        assert time.monotonic() - started < 5.0
        return result

    def test_long_line_without_version(self):
        text = "cats-" * 10000
        assert self.timed(replace_with_strategies, CATS, text) is None

    def test_long_line_with_version_before_anchors(self):
        text = "1.0.0 " + "cats-" * 10000
        assert self.timed(replace_with_strategies, CATS, text) is None

    def test_long_line_with_version_after_anchors(self):
        text = "cats-" * 10000 + '"1.0.0"'
        result = self.timed(replace_with_strategies, CATS, text)
        assert result.text == "cats-" * 10000 + '"1.0.1"'

    def test_long_line_with_many_versions(self):
        text = "x 1.0.0 " * 6000 + "\n"
        assert self.timed(replace_with_strategies, CATS, text) is None

    def test_match_after_long_unrelated_line(self):
        long_line = "x" * 50000 + " 1.0.0"
        text = long_line + '\n"cats-core" % "1.0.0"\n'
        replaced = self.timed(replacer_for(CATS, ["cats-core"], False), text)
        assert replaced == long_line + '\n"cats-core" % "1.0.1"\n'


class TestLineHandling:
    def test_version_without_anchor_on_earlier_line(self):
        text = 'version = "1.0.0"\n"cats-core" % "1.0.0"'
        replaced = replacer_for(CATS, ["cats-core"], include_group_id=False)(text)
        assert replaced == 'version = "1.0.0"\n"cats-core" % "1.0.1"'

    def test_first_version_after_anchor_replaced(self):
        text = "cats-core 1.0.0, also 1.0.0\n"
        replaced = replacer_for(CATS, ["cats-core"], include_group_id=False)(text)
        assert replaced == "cats-core 1.0.1, also 1.0.0\n"

    def test_anchor_and_version_on_different_lines(self):
        text = '"cats-core" %\n"1.0.0"\n'
        assert replacer_for(CATS, ["cats-core"], include_group_id=False)(text) is None

    def test_version_matched_case_insensitively(self):
        update = Single("org.typelevel", "cats-core", "1.0.0-RC1", ("1.0.0",))
        text = '"cats-core" % "1.0.0-rc1"'
        assert replacer_for(update, ["cats-core"], include_group_id=False)(text) == '"cats-core" % "1.0.0"'
