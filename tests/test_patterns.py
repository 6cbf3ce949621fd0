import re
from pathlib import Path

import pytest

from emoji_toolkit.emoji import dictionary as dictionary_module
from emoji_toolkit.emoji import patterns as patterns_module
from emoji_toolkit.emoji.patterns import (
    PAYLOAD_GROUP,
    PatternSet,
    ascii_fragment,
    combine,
    get_pattern_set,
    raw_fragment,
    read_fragments,
    shortcode_fragment,
)
from emoji_toolkit.utils.config import reload_config
from emoji_toolkit.utils.exceptions import EmojiDataError
from emoji_toolkit.models.emoji import create_emoji_record


def _payloads(pattern, text):
    return [match.group(PAYLOAD_GROUP) for match in pattern.finditer(text) if match.group(PAYLOAD_GROUP)]


class TestFragments:
    def test_fragments__no_records__never_match(self):
        for fragment in (ascii_fragment([]), raw_fragment([]), shortcode_fragment([])):
            assert re.search(fragment, "anything :) :smile: 😀") is None

    def test_raw_fragment__longer_sequences_first(self, records):
        alternatives = raw_fragment(records).split("|")
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"
        assert alternatives.index(re.escape(family)) < alternatives.index(re.escape("\U0001F468"))

    def test_shortcode_fragment__special_chars__escaped(self):
        record = create_emoji_record("👍", "thumbs up", "people", ["1f44d"], [":+1:"])
        assert re.fullmatch(shortcode_fragment([record]), ":+1:")
        assert re.fullmatch(shortcode_fragment([record]), ":1:") is None

    def test_ascii_fragment__records_without_ascii__skipped(self):
        records = [
            create_emoji_record("🐌", "snail", "nature", ["1f40c"], [":snail:"]),
            create_emoji_record("🙂", "smile", "people", ["1f642"], [":slight_smile:"], ascii=[":)"]),
        ]
        assert re.fullmatch(ascii_fragment(records), ":)")


class TestCombine:
    def test_combine__markup__empty_payload(self):
        pattern = re.compile(combine("x"))
        match = pattern.search('<img src="x" />')
        assert match.group(0) == '<img src="x" />'
        assert match.group(PAYLOAD_GROUP) is None

    def test_combine__span_element__ignored_with_content(self):
        pattern = re.compile(combine("x"))
        assert _payloads(pattern, "<span>x</span> x") == ["x"]

    def test_combine__object_element__ignored_with_content(self):
        pattern = re.compile(combine("x"))
        assert _payloads(pattern, '<object data="x">x</object>x') == ["x"]


class TestPatternSet:
    def test_ascii__boundaries__respected(self, patterns):
        assert _payloads(patterns.ascii, ":) a:) :)x :). (:P,") == [":)", ":)"]

    def test_ascii__case_sensitive(self, patterns):
        assert _payloads(patterns.ascii, ":d :D") == [":D"]

    def test_shortcode__case_insensitive(self, patterns):
        assert _payloads(patterns.shortcode, ":SNAIL: :snail:") == [":SNAIL:", ":snail:"]

    def test_raw__zwj_sequence__single_match(self, patterns):
        text = "\U0001F937\u200d♂\ufe0f"
        assert _payloads(patterns.raw, text) == [text]

    def test_find_raw__skips_markup(self, patterns):
        text = '<img alt="😀" /> 🐌 <span>🦄</span> 🐱'
        assert patterns.find_raw(text) == ["🐌", "🐱"]

    def test_find_raw__no_emoji__empty(self, patterns):
        assert patterns.find_raw("plain text :) :smile:") == []


class TestBundledFragments:
    """Готовые фрагменты для встроенной таблицы"""

    def test_read_fragments__equal_to_fragments_built_from_records(self, records):
        fragments = read_fragments()
        assert fragments["ascii"] == ascii_fragment(records)
        assert fragments["raw"] == raw_fragment(records)
        assert fragments["shortcode"] == shortcode_fragment(records)

    def test_from_fragments__bundled__same_matches_as_from_records(self, patterns):
        bundled = PatternSet.from_fragments(**read_fragments())
        text = "hi \U0001F44B\U0001F3FB :wave: :) <span>\U0001F40C</span> \U0001F468\u200d\U0001F469\u200d\U0001F466"
        assert bundled.find_raw(text) == patterns.find_raw(text)
        assert _payloads(bundled.shortcode, text) == _payloads(patterns.shortcode, text)
        assert _payloads(bundled.ascii, text) == _payloads(patterns.ascii, text)

    def test_read_fragments__missing_file__raises(self, monkeypatch):
        monkeypatch.setattr(patterns_module, "FRAGMENTS_FILE", "missing.json")
        with pytest.raises(EmojiDataError):
            read_fragments()

    def test_get_pattern_set__bundled_table__built_without_records(self, config_env):
        config_env.delenv("EMOJI_DATA_PATH", raising=False)
        reload_config()
        config_env.setattr(patterns_module, "_pattern_set", None)
        config_env.setattr(patterns_module, "get_emoji_dictionary", lambda: pytest.fail("records not needed"))

        pattern_set = get_pattern_set()
        assert pattern_set.find_raw("\U0001F64F") == ["\U0001F64F"]

    def test_get_pattern_set__custom_data_path__built_from_records(self, config_env):
        config_env.setenv("EMOJI_DATA_PATH", str(Path(__file__).parent / "data" / "emoji_sample.json"))
        reload_config()
        config_env.setattr(patterns_module, "_pattern_set", None)
        config_env.setattr(dictionary_module, "_emoji_dictionary", None)

        pattern_set = get_pattern_set()
        assert pattern_set.find_raw("\U0001F40C \U0001F64F") == ["\U0001F40C"]
