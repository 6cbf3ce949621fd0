import json
from pathlib import Path

import pytest

from emoji_toolkit.emoji.provider import EmojiDataProvider
from emoji_toolkit.utils.exceptions import EmojiDataError

SNAIL = {
    "name": "snail",
    "category": "nature",
    "shortname": ":snail:",
    "shortname_alternates": [],
    "ascii": [],
    "code_points": {"base": "1f40c", "fully_qualified": "1f40c"},
    "keywords": ["snail", "uc6"],
    "unicode_version": "6.0",
}

SAMPLE_PATH = Path(__file__).parent / "data" / "emoji_sample.json"


def _write(tmp_path, data):
    path = tmp_path / "emoji.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestBundledData:
    def test_load__bundled_file__all_records_in_file_order(self, records):
        assert len(records) == 3782
        assert records[0].shortcode == ":grinning:"
        assert records[-1].shortcode == ":wales:"

    def test_load__bare_digits_and_symbols__excluded(self, records):
        raws = {emoji.raw for emoji in records}
        for char in "0123456789#*":
            assert char not in raws

    def test_load__keycaps__kept(self, records):
        shortcodes = {emoji.shortcode for emoji in records}
        assert {":hash:", ":asterisk:", ":one:", ":nine:"} <= shortcodes

    def test_load__version_keywords__removed_from_tags(self, records):
        for emoji in records:
            assert not any(tag.startswith("uc") and tag[2:].isdigit() for tag in emoji.tags or ())

    def test_load__empty_ascii__none(self, records):
        snail = next(emoji for emoji in records if emoji.shortcode == ":snail:")
        assert snail.ascii is None
        assert snail.tags == ("snail", "animal", "bug")

    def test_source__default__package_resource(self):
        assert EmojiDataProvider().source == "emoji_toolkit.data/emoji.json"


class TestSampleFile:
    """Короткая выборка таблицы в том же формате"""

    @pytest.fixture(scope="class")
    def sample(self):
        return EmojiDataProvider(SAMPLE_PATH).load()

    def test_load__sample__records_in_file_order(self, sample):
        assert len(sample) == 63
        assert sample[0].shortcode == ":grinning:"
        assert sample[-1].shortcode == ":flag_us:"

    def test_load__sample_bare_digits__excluded(self, sample):
        shortcodes = {emoji.shortcode for emoji in sample}
        assert ":hash:" in shortcodes
        assert not any(emoji.raw in "0123456789#*" for emoji in sample)

    def test_load__sample_version_keywords__removed(self, sample):
        snail = next(emoji for emoji in sample if emoji.shortcode == ":snail:")
        assert snail.tags == ("snail",)

    def test_load__sample_records__subset_of_bundled(self, sample, dictionary):
        for emoji in sample:
            assert dictionary.get(emoji.shortcode).codepoints == emoji.codepoints


class TestCustomFile:
    def test_load__custom_file__records_converted(self, tmp_path):
        heart = {
            "name": "red heart",
            "category": "symbols",
            "shortname": ":heart:",
            "shortname_alternates": [":love:"],
            "ascii": ["<3"],
            "code_points": {"base": "2764", "fully_qualified": "2764-fe0f"},
            "keywords": ["love", "uc1"],
            "unicode_version": 1.1,
        }
        records = EmojiDataProvider(_write(tmp_path, {"1f40c": SNAIL, "2764": heart})).load()

        assert [emoji.name for emoji in records] == ["snail", "red heart"]
        emoji = records[1]
        assert emoji.raw == "❤\ufe0f"
        assert emoji.codepoints == ("2764", "2764-fe0f")
        assert emoji.shortcodes == (":heart:", ":love:")
        assert emoji.ascii == ("<3",)
        assert emoji.tags == ("love",)
        assert emoji.version == "1.1"

    def test_load__digit_entry__dropped(self, tmp_path):
        digit = dict(SNAIL, name="digit one", shortname=":digit_one:",
                     code_points={"base": "0031", "fully_qualified": "0031"})
        records = EmojiDataProvider(_write(tmp_path, {"0031": digit, "1f40c": SNAIL})).load()
        assert [emoji.shortcode for emoji in records] == [":snail:"]

    def test_load__missing_file__raises(self, tmp_path):
        with pytest.raises(EmojiDataError):
            EmojiDataProvider(tmp_path / "missing.json").load()

    def test_load__invalid_json__raises(self, tmp_path):
        path = tmp_path / "emoji.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(EmojiDataError):
            EmojiDataProvider(path).load()

    def test_load__not_an_object__raises(self, tmp_path):
        with pytest.raises(EmojiDataError):
            EmojiDataProvider(_write(tmp_path, [SNAIL])).load()

    def test_load__missing_field__raises(self, tmp_path):
        entry = {key: value for key, value in SNAIL.items() if key != "shortname"}
        with pytest.raises(EmojiDataError) as exc_info:
            EmojiDataProvider(_write(tmp_path, {"1f40c": entry})).load()
        assert "1f40c" in exc_info.value.details

    def test_load__bad_codepoint__raises(self, tmp_path):
        entry = dict(SNAIL, code_points={"base": "zz", "fully_qualified": "zz"})
        with pytest.raises(EmojiDataError):
            EmojiDataProvider(_write(tmp_path, {"zz": entry})).load()

    def test_load__invalid_shortcode__raises(self, tmp_path):
        entry = dict(SNAIL, shortname="snail")
        with pytest.raises(EmojiDataError):
            EmojiDataProvider(_write(tmp_path, {"1f40c": entry})).load()
