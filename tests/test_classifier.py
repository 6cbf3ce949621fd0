import pytest

from emoji_toolkit.utils.exceptions import InvalidArgumentError

FAMILY_MWGB = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"
MAN_SHRUGGING = "\U0001F937\u200d♂\ufe0f"


class TestIsEmoji:
    """Классификатор: строка только из эмодзи"""

    @pytest.mark.parametrize("text", [
        "😀",
        "😀😀😀",
        "😀 😀\n😀\t",
        "🐌\ufe0f",
        "❤",
        "❤\ufe0f",
        "\U0001F44D\U0001F3FB",
        FAMILY_MWGB,
        MAN_SHRUGGING,
        "1\ufe0f\u20e3",
        "#\ufe0f\u20e3",
        "\ud83d\ude00",
        "©",
        "\U0001F64F",
        "\U0001F64F\U0001F3FD \U0001F44B",
        "\U0001F9D1\u200d\U0001F9D1\u200d\U0001F9D2",
        "\U0001FAE8",
    ])
    def test_is_emoji__emoji_only__true(self, classifier, text):
        assert classifier.is_emoji(text) is True

    @pytest.mark.parametrize("text", [
        "",
        "   \n\t",
        "a",
        "hello 😀",
        "😀a",
        "1",
        "😀1",
        "#",
        "§",
        "\U0001F3FB",
        "\ufffc",
        "😀\ufffc",
    ])
    def test_is_emoji__not_only_emoji__false(self, classifier, text):
        assert classifier.is_emoji(text) is False

    def test_is_emoji__max_symbol_count_exceeded__false(self, classifier):
        assert classifier.is_emoji("😀😀", 1) is False

    def test_is_emoji__max_symbol_count_reached__true(self, classifier):
        assert classifier.is_emoji("😀😀", 2) is True

    def test_is_emoji__max_symbol_count_zero__false(self, classifier):
        assert classifier.is_emoji("😀", 0) is False

    def test_is_emoji__zwj_sequence__counted_once(self, classifier):
        assert classifier.is_emoji(FAMILY_MWGB, 1) is True
        assert classifier.is_emoji(FAMILY_MWGB + MAN_SHRUGGING, 1) is False

    def test_is_emoji__skin_tone__not_counted(self, classifier):
        assert classifier.is_emoji("\U0001F44D\U0001F3FB\U0001F44D\U0001F3FF", 2) is True

    def test_is_emoji__keycap__counted_once(self, classifier):
        assert classifier.is_emoji("1\ufe0f\u20e3", 1) is True

    def test_is_emoji__unknown_symbol_with_vs16__accepted(self, classifier):
        assert classifier.is_emoji("§\ufe0f") is True

    def test_is_emoji__digit_without_vs16_before_emoji__false(self, classifier):
        assert classifier.is_emoji("1😀") is False

    def test_is_emoji__none__raises_invalid_argument(self, classifier):
        with pytest.raises(InvalidArgumentError):
            classifier.is_emoji(None)
