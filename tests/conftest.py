import pytest

from emoji_toolkit.emoji.dictionary import EmojiDictionary
from emoji_toolkit.emoji.patterns import PatternSet
from emoji_toolkit.emoji.processor import EmojiProcessor
from emoji_toolkit.emoji.classifier import EmojiClassifier
from emoji_toolkit.emoji.provider import EmojiDataProvider
from emoji_toolkit.utils.config import reload_config


@pytest.fixture(scope="session")
def records():
    return EmojiDataProvider().load()


@pytest.fixture(scope="session")
def dictionary(records):
    return EmojiDictionary(records)


@pytest.fixture(scope="session")
def patterns(records):
    return PatternSet.from_records(records)


@pytest.fixture(scope="session")
def processor(dictionary, patterns):
    return EmojiProcessor(dictionary, patterns)


@pytest.fixture(scope="session")
def classifier(dictionary):
    return EmojiClassifier(dictionary)


@pytest.fixture
def config_env(monkeypatch):
    """Переменные окружения EMOJI_* с перезагрузкой конфигурации после теста"""
    yield monkeypatch
    monkeypatch.undo()
    reload_config()
