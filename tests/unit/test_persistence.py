import json
import logging

import allure
import pytest
from pydantic_core import PydanticSerializationError

from woro import persistence
from woro.models import Word
from woro.persistence import PersistenceGateway

pytestmark = pytest.mark.unit


@allure.feature("Persistence")
class TestSave:
    def test_round_trip_preserves_order_and_fields(self, gateway, sample_words):
        assert gateway.save(sample_words)
        assert gateway.load() == sample_words

    def test_empty_list_round_trip(self, gateway):
        assert gateway.save([])
        assert gateway.load() == []

    def test_file_is_readable_json(self, gateway, words_path):
        gateway.save([Word(foreign="Straße", translation="street", level=4)])

        text = words_path.read_text(encoding="utf-8")

        assert "Straße" in text
        assert "\n  " in text
        assert json.loads(text) == [{"foreign": "Straße", "translation": "street", "level": 4}]

    def test_save_overwrites_wholesale(self, gateway, sample_words):
        gateway.save(sample_words)
        gateway.save(sample_words[:1])
        assert gateway.load() == sample_words[:1]

    def test_creates_parent_directory(self, tmp_path):
        gateway = PersistenceGateway(tmp_path / "nested" / "dir" / "words.json")
        assert gateway.save([Word(foreign="a", translation="b")])
        assert gateway.path.exists()

    def test_write_failure_is_logged_and_swallowed(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        gateway = PersistenceGateway(blocker / "words.json")

        with caplog.at_level(logging.ERROR):
            assert gateway.save([Word(foreign="a", translation="b")]) is False

        assert "Error saving to" in caplog.text

    def test_serialize_failure_is_logged_and_swallowed(self, gateway, words_path, monkeypatch, caplog):
        class Broken:
            def dump_json(self, *args, **kwargs):
                raise PydanticSerializationError("boom")

        monkeypatch.setattr(persistence, "WordList", Broken())

        with caplog.at_level(logging.ERROR):
            assert gateway.save([Word(foreign="a", translation="b")]) is False

        assert "Error serializing words" in caplog.text
        assert not words_path.exists()


@allure.feature("Persistence")
class TestLoad:
    def test_missing_file_is_first_run(self, gateway, caplog):
        with caplog.at_level(logging.ERROR):
            assert gateway.load() == []
        assert caplog.records == []

    def test_levels_are_not_clamped(self, gateway, words_path):
        words_path.write_text(
            json.dumps(
                [
                    {"foreign": "casa", "translation": "house", "level": 9},
                    {"foreign": "perro", "translation": "dog", "level": 0},
                ]
            ),
            encoding="utf-8",
        )

        assert [w.level for w in gateway.load()] == [9, 0]

    @pytest.mark.parametrize(
        "content",
        [
            "not json at all",
            '{"foreign": "casa"}',
            '[{"foreign": "casa", "translation": "house"',
            '[{"foreign": "casa"}]',
            '[{"foreign": "casa", "translation": "house"}]',
            '[{"foreign": "casa", "translation": "house", "level": "3"}]',
            '[{"foreign": "casa", "translation": "house", "level": 2.5}]',
            '[{"foreign": 7, "translation": "house", "level": 2}]',
        ],
    )
    def test_malformed_file_yields_empty_list(self, gateway, words_path, caplog, content):
        words_path.write_text(content, encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            assert gateway.load() == []

        assert "Error parsing" in caplog.text
