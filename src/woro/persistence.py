import logging
import os
from pathlib import Path
from typing import List, Sequence

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import (
    PersistenceError,
    PersistenceParseError,
    PersistenceSerializeError,
    PersistenceWriteError,
)
from .models import StoredWord, Word

logger = logging.getLogger(__name__)

WordList = TypeAdapter(List[Word])
StoredWordList = TypeAdapter(List[StoredWord])


class PersistenceGateway:
    """Keeps the word list in a pretty-printed JSON file.

    Neither ``save`` nor ``load`` raises: failures are logged and the caller
    carries on with its in-memory state (or with an empty list on load).
    """

    def __init__(self, path):
        self.path = Path(path)

    # ---- Codec ----
    def _serialize(self, words: Sequence[Word]) -> bytes:
        try:
            return WordList.dump_json(list(words), indent=2)
        except PydanticSerializationError as e:
            raise PersistenceSerializeError(f"Error serializing words: {e}") from e

    def _deserialize(self, data: bytes) -> List[Word]:
        try:
            stored = StoredWordList.validate_json(data)
        except ValidationError as e:
            raise PersistenceParseError(f"Error parsing {self.path}: {e}") from e
        return [Word(**w.model_dump()) for w in stored]

    # ---- IO ----
    def _write(self, payload: bytes):
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "wb") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceWriteError(f"Error saving to {self.path}: {e}") from e

    def save(self, words: Sequence[Word]) -> bool:
        try:
            self._write(self._serialize(words))
        except PersistenceError as e:
            logger.error(str(e))
            return False
        return True

    def load(self) -> List[Word]:
        if not self.path.exists():
            logger.info(f"No word file at {self.path}, starting with an empty list")
            return []
        try:
            with open(self.path, "rb") as f:
                words = self._deserialize(f.read())
        except OSError as e:
            logger.error(f"Error reading {self.path}: {e}")
            return []
        except PersistenceParseError as e:
            logger.error(str(e))
            return []

        logger.info(f"Loaded {len(words)} words from {self.path}")
        return words
