import logging
from typing import Callable, Iterable, Iterator, List, Optional

from .config import settings
from .errors import EmptyFieldError, IndexOutOfRangeError
from .models import Word

logger = logging.getLogger(__name__)


class WordStore:
    """Ordered, duplicate-friendly collection of words.

    Every mutation calls ``on_change`` with the full word list once it is done,
    which is how the engine keeps the backing file in sync.
    """

    def __init__(
        self,
        words: Optional[Iterable[Word]] = None,
        on_change: Optional[Callable[[List[Word]], None]] = None,
    ):
        self._words: List[Word] = list(words or [])
        self.on_change = on_change

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __getitem__(self, index: int) -> Word:
        return self._words[index]

    @property
    def words(self) -> List[Word]:
        """Copies of the stored words; edit through the store methods."""
        return [w.model_copy() for w in self._words]

    def _changed(self):
        if self.on_change is not None:
            self.on_change(self._words)

    def add(self, foreign: str, translation: str) -> Word:
        foreign = foreign.strip()
        translation = translation.strip()
        if not foreign:
            raise EmptyFieldError("foreign")
        if not translation:
            raise EmptyFieldError("translation")

        word = Word(foreign=foreign, translation=translation)
        self._words.append(word)
        self._changed()
        return word.model_copy()

    def delete(self, index: int) -> Word:
        self._check_index(index)
        word = self._words.pop(index)
        self._changed()
        return word

    def bulk_add(self, words: Iterable[Word]) -> int:
        new_words = list(words)
        if not new_words:
            return 0
        self._words.extend(w.model_copy() for w in new_words)
        self._changed()
        return len(new_words)

    def _check_index(self, index: int):
        if not (0 <= index < len(self._words)):
            raise IndexOutOfRangeError(index, len(self._words))

    def promote(self, index: int) -> int:
        """Raises the level by one unless it is already at or above the max."""
        self._check_index(index)
        word = self._words[index]
        if word.level < settings.MAX_LEVEL:
            word.level += 1
        self._changed()
        return word.level

    def demote(self, index: int) -> int:
        """Lowers the level by one unless it is already at or below the min."""
        self._check_index(index)
        word = self._words[index]
        if word.level > settings.MIN_LEVEL:
            word.level -= 1
        self._changed()
        return word.level

    def reset_all_levels(self):
        for word in self._words:
            word.level = settings.MIN_LEVEL
        logger.info(f"Reset {len(self._words)} words to level {settings.MIN_LEVEL}")
        self._changed()

    def mastered_count(self) -> int:
        return sum(1 for w in self._words if w.level >= settings.MAX_LEVEL)

    def is_mastered(self) -> bool:
        return bool(self._words) and self.mastered_count() == len(self._words)
