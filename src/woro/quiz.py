import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional

from .config import settings
from .errors import QuizStateError
from .importer import PathLike, import_file, parse_csv_word_list, parse_word_list
from .models import (
    AnswerResult,
    CurrentWord,
    ImportResult,
    Progress,
    QuizMode,
    QuizState,
    Word,
)
from .persistence import PersistenceGateway
from .store import WordStore

logger = logging.getLogger(__name__)


# --- Strategy Pattern: Word Selection ---
class WordSelector(ABC):
    """Picks the index of the next word to ask."""

    @abstractmethod
    def select(self, words: List[Word]) -> int:
        pass


class RandomWordSelector(WordSelector):
    """Uniform choice over every index, repeats allowed."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def select(self, words: List[Word]) -> int:
        return self.rng.randrange(len(words))


def normalize_answer(text: str) -> str:
    return text.strip().lower()


class QuizEngine:
    """Owns the word list and drives the quiz.

    Modes: COLLECTING (no active question), ASKING (``current_index`` points
    at the word being asked) and COMPLETED (every word mastered). The backing
    file is rewritten after every change to the word list.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        selector: Optional[WordSelector] = None,
    ):
        self.gateway = gateway
        self.selector = selector or RandomWordSelector()
        self.store = WordStore(gateway.load(), on_change=self.gateway.save)
        self.mode = QuizMode.COLLECTING
        self.current_index: Optional[int] = None
        self.feedback = ""

    # ---- Word list ----
    @property
    def words(self) -> List[Word]:
        return self.store.words

    def _collect(self):
        self.mode = QuizMode.COLLECTING
        self.current_index = None
        self.feedback = ""

    def add_word(self, foreign: str, translation: str) -> Word:
        word = self.store.add(foreign, translation)
        self._collect()
        return word

    def delete_word(self, index: int) -> Word:
        word = self.store.delete(index)
        self._collect()
        return word

    def _apply_import(self, result: ImportResult) -> ImportResult:
        self.store.bulk_add(result.words)
        self._collect()
        logger.info(f"Added {result.accepted} words, skipped {result.rejected} invalid lines")
        return result

    def import_text(self, content: str) -> ImportResult:
        return self._apply_import(parse_word_list(content))

    def import_csv(self, source) -> ImportResult:
        return self._apply_import(parse_csv_word_list(source))

    def import_file(self, path: PathLike) -> ImportResult:
        return self._apply_import(import_file(path))

    # ---- Quiz flow ----
    @property
    def current_word(self) -> Optional[Word]:
        if self.mode != QuizMode.ASKING or self.current_index is None:
            return None
        return self.store[self.current_index].model_copy()

    def _pick_word(self):
        self.current_index = self.selector.select(self.store.words)
        self.mode = QuizMode.ASKING

    def start(self) -> Optional[Word]:
        if not len(self.store):
            raise QuizStateError("Add some words before starting the quiz")
        self.feedback = ""
        if self.store.is_mastered():
            self.mode = QuizMode.COMPLETED
            self.current_index = None
            return None
        self._pick_word()
        return self.current_word

    def stop(self):
        self._collect()

    def submit_answer(self, text: str) -> AnswerResult:
        word = self.current_word
        if word is None:
            raise QuizStateError("No word is being asked")

        old_level = word.level
        correct = normalize_answer(text) == normalize_answer(word.translation)
        if correct:
            new_level = self.store.promote(self.current_index)
            if old_level < settings.MAX_LEVEL:
                feedback = f"Correct! Level: {old_level} → {new_level}"
            else:
                feedback = "Correct! Already mastered!"
        else:
            new_level = self.store.demote(self.current_index)
            feedback = (
                f"Wrong! Correct answer: {word.translation} "
                f"(Level: {old_level} → {new_level})"
            )

        result = AnswerResult(
            correct=correct,
            foreign=word.foreign,
            expected=word.translation,
            old_level=old_level,
            new_level=new_level,
            feedback=feedback,
        )

        if self.store.is_mastered():
            self.mode = QuizMode.COMPLETED
            self.current_index = None
            self.feedback = ""
            result.completed = True
            logger.info(f"All {len(self.store)} words mastered")
        else:
            self.feedback = feedback
            self._pick_word()
        return result

    def replay(self) -> Word:
        if self.mode != QuizMode.COMPLETED:
            raise QuizStateError("Replay is only possible once every word is mastered")
        self.store.reset_all_levels()
        self.feedback = ""
        self._pick_word()
        return self.current_word

    # ---- Presentation ----
    def progress(self) -> Progress:
        mastered = self.store.mastered_count()
        total = len(self.store)
        return Progress(mastered=mastered, total=total, ratio=mastered / max(total, 1))

    def snapshot(self) -> QuizState:
        word = self.current_word
        current = CurrentWord(foreign=word.foreign, level=word.level) if word else None
        return QuizState(
            mode=self.mode,
            current=current,
            feedback=self.feedback,
            progress=self.progress(),
        )
