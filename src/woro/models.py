from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


# --- Domain ---
class Word(BaseModel):
    foreign: str
    translation: str
    level: int = 1


class StoredWord(BaseModel):
    """A word as written in the backing file. Every field is required and typed."""

    model_config = ConfigDict(strict=True)

    foreign: str
    translation: str
    level: int


class QuizMode(str, Enum):
    COLLECTING = "collecting"
    ASKING = "asking"
    COMPLETED = "completed"


class ImportResult(BaseModel):
    words: List[Word] = []
    accepted: int = 0
    rejected: int = 0


class AnswerResult(BaseModel):
    correct: bool
    foreign: str
    expected: str
    old_level: int
    new_level: int
    feedback: str
    completed: bool = False


class Progress(BaseModel):
    mastered: int
    total: int
    ratio: float


class CurrentWord(BaseModel):
    foreign: str
    level: int


class QuizState(BaseModel):
    mode: QuizMode
    current: Optional[CurrentWord] = None
    feedback: str = ""
    progress: Progress


# --- Request bodies ---
class NewWord(BaseModel):
    foreign: str
    translation: str


class AnswerSubmission(BaseModel):
    answer: str


class ImportRequest(BaseModel):
    content: str


class ImportSummary(BaseModel):
    accepted: int
    rejected: int
    total_words: int
