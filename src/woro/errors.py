class WoroError(Exception):
    """Base class for every error raised by woro."""


# --- Word list validation ---
class WordValidationError(WoroError, ValueError):
    pass


class EmptyFieldError(WordValidationError):
    def __init__(self, field: str):
        super().__init__(f"{field} must not be empty")
        self.field = field


class IndexOutOfRangeError(WordValidationError):
    def __init__(self, index: int, size: int):
        super().__init__(f"No word at index {index} (store has {size} words)")
        self.index = index
        self.size = size


# --- Persistence ---
class PersistenceError(WoroError):
    pass


class PersistenceWriteError(PersistenceError):
    pass


class PersistenceSerializeError(PersistenceError):
    pass


class PersistenceParseError(PersistenceError):
    pass


# --- Quiz flow ---
class QuizStateError(WoroError):
    pass
