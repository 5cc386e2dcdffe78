import os


class Settings:
    PROJECT_NAME: str = "woro"
    DEBUG: bool = os.environ.get("WORO_DEBUG", "").lower() in ("1", "true", "yes")
    LOG_DIR: str = os.environ.get("WORO_LOG_DIR", "log")
    LOG_FILE: str = "woro.log"
    WORDS_FILE: str = os.environ.get("WORO_WORDS_FILE", "words_data.json")
    MIN_LEVEL: int = 1
    MAX_LEVEL: int = 5
    HOST: str = os.environ.get("WORO_HOST", "127.0.0.1")
    PORT: int = int(os.environ.get("WORO_PORT", "8000"))
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
