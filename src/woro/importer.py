"""Word-list import.

Plain-text lists hold one entry per line: a single-token foreign term followed
by its translation, which may span several words::

    # animals
    perro dog animal
    gato cat

Blank lines and ``#`` comments are ignored. Lines with fewer than two tokens
are rejected and counted. CSV lists need ``foreign`` (or ``word``) and
``translation`` columns.
"""
import logging
import os
from typing import Union

import pandas as pd

from .models import ImportResult, Word

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def parse_word_list(content: str) -> ImportResult:
    result = ImportResult()
    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split()
        if len(parts) < 2:
            result.rejected += 1
            continue

        result.words.append(Word(foreign=parts[0], translation=" ".join(parts[1:])))
        result.accepted += 1
    return result


def parse_csv_word_list(source) -> ImportResult:
    """Reads a CSV word list from a path or file-like object."""
    try:
        df = pd.read_csv(source, encoding="utf-8", dtype=str, keep_default_na=False)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read CSV word list: {e}")
        return ImportResult()

    df.columns = [str(c).strip().lower() for c in df.columns]
    if "foreign" not in df.columns and "word" in df.columns:
        df = df.rename(columns={"word": "foreign"})
    if "foreign" not in df.columns or "translation" not in df.columns:
        logger.error(f"Skipping CSV word list: Missing columns. Found {list(df.columns)}")
        return ImportResult()

    result = ImportResult()
    for foreign, translation in df[["foreign", "translation"]].itertuples(index=False):
        foreign, translation = foreign.strip(), translation.strip()
        if not foreign or not translation:
            result.rejected += 1
            continue
        result.words.append(Word(foreign=foreign, translation=translation))
        result.accepted += 1
    return result


def import_file(path: PathLike) -> ImportResult:
    if os.fspath(path).lower().endswith(".csv"):
        return parse_csv_word_list(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {path}: {e}")
        return ImportResult()
    return parse_word_list(content)
