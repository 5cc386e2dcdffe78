import io
import logging
from typing import List

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from .errors import IndexOutOfRangeError, QuizStateError, WordValidationError
from .models import (
    AnswerResult,
    AnswerSubmission,
    ImportRequest,
    ImportResult,
    ImportSummary,
    NewWord,
    Progress,
    QuizState,
    Word,
)
from .quiz import QuizEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# --- Dependencies ---
def get_engine(request: Request) -> QuizEngine:
    return request.app.state.engine


def _summary(result: ImportResult, engine: QuizEngine) -> ImportSummary:
    return ImportSummary(
        accepted=result.accepted,
        rejected=result.rejected,
        total_words=len(engine.store),
    )


# --- Word list ---
@router.get("/words", response_model=List[Word])
async def list_words(engine: QuizEngine = Depends(get_engine)):
    return engine.words


@router.post("/words", response_model=Word, status_code=201)
async def add_word(body: NewWord, engine: QuizEngine = Depends(get_engine)):
    try:
        return engine.add_word(body.foreign, body.translation)
    except WordValidationError as e:
        return JSONResponse({"error": str(e)}, status_code=400)


@router.delete("/words/{index}", response_model=Word)
async def delete_word(index: int, engine: QuizEngine = Depends(get_engine)):
    try:
        return engine.delete_word(index)
    except IndexOutOfRangeError as e:
        return JSONResponse({"error": str(e)}, status_code=404)


@router.post("/import", response_model=ImportSummary)
async def import_text(body: ImportRequest, engine: QuizEngine = Depends(get_engine)):
    return _summary(engine.import_text(body.content), engine)


@router.post("/import/file", response_model=ImportSummary)
async def import_upload(
    file: UploadFile = File(...), engine: QuizEngine = Depends(get_engine)
):
    data = await file.read()
    if (file.filename or "").lower().endswith(".csv"):
        result = engine.import_csv(io.BytesIO(data))
    else:
        try:
            content = data.decode("utf-8")
        except UnicodeDecodeError:
            logger.error(f"Upload {file.filename} is not valid UTF-8")
            return JSONResponse({"error": "File is not valid UTF-8 text"}, status_code=400)
        result = engine.import_text(content)
    logger.info(f"Imported upload {file.filename}")
    return _summary(result, engine)


# --- Quiz ---
@router.get("/quiz", response_model=QuizState)
async def quiz_state(engine: QuizEngine = Depends(get_engine)):
    return engine.snapshot()


@router.post("/quiz/start", response_model=QuizState)
async def start_quiz(engine: QuizEngine = Depends(get_engine)):
    try:
        engine.start()
    except QuizStateError as e:
        return JSONResponse({"error": str(e)}, status_code=409)
    return engine.snapshot()


@router.post("/quiz/answer", response_model=AnswerResult)
async def submit_answer(
    body: AnswerSubmission, engine: QuizEngine = Depends(get_engine)
):
    try:
        return engine.submit_answer(body.answer)
    except QuizStateError as e:
        return JSONResponse({"error": str(e)}, status_code=409)


@router.post("/quiz/replay", response_model=QuizState)
async def replay(engine: QuizEngine = Depends(get_engine)):
    try:
        engine.replay()
    except QuizStateError as e:
        return JSONResponse({"error": str(e)}, status_code=409)
    return engine.snapshot()


@router.post("/quiz/stop", response_model=QuizState)
async def stop_quiz(engine: QuizEngine = Depends(get_engine)):
    engine.stop()
    return engine.snapshot()


@router.get("/progress", response_model=Progress)
async def progress(engine: QuizEngine = Depends(get_engine)):
    return engine.progress()
