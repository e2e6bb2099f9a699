from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import logger, settings, check_api_keys_on_startup, USER_MESSAGES
from exceptions import TruthLensException
from models import (
    AnalysisResponse,
    AnalyzeRequest,
    DetectorState,
    EducationalTip,
    PublicQuizQuestion,
    QuizAnswerRequest,
    QuizAnswerResult,
    QuizScore,
    QuizScoreRequest,
)
from services import (
    DetectorSession,
    analyze_text,
    check_answer,
    get_quiz,
    get_tips,
    score_quiz,
)

TEXT_CONTENT_TYPE = "text/plain"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Startup: checking for required API keys...")
    config_error = check_api_keys_on_startup()
    if config_error is not None:
        # Refuse to serve without a credential; no analysis request is ever attempted.
        raise config_error
    yield


app = FastAPI(title="TruthLens API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TruthLensException)
async def truthlens_exception_handler(request: Request, exc: TruthLensException):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/")
async def health_check():
    return {"status": "ok", "message": "TruthLens API is running."}


@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(req: AnalyzeRequest):
    """Fact-check pasted text. `result` is null when the model ignored the reply format."""
    if not (req.text or "").strip():
        raise HTTPException(status_code=400, detail=USER_MESSAGES.EMPTY_INPUT)
    return await analyze_text(req.text)


@app.post("/analyze/file", response_model=AnalysisResponse)
async def analyze_file(file: UploadFile = File(...)):
    """Fact-check the contents of an uploaded plain text file."""
    content_type = (file.content_type or "").split(";")[0].strip().lower()
    if content_type != TEXT_CONTENT_TYPE:
        raise HTTPException(
            status_code=415,
            detail=USER_MESSAGES.UNSUPPORTED_FILE.format(filename=file.filename),
        )

    raw = await file.read()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("Uploaded file %s is not valid UTF-8.", file.filename)
        raise HTTPException(status_code=400, detail=USER_MESSAGES.UNREADABLE_FILE)

    if not text.strip():
        raise HTTPException(status_code=400, detail=USER_MESSAGES.EMPTY_FILE)
    return await analyze_text(text)


@app.post("/detect", response_model=DetectorState)
async def detect(req: AnalyzeRequest):
    """Run one analysis and report it as a single detector state."""
    session = DetectorSession(analyzer=analyze_text)
    return await session.analyze(req.text)


@app.get("/education/tips", response_model=List[EducationalTip])
async def education_tips():
    return get_tips()


@app.get("/education/quiz", response_model=List[PublicQuizQuestion])
async def education_quiz():
    return get_quiz()


@app.post("/education/quiz/score", response_model=QuizScore)
async def education_quiz_score(req: QuizScoreRequest):
    return score_quiz(req.answers)


@app.post("/education/quiz/{index}/answer", response_model=QuizAnswerResult)
async def education_quiz_answer(index: int, req: QuizAnswerRequest):
    return check_answer(index, req.answer_index)
