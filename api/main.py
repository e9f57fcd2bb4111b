from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.bible_data import BOOKS, chapter_count
from api.config import (
    API_TITLE,
    API_VERSION,
    CORS_ALLOW_ALL,
    CORS_ALLOW_ORIGINS,
    EVENT_LOG_RESET_ON_STARTUP,
)
from api.errors import UserError
from api.events import log_event, log_ref_event, log_sermon_event, reset_event_log
from api.models import (
    BookItem,
    BooksResponse,
    RefResponse,
    SermonFormData,
    SermonValidateResponse,
)
from api.ref_parser import format_reference, validate_reference
from api.sermon_validator import validate_sermon_form

app = FastAPI(title=API_TITLE, version=API_VERSION)

if CORS_ALLOW_ALL:
    allow_origins = ["*"]
else:
    allow_origins = [origin.strip() for origin in CORS_ALLOW_ORIGINS.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _reset_event_log_on_startup() -> None:
    if EVENT_LOG_RESET_ON_STARTUP:
        reset_event_log("startup")


@app.exception_handler(UserError)
def handle_user_error(_request: Request, exc: UserError):
    return JSONResponse(status_code=400, content={"error": exc.to_dict()})


@app.exception_handler(HTTPException)
def handle_http_exception(_request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": "http_error", "message": str(exc.detail)}},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
def handle_validation_exception(_request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": "validation_error",
                "message": "invalid request",
                "details": exc.errors(),
            }
        },
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/v1/bible/books", response_model=BooksResponse)
def list_books():
    items = [
        BookItem(name=book.name, abbr=list(book.abbr), chapter_count=chapter_count(book))
        for book in BOOKS
    ]
    log_event("books_listed", {"count": len(items)})
    return {"items": items}


@app.get("/v1/bible/ref", response_model=RefResponse)
def get_ref(reference: str = Query(..., min_length=1)):
    try:
        parsed = validate_reference(reference)
    except UserError as e:
        log_ref_event("ref_rejected", {"code": e.code})
        raise
    log_ref_event(
        "ref_validated",
        {
            "book": parsed.book.name,
            "start_chapter": parsed.range.start.chapter,
            "start_verse": parsed.range.start.verse,
        },
    )
    return {
        "reference": format_reference(parsed),
        "book": parsed.book.name,
        "range": parsed.range,
    }


@app.post("/v1/sermons/validate", response_model=SermonValidateResponse)
def validate_sermon(payload: SermonFormData):
    try:
        validate_sermon_form(payload)
    except UserError as e:
        log_sermon_event("sermon_rejected", {"code": e.code, "message": e.message})
        raise
    log_sermon_event("sermon_validated", {"date": payload.date, "time": payload.time})
    return {"valid": True}
