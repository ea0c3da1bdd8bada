# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import configure_logging
from database import create_database
from routers.content import awards_router, blogs_router, media_router, qna_router
from routers.products import router as products_router
from routers.submissions import applications_router, requests_router, subscribe_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Mobility Site API")

create_database()

for r in (products_router, qna_router, awards_router, media_router, blogs_router,
          requests_router, applications_router, subscribe_router):
    app.include_router(r)


# Errors are answered as {"error": "..."} so clients can show the message as-is.
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"] if p != "body")
        problems.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, problems)
    return JSONResponse(status_code=422, content={"error": "; ".join(problems)})


@app.get("/")
def root():
    return {"message": "Mobility Site API running"}
