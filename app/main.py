from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import StorageError, DuplicateCompletionError
from app.log import get_logger
from app.router import (
    users_router,
    completions_router,
)

log = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # For local development
        "http://localhost:8081",  # Expo dev client
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router, prefix="/users", tags=["Badges"])
app.include_router(completions_router, prefix="/completions", tags=["Completions"])


##########################
### Exception Handlers ###
##########################
@app.exception_handler(DuplicateCompletionError)
async def duplicate_completion_handler(request: Request, exc: DuplicateCompletionError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    log.error("%s %s failed: %r", request.method, request.url.path, exc.__cause__)
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})


#####################
### Root Endpoint ###
#####################
@app.get("/")
def read_root():
    return {"service": settings.PROJECT_NAME, "environment": settings.ENV, "version": settings.API_VERSION}
