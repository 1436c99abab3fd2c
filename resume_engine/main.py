"""
Resume Structuring Engine - FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from resume_engine.core.config import settings
from resume_engine.core.logging_config import configure_logging
from resume_engine.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    error_body,
)
from resume_engine.core.exceptions import ResumeEngineException
from resume_engine.resumes.router import router as resumes_router

configure_logging()
logger = structlog.get_logger()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Turns unstructured resume text into a normalized resume document",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

app.add_middleware(CorrelationIDMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(ExceptionHandlerMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResumeEngineException)
async def resume_engine_exception_handler(request: Request, exc: ResumeEngineException):
    """Handle service exceptions"""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "max_text_length": settings.MAX_TEXT_LENGTH,
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


app.include_router(resumes_router)

logger.info("application_configured", version=settings.APP_VERSION, environment=settings.ENVIRONMENT)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "resume_engine.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
