import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CORS_ORIGINS, LOG_FILE, LOG_LEVEL
from .database import create_tables
from .errors import StoreError
from .logging_setup import setup_logging
from .routers import rpc

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task Manager API",
    description="Task management CRUD procedures",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(rpc.router, prefix="/rpc", tags=["tasks"])


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


# Configure logging and create tables on startup
@app.on_event("startup")
def on_startup():
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)
    create_tables()
    logger.info("Task Manager API started")


@app.get("/")
def read_root():
    return {"message": "Task Manager API"}
