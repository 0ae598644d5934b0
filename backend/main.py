# backend/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import init_db, close_db
from exceptions import ExpenseAppError, InternalFailure

# Routers
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.expenses import router as expenses_router
from routes.logs import router as logs_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# One in-memory store per process, built at startup and torn down at shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(app)
    logger.info("Expense Management API ready")
    yield
    close_db(app)


def create_app() -> FastAPI:
    app = FastAPI(title="Expense Management API", version="1.0.0", lifespan=lifespan)

    # CORS Configuration
    origins = ["http://localhost:5173", "http://127.0.0.1:5173"]
    if settings.FRONTEND_URL:
        origins.append(settings.FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ExpenseAppError)
    async def expense_app_error_handler(request: Request, exc: ExpenseAppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "code": exc.code})

    # Anything else is an internal fault; details stay in the server log
    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s crashed", request.method, request.url.path)
        failure = InternalFailure()
        return JSONResponse(status_code=failure.status_code, content={"detail": failure.message, "code": failure.code})

    # Router registration
    app.include_router(auth_router, prefix=settings.API_PREFIX)
    app.include_router(users_router, prefix=settings.API_PREFIX)
    app.include_router(expenses_router, prefix=settings.API_PREFIX)
    app.include_router(logs_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def read_root():
        return {"message": "Expense Management API is running"}

    return app


app = create_app()
