import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.core.errors import ServerError, Unauthenticated
from app.database import create_db_and_tables
from app.api import auth, dashboard, expenses, incomes
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield

app = FastAPI(title="Personal Finance Dashboard", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(Unauthenticated)
async def unauthenticated_handler(request: Request, exc: Unauthenticated):
    return JSONResponse(status_code=401, content={"message": exc.message})

@app.exception_handler(ServerError)
async def server_error_handler(request: Request, exc: ServerError):
    logger.error("Server error for %s %s: %s", request.method, request.url, exc.error)
    return JSONResponse(status_code=500, content={"message": "Server Error", "error": exc.error})

app.include_router(auth.router)
app.include_router(incomes.router)
app.include_router(expenses.router)
app.include_router(dashboard.router)

@app.get("/")
def root():
    return {"message": "Personal finance dashboard server"}
