import os
import sys
import logging
from contextlib import asynccontextmanager

# Ensure this directory is in the path for uvicorn and other runners
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.append(current_dir)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import APP_ENV, CORS_ORIGINS, LOG_LEVEL
from database import init_db
from routes.item_routes import router as item_router
from routes.dashboard_routes import router as dashboard_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if APP_ENV == "development":
        logger.info("The App is running in development env")
    init_db()
    yield


app = FastAPI(title="Expense Tracker API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/hello", response_class=PlainTextResponse)
@app.get("/api/v1/hello", response_class=PlainTextResponse)
async def hello():
    return "Welcome"


app.include_router(item_router)
app.include_router(dashboard_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=1323, reload=APP_ENV == "development")
