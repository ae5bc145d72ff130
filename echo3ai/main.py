from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from echo3ai.api.routes import podcast
from echo3ai.core.config import settings
from echo3ai.services.http import open_client, close_client
import logging
import uvicorn

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%d-%m-%Y %H:%M:%S",
)
# httpx logs full request URLs, which carry the Gemini key
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not found. Fact-checking will not work.")
    await open_client()
    yield
    await close_client()


app = FastAPI(
    title="Echo3AI",
    description="Podcast transcript fact-checking, chat and language analysis",
    version="v1.0",
    lifespan=lifespan,
    )
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(podcast.router)

@app.get("/")
def check():
    return {"message": "Application is up"}


def run():
    uvicorn.run("echo3ai.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
