import asyncio
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.emotion_routes import router as emotion_router
from .config import CORS_ORIGINS
from .services.nlp import engine

app = FastAPI(title="Moodblob API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(emotion_router)


async def _load_lexicon_background() -> None:
    try:
        await asyncio.to_thread(engine.initialize)
    except Exception as exc:  # pragma: no cover
        logger.warning("Lexicon initialization deferred during startup: %s", exc)


@app.on_event("startup")
async def startup_lexicon():
    # Scoring requests that arrive before the load finishes get a zero result.
    asyncio.create_task(_load_lexicon_background())


@app.get("/health")
async def health_check():
    return {"status": "ok"}
