import os

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(__file__)
load_dotenv(os.path.join(BASE_DIR, ".env"))

DEFAULT_LEXICON_DIR = os.path.join(BASE_DIR, "services", "nlp", "data")

EMOTION_LEXICON_BASE = os.getenv("EMOTION_LEXICON_BASE", DEFAULT_LEXICON_DIR)
EMOTION_LEXICON_FILENAME = "emotion_words.json"
EMOTION_LEXICON_TIMEOUT_S = float(os.getenv("EMOTION_LEXICON_TIMEOUT_S", "4.0"))

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",")]
