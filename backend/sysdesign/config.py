import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Generative service (OpenAI-compatible chat completions endpoint)
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "http://localhost:11434/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "mistral:7b-instruct")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))
LLM_TIMEOUT = int(os.getenv("LLM_TIMEOUT", "300"))

# Empty → generation log persistence disabled
DATABASE_URL = os.getenv("DATABASE_URL", "")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
