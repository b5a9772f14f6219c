"""
Neuro Pathways - Configuration
Loads environment variables for the API surface and pathway engines.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# API
APP_TITLE = os.getenv("APP_TITLE", "Neuro Pathways")
API_VERSION = os.getenv("API_VERSION", "1.0.0")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Verbose per-evaluation logging (PATHWAY_DEBUG=1)
PATHWAY_DEBUG = os.getenv("PATHWAY_DEBUG", "").lower() in ("1", "true", "yes")

# Guideline edition cited in notes and API responses
GUIDELINE_SOURCE = os.getenv("GUIDELINE_SOURCE", "2026 AHA/ASA")

# In-memory wizard sessions expire after this many idle minutes
SESSION_TTL_MINUTES = int(os.getenv("SESSION_TTL_MINUTES", "120"))


def get_cors_origins() -> list:
    """
    Parse CORS_ORIGINS into the list CORSMiddleware expects.

    "*" -> ["*"]; "https://a.org, https://b.org" -> ["https://a.org", "https://b.org"]
    """
    origins = [o.strip() for o in CORS_ORIGINS.split(",") if o.strip()]
    return origins or ["*"]
