"""
Digital Wellness API Server
Self-assessment scoring for digital dependency risk.
Version 1.0.0

Mounts:
- /api/v1/survey/* - survey scoring (app.survey)
"""

import os
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.survey import survey_router, __version__ as survey_version

API_VERSION = "1.0.0"

# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="Digital Wellness API",
    description="Digital-wellness self-assessment and risk scoring",
    version=API_VERSION,
)

# ============================================
# CORS Configuration
# ============================================
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# ============================================
# Routers
# ============================================
app.include_router(survey_router)


@app.get("/")
def root():
    return {
        "status": "ok",
        "service": "digital-wellness-api",
        "api_version": API_VERSION,
        "survey_version": survey_version,
        "timestamp": datetime.utcnow().isoformat(),
    }
