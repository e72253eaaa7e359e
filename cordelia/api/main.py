"""
cordelia/api/main.py — FastAPI application.

Run locally:
    uvicorn cordelia.api.main:app --reload
"""

from fastapi import FastAPI

from cordelia.api.routes.chords import router as chords_router
from cordelia.api.routes.keys import router as keys_router
from cordelia.api.routes.tools import router as tools_router

app = FastAPI(title="Cordelia")

app.include_router(chords_router)
app.include_router(keys_router)
app.include_router(tools_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Return a simple liveness check."""
    return {"status": "ok"}
