"""
LifeScore Engine API

FastAPI wrapper around the scoring engine.
"""

import os
from io import StringIO
from typing import Any, Dict

from fastapi import Body, FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from lifescore.classifiers.score_level_classifier import ScoreLevelClassifier
from lifescore.models.user_record import UserRecord
from lifescore.parsers.user_csv_parser import UserCSVParser
from lifescore.scoring.leaderboard import build_leaderboard
from lifescore.scoring.score_calculator import LifeScoreCalculator, format_score_breakdown
from lifescore.scoring.standing_service import StandingService
from lifescore.storage.kv_store import InMemoryKeyValueStore, KeyValueStore, PostgresKeyValueStore
from lifescore.storage.standing_cache import StandingCache
from lifescore.utils.csv_validator import CSVValidator

app = FastAPI(
    title="LifeScore Engine",
    description="Score self-reported wealth and knowledge and estimate global standing",
    version="1.0.0",
)


def _build_store() -> KeyValueStore:
    """Postgres when DATABASE_URL is set, otherwise an in-process store."""
    if os.getenv('DATABASE_URL'):
        store = PostgresKeyValueStore()
        store.init_schema()
        return store
    return InMemoryKeyValueStore()


standing_service = StandingService(StandingCache(_build_store()))


@app.get("/")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "lifescore-engine",
        "version": "1.0.0",
    }


@app.get("/health")
async def health():
    """Alias for health check."""
    return await health_check()


@app.post("/score")
async def score_user(user: Dict[str, Any] = Body(...)):
    """
    Score a user record.

    Returns the breakdown, the score level and a one-line summary.
    """
    record = UserRecord.from_raw(user)
    breakdown = LifeScoreCalculator().calculate(record)
    level = ScoreLevelClassifier().classify(breakdown.total_life_score)

    return JSONResponse(content={
        "breakdown": breakdown.to_dict(),
        "level": level.to_dict(),
        "summary": format_score_breakdown(breakdown),
    })


@app.post("/standing")
def standing(user: Dict[str, Any] = Body(...)):
    """
    Score a user and estimate their global standing.

    Served from the standing cache while fresh. Declared sync so store I/O
    runs in the threadpool.
    """
    breakdown, user_standing = standing_service.resolve(UserRecord.from_raw(user))
    return _standing_response(breakdown, user_standing)


@app.post("/standing/refresh")
def refresh_standing(user: Dict[str, Any] = Body(...)):
    """Recompute a user's standing, discarding any cached copy."""
    breakdown, user_standing = standing_service.refresh(UserRecord.from_raw(user))
    return _standing_response(breakdown, user_standing)


@app.post("/leaderboard")
async def leaderboard(file: UploadFile = File(...), limit: int = 0):
    """
    Rank the users in an uploaded CSV by LifeScore.

    `limit` keeps the top N rows; 0 returns everyone.
    """
    validator = CSVValidator()
    if not validator.validate_extension(file.filename):
        raise HTTPException(status_code=400, detail="File must be a CSV")

    content = (await file.read()).decode('utf-8-sig', errors='replace')

    parser = UserCSVParser()
    try:
        users = parser.parse_csv_string(content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not users:
        raise HTTPException(status_code=400, detail="No valid users found in CSV")

    entries = build_leaderboard(users, limit=limit or None)

    return JSONResponse(content={
        "users_count": len(users),
        "entries": [entry.to_dict() for entry in entries],
        "warnings": parser.warnings if parser.warnings else None,
    })


def _standing_response(breakdown, user_standing) -> JSONResponse:
    level = ScoreLevelClassifier().classify(breakdown.total_life_score)
    return JSONResponse(content={
        "breakdown": breakdown.to_dict(),
        "standing": user_standing.to_dict(),
        "globalRank": user_standing.global_rank,
        "level": level.to_dict(),
    })


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv('PORT', '8000')))
