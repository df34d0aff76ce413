from flask import Blueprint
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .context import get_context

bp = Blueprint("health", __name__)

VERSION = "1.0.0"


@bp.get("/health")
def health():
    """
    Health check (API, database and country cache)
    ---
    tags:
      - Health
    responses:
      200:
        description: API is up
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            database:
              type: string
              example: ok
            cached_responses:
              type: integer
              example: 3
            version:
              type: string
              example: 1.0.0
      503:
        description: Database unreachable
    """
    ctx = get_context()
    try:
        ctx.storage.get_session().execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:
        database = "unavailable"
    status = 200 if database == "ok" else 503
    return {
        "status": "ok" if status == 200 else "degraded",
        "database": database,
        "cached_responses": len(ctx.cache),
        "version": VERSION,
    }, status
