"""
Favorites blueprint (all routes require a session):
- GET  /favorites
- GET  /favorites/countries
- POST /favorites/add     { "countryCode": "USA" }
- POST /favorites/remove  { "countryCode": "USA" }
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify, g

from models.schemas.favorite import FavoriteSchema, FavoritesOutSchema
from utils.decorators import jwt_required

from .context import get_context

bp = Blueprint("favorites", __name__)

favorite_schema = FavoriteSchema()
favorites_out_schema = FavoritesOutSchema()


def _favorites_response(codes):
    return jsonify(favorites_out_schema.dump({"favorites": codes})), 200


@bp.get("")
@jwt_required()
def list_favorites():
    """
    List the current user's favorite country codes
    ---
    tags:
      - Favorites
    security:
      - Bearer: []
    responses:
      200: { description: OK }
      401: { description: Unauthorized }
    """
    return _favorites_response(get_context().favorites.list(g.current_user_id))


@bp.post("/add")
@jwt_required()
def add_favorite():
    """
    Add a country to favorites (no-op if already present)
    ---
    tags:
      - Favorites
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            countryCode: { type: string, example: USA }
    responses:
      200: { description: OK (returns updated list) }
      400: { description: Country code required }
      401: { description: Unauthorized }
    """
    data = favorite_schema.load(request.get_json(silent=True) or {})
    return _favorites_response(get_context().favorites.add(g.current_user_id, data["country_code"]))


@bp.post("/remove")
@jwt_required()
def remove_favorite():
    """
    Remove a country from favorites (no-op if absent)
    ---
    tags:
      - Favorites
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            countryCode: { type: string, example: USA }
    responses:
      200: { description: OK (returns updated list) }
      400: { description: Country code required }
      401: { description: Unauthorized }
    """
    data = favorite_schema.load(request.get_json(silent=True) or {})
    return _favorites_response(get_context().favorites.remove(g.current_user_id, data["country_code"]))


@bp.get("/countries")
@jwt_required()
def favorite_countries():
    """
    Full country records for the current user's favorites, in favorites order
    ---
    tags:
      - Favorites
    security:
      - Bearer: []
    responses:
      200: { description: OK }
      401: { description: Unauthorized }
      502: { description: Upstream country API failed }
    """
    ctx = get_context()
    codes = ctx.favorites.list(g.current_user_id)
    by_code = {c.get("cca3"): c for c in ctx.countries.all_countries()}
    data = [by_code[code] for code in codes if code in by_code]
    return jsonify({"data": data, "meta": {"total": len(data)}}), 200
