from __future__ import annotations

from flask import Blueprint, request, jsonify

from countries.filters import filter_countries, unique_languages
from utils.exceptions import NotFound

from .context import get_context

bp = Blueprint("countries", __name__)


@bp.get("")
def list_countries():
    """
    List countries, optionally filtered (served from the response cache when fresh)
    ---
    tags: [Countries]
    parameters:
      - in: query
        name: q
        type: string
        description: Case-insensitive match on the common name
      - in: query
        name: region
        type: string
        description: "Africa, Americas, Asia, Europe, Oceania or All"
      - in: query
        name: language
        type: string
    responses:
      200: { description: OK }
      502: { description: Upstream country API failed }
    """
    countries = get_context().countries.all_countries()
    data = filter_countries(
        countries,
        query=request.args.get("q"),
        region=request.args.get("region"),
        language=request.args.get("language"),
    )
    return jsonify({"data": data, "meta": {"total": len(data)}}), 200


@bp.get("/languages")
def list_languages():
    """
    Every language spoken across all countries, sorted
    ---
    tags: [Countries]
    responses:
      200: { description: OK }
      502: { description: Upstream country API failed }
    """
    return jsonify({"data": unique_languages(get_context().countries.all_countries())}), 200


@bp.get("/<code>")
def get_country(code: str):
    """
    Country details by alpha-2 or alpha-3 code
    ---
    tags: [Countries]
    parameters:
      - in: path
        name: code
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Unknown country code }
      502: { description: Upstream country API failed }
    """
    result = get_context().countries.by_code(code.upper())
    if not result:
        raise NotFound(f"Country {code} not found")
    country = result[0] if isinstance(result, list) else result
    return jsonify({"data": country}), 200
