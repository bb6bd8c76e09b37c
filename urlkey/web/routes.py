## routes.py
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from urlkey.services.exceptions import InvalidArgument
from urlkey.services.indexing_service import UrlIndexService


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidArgument("Request body must be a JSON object.", code="BAD_REQUEST")
    return payload


def _text_from(payload: Dict[str, Any]) -> str:
    text = payload.get("text", "")
    if not isinstance(text, str):
        raise InvalidArgument("'text' must be a string.", code="BAD_REQUEST")
    return text


def _limit_from(payload: Dict[str, Any]) -> int | None:
    raw = payload.get("limit")
    if raw is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidArgument("'limit' must be an integer or null.", code="BAD_REQUEST")
    return raw


def create_blueprint(index_service: UrlIndexService) -> Blueprint:
    bp = Blueprint("web", __name__)

    @bp.errorhandler(InvalidArgument)
    def invalid_argument(e: InvalidArgument):
        current_app.logger.info("Rejected request: %s", e.message)
        return jsonify(error=e.message, code=e.code), 400

    @bp.post("/extract")
    def extract():
        payload = _json_body()
        urls = index_service.extract(_text_from(payload), _limit_from(payload))
        return jsonify(urls=[str(u) for u in urls])

    @bp.post("/index")
    def index():
        payload = _json_body()
        result = index_service.index(_text_from(payload), _limit_from(payload))
        current_app.logger.info("Indexed %d URL(s), collapsed=%d", len(result.urls), result.collapsed)
        return jsonify(
            urls=[{"url": u.url, "key": u.key} for u in result.urls],
            limit=result.limit,
            collapsed=result.collapsed,
        )

    @bp.post("/normalize")
    def normalize():
        payload = _json_body()
        url = payload.get("url")
        if url is not None and not isinstance(url, str):
            raise InvalidArgument("'url' must be a string or null.", code="BAD_REQUEST")
        return jsonify(key=index_service.normalize(url))

    @bp.get("/is-url")
    def is_url():
        q = request.args.get("q", "")
        return jsonify(is_url=index_service.is_url(q))

    return bp
