from flask import Blueprint, jsonify

from ..extensions import get_database

bp = Blueprint("db", __name__)


@bp.get("/db")
def whole_document():
    return jsonify(get_database().document())


@bp.app_errorhandler(404)
def not_found(e):
    return jsonify({"error": "Not found"}), 404


@bp.app_errorhandler(405)
def method_not_allowed(e):
    return jsonify({"error": "Method not allowed"}), 405
