"""
Generic REST endpoints for every collection in the document.

The collection is resolved from the URL on each request, so collections
created at runtime (by POST or PUT) are served without re-registering routes:

    GET    /<collection>           all records
    POST   /<collection>           create; the id is assigned by the server
    GET    /<collection>/<id>      one record
    PUT    /<collection>/<id>      replace, or create with this id
    PATCH  /<collection>/<id>      merge fields into the record
    DELETE /<collection>/<id>      remove the record
"""
from flask import Blueprint, current_app, jsonify, request

from ..errors import BadRequest, NotFound
from ..extensions import get_database
from ..storage.codec import decode

bp = Blueprint("collections_api", __name__)

RECORD_URL = "/<collection>/<int(signed=True):record_id>"


def read_payload() -> dict:
    """Decode the request body; it must be a JSON object."""
    payload = decode(request.get_data(cache=False))
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload


@bp.errorhandler(NotFound)
def handle_not_found(e):
    return jsonify({"error": str(e) or "Not found"}), 404


@bp.errorhandler(BadRequest)
def handle_bad_request(e):
    current_app.logger.info("Rejected %s %s: %s", request.method, request.path, e)
    return jsonify({"error": str(e)}), 400


@bp.get("/<collection>")
def list_records(collection):
    return jsonify(get_database().list(collection))


@bp.post("/<collection>")
def create_record(collection):
    payload = read_payload()
    record = get_database().create(collection, payload)
    return jsonify(record), 201


@bp.get(RECORD_URL)
def get_record(collection, record_id):
    return jsonify(get_database().get(collection, record_id))


@bp.put(RECORD_URL)
def put_record(collection, record_id):
    payload = read_payload()
    record, created = get_database().put(collection, record_id, payload)
    return jsonify(record), 201 if created else 200


@bp.patch(RECORD_URL)
def patch_record(collection, record_id):
    payload = read_payload()
    return jsonify(get_database().patch(collection, record_id, payload))


@bp.delete(RECORD_URL)
def delete_record(collection, record_id):
    return jsonify(get_database().delete(collection, record_id))
