from flask import jsonify, request

def jerror(status: int, code: str, message: str, details: list | str | None = None):
    payload = {"code": code, "message": message}
    if details:
        payload["details"] = details
    return jsonify(payload), status


def json_body() -> dict | None:
    """Returns the request's JSON object, or None when it is missing or not an object."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or not payload:
        return None
    return payload
