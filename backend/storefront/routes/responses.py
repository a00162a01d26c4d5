from flask import request


def bare_status(status_code: int):
    """Status-only response; error details stay in the log."""
    return '', status_code


def json_body():
    """Parsed JSON body, or None when the request has none."""
    return request.get_json(silent=True)
