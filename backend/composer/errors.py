from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from composer.domain.ai.patch import MalformedResponse, TransportFailure
from composer.domain.invariants.exceptions import InvariantViolation

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(MalformedResponse)
    def handle_malformed_response(error):
        current_app.logger.warning(f"Malformed AI response: {error}")
        response = jsonify({
            "error": "MalformedResponse",
            "message": error.user_message
        })
        response.status_code = 422
        return response

    @app.errorhandler(TransportFailure)
    def handle_transport_failure(error):
        current_app.logger.error(f"AI transport failed: {error}")
        response = jsonify({
            "error": "TransportFailure",
            "message": error.user_message
        })
        response.status_code = 502
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name,
            "message": error.description
        })
        response.status_code = error.code
        return response
