# casetracker/errors.py
import uuid
from flask import jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from .sequencer import StepIntegrityError


class CaseNotFound(LookupError):
    def __init__(self, case_id):
        super().__init__(f"Caso {case_id} no encontrado")
        self.case_id = case_id


class CaseValidationError(ValueError):
    """Datos de entrada inválidos; ``details`` mapea campo -> mensaje."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class CaseAdvanceConflict(Exception):
    pass


MESSAGES = {
    400: "Solicitud inválida.",
    401: "Debes iniciar sesión.",
    403: "No tienes permisos para acceder a este recurso.",
    404: "El recurso que buscas no existe.",
    409: "Conflicto con el estado actual del caso.",
    500: "Error interno del servidor.",
}


def _is_api_request():
    return request.path.startswith("/api/")


def register_error_handlers(app):
    def _render(code: int, e, message=None, details=None):
        error_id = uuid.uuid4().hex[:8]
        # Log detallado en servidor; solo los 5xx llevan traza
        if code >= 500:
            app.logger.exception(f"[{error_id}] {request.method} {request.path}: {e}")
        else:
            app.logger.info(f"[{error_id}] {request.method} {request.path}: {code} {e}")

        message = message or MESSAGES.get(code) or "Error."

        if _is_api_request():
            body = {"error": message, "error_id": error_id}
            if details:
                body["details"] = details
            return jsonify(body), code

        return render_template(
            "error.html",
            error_code=code,
            error_message=message,
            error_id=error_id
        ), code

    @app.errorhandler(CaseNotFound)
    def handle_not_found(e):
        return _render(404, e, message=str(e))

    @app.errorhandler(CaseValidationError)
    def handle_validation(e):
        return _render(400, e, message=str(e), details=e.details)

    @app.errorhandler(CaseAdvanceConflict)
    def handle_conflict(e):
        return _render(409, e, message=str(e))

    @app.errorhandler(StepIntegrityError)
    def handle_integrity(e):
        return _render(409, e, message=str(e), details={"problems": list(e.problems)})

    # Cualquier excepción no controlada
    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return _render(e.code or 500, e)
        return _render(500, e)
