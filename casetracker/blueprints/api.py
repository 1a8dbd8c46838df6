# casetracker/blueprints/api.py
# Endpoints JSON: listado de casos (con current/previous/next), alta, avance y paneles.

from flask import Blueprint, current_app, jsonify, request

from ..auth.decorators import api_login_required, role_required
from ..errors import CaseValidationError
from ..presenters import case_to_record, cases_to_results
from ..services.case_service import CaseService

api_bp = Blueprint("api", __name__)


def _int_arg(name, default):
    raw = request.args.get(name)
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except ValueError:
        raise CaseValidationError("Parámetro inválido.", {name: "Debe ser entero."})
    if value < 1:
        raise CaseValidationError("Parámetro inválido.", {name: "Debe ser mayor o igual a 1."})
    return value


def _bool_arg(name):
    raw = (request.args.get(name) or "").strip().lower()
    if not raw:
        return None
    if raw in ("true", "1"):
        return True
    if raw in ("false", "0"):
        return False
    raise CaseValidationError("Parámetro inválido.", {name: "Usa true o false."})


@api_bp.route("/cases")
@api_login_required
def cases_index():
    page = _int_arg("page", 1)
    per_page = _int_arg("per_page", current_app.config["CASES_PER_PAGE"])

    pagination = CaseService.listar_casos(
        page=page,
        per_page=per_page,
        max_per_page=current_app.config["CASES_MAX_PER_PAGE"],
        notified=_bool_arg("notified"),
    )

    body = cases_to_results(pagination.items)
    body["pagination"] = {
        "page": pagination.page,
        "per_page": pagination.per_page,
        "total": pagination.total,
        "pages": pagination.pages,
    }

    resp = jsonify(body)
    # El cliente revalida siempre; si nada cambió recibe 304 sin cuerpo
    resp.cache_control.private = True
    resp.cache_control.max_age = 0
    resp.cache_control.must_revalidate = True
    resp.add_etag()
    return resp.make_conditional(request)


@api_bp.route("/cases/<int:case_id>")
@api_login_required
def cases_show(case_id):
    return jsonify(case_to_record(CaseService.obtener_caso(case_id)))


@api_bp.route("/cases", methods=["POST"])
@role_required("admin")
def cases_create():
    data = request.get_json(silent=True)
    if data is None:
        raise CaseValidationError("El cuerpo debe ser JSON.")
    case = CaseService.crear_caso(data)
    return jsonify(case_to_record(case)), 201


@api_bp.route("/cases/<int:case_id>/advance", methods=["POST"])
@role_required("admin")
def cases_advance(case_id):
    return jsonify(case_to_record(CaseService.avanzar_caso(case_id)))


@api_bp.route("/panels")
@api_login_required
def panels():
    return jsonify({"panels": [{"id": p.id, "name": p.name} for p in CaseService.listar_paneles()]})
