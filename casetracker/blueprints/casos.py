# casetracker/blueprints/casos.py
from flask import Blueprint, current_app, render_template, request

from ..auth.decorators import login_required
from ..presenters import case_to_record
from ..services.case_service import CaseService

casos_bp = Blueprint("casos", __name__, url_prefix="/casos")


@casos_bp.route("/")
@login_required
def lista():
    page = request.args.get("page", 1, type=int) or 1
    pagination = CaseService.listar_casos(
        page=max(page, 1),
        per_page=current_app.config["CASES_PER_PAGE"],
        max_per_page=current_app.config["CASES_MAX_PER_PAGE"],
    )
    items = [case_to_record(c) for c in pagination.items]
    return render_template("cases/lista.html", items=items, pagination=pagination)
