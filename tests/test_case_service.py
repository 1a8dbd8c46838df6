import pytest
from sqlalchemy import event

from casetracker.errors import CaseAdvanceConflict, CaseNotFound, CaseValidationError
from casetracker.extensions import db
from casetracker.presenters import case_to_record
from casetracker.services.case_service import CaseService


@pytest.fixture
def count_queries(app):
    statements = []

    def _listener(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    engine = db.engine
    event.listen(engine, "before_cursor_execute", _listener)
    yield statements
    event.remove(engine, "before_cursor_execute", _listener)


def test_listing_loads_steps_and_panels_up_front(app, make_case, count_queries):
    for i in range(3):
        make_case(current={2}, fullname=f"Caso {i}")
    db.session.expunge_all()
    count_queries.clear()

    pagination = CaseService.listar_casos(page=1, per_page=3, max_per_page=3)
    before_render = len(count_queries)
    records = [case_to_record(c) for c in pagination.items]

    assert [r["current_panel_name"] for r in records] == ["Panel 2"] * 3
    # render sin consultas extra (sin N+1)
    assert len(count_queries) == before_render


def test_obtener_caso_unknown(app):
    with pytest.raises(CaseNotFound) as exc:
        CaseService.obtener_caso(123)
    assert exc.value.case_id == 123


def test_crear_caso_rejects_non_dict(app):
    with pytest.raises(CaseValidationError):
        CaseService.crear_caso(["no", "es", "dict"])


def test_crear_caso_rejects_non_boolean_notified(app):
    with pytest.raises(CaseValidationError) as exc:
        CaseService.crear_caso({
            "candidate_fullname": "Ana",
            "candidate_email": "ana@example.com",
            "applicant_has_been_notified": "si",
        })
    assert "applicant_has_been_notified" in exc.value.details


def test_avanzar_caso_moves_one_marker(app, make_case):
    case_id = make_case(numbers=(1, 2, 3, 4), current={2})

    case = CaseService.avanzar_caso(case_id)

    assert [s.step_number for s in case.work_steps if s.is_current] == [3]
    assert len(case.work_steps) == 4


def test_avanzar_caso_at_last_step(app, make_case):
    case_id = make_case(numbers=(1, 2), current={2})
    with pytest.raises(CaseAdvanceConflict):
        CaseService.avanzar_caso(case_id)
