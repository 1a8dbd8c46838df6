# casetracker/presenters.py
# Convierte un Case (con sus pasos ya cargados) al registro que expone el API.

from .sequencer import WorkStepSequencer


def _iso(value):
    return value.isoformat() if value is not None else None


def case_to_record(case, sequencer=None):
    seq = sequencer or WorkStepSequencer(case.work_steps, case_id=case.id)
    current = seq.current_step

    return {
        "id": case.id,
        "candidate_fullname": case.candidate_fullname,
        "candidate_email": case.candidate_email,
        "due_date": _iso(case.due_date),
        "applicant_has_been_notified": bool(case.applicant_has_been_notified),
        "current_step_number": seq.current_step_number(),
        "previous_step_number": seq.previous_step_number(),
        "next_step_number": seq.next_step_number(),
        "current_step_due_date": _iso(current.due_date) if current is not None else None,
        "current_step_all_requirements_complete": (
            bool(current.all_requirements_complete) if current is not None else False
        ),
        "current_panel_name": (
            current.panel.name if current is not None and current.panel is not None else ""
        ),
    }


def cases_to_results(cases):
    return {"results": [case_to_record(c) for c in cases]}
