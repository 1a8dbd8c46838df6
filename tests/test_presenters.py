from datetime import datetime

from casetracker.models import Case, Panel, WorkStep
from casetracker.presenters import case_to_record, cases_to_results

FIELDS = {
    "id",
    "candidate_fullname",
    "candidate_email",
    "due_date",
    "applicant_has_been_notified",
    "current_step_number",
    "previous_step_number",
    "next_step_number",
    "current_step_due_date",
    "current_step_all_requirements_complete",
    "current_panel_name",
}


def build_case(current=None, numbers=(1, 2, 3)):
    case = Case(
        id=7,
        candidate_fullname="Marta Ruiz",
        candidate_email="marta@example.com",
        due_date=datetime(2026, 11, 10, 9, 0),
        applicant_has_been_notified=True,
    )
    for n in numbers:
        case.work_steps.append(WorkStep(
            step_number=n,
            is_current=(n == current),
            due_date=datetime(2026, 11, n, 12, 0),
            all_requirements_complete=(n == 2),
            panel=Panel(name=f"Panel {n}"),
        ))
    return case


def test_record_for_step_in_the_middle():
    record = case_to_record(build_case(current=2))

    assert set(record) == FIELDS
    assert record["id"] == 7
    assert record["candidate_fullname"] == "Marta Ruiz"
    assert record["candidate_email"] == "marta@example.com"
    assert record["due_date"] == "2026-11-10T09:00:00"
    assert record["applicant_has_been_notified"] is True
    assert record["current_step_number"] == 2
    assert record["previous_step_number"] == 1
    assert record["next_step_number"] == 3
    assert record["current_step_due_date"] == "2026-11-02T12:00:00"
    assert record["current_step_all_requirements_complete"] is True
    assert record["current_panel_name"] == "Panel 2"


def test_record_without_current_step():
    record = case_to_record(build_case(current=None))

    assert record["current_step_number"] == 0
    assert record["previous_step_number"] is None
    assert record["next_step_number"] is None
    assert record["current_step_due_date"] is None
    assert record["current_step_all_requirements_complete"] is False
    assert record["current_panel_name"] == ""


def test_record_for_case_without_steps():
    case = build_case(numbers=())
    case.due_date = None

    record = case_to_record(case)

    assert record["due_date"] is None
    assert record["current_step_number"] == 0
    assert record["next_step_number"] is None


def test_results_wrapper():
    body = cases_to_results([build_case(current=1), build_case(current=3)])

    assert list(body) == ["results"]
    assert [r["current_step_number"] for r in body["results"]] == [1, 3]
    assert [r["next_step_number"] for r in body["results"]] == [2, None]


def test_record_with_current_step_numbered_zero_stays_consistent():
    case = build_case(current=0, numbers=(0, 1, 2))

    record = case_to_record(case)

    assert record["current_step_number"] == 0
    assert record["previous_step_number"] is None
    assert record["next_step_number"] is None
    assert record["current_panel_name"] == ""
    assert record["current_step_due_date"] is None
    assert record["current_step_all_requirements_complete"] is False
