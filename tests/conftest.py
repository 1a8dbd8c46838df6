import pytest
from werkzeug.security import generate_password_hash

from casetracker import create_app
from casetracker.extensions import db
from casetracker.models import AdminUser, Case, Panel, WorkStep


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "INIT_DB": False,
        "CASES_PER_PAGE": 2,
        "CASES_MAX_PER_PAGE": 3,
    })

    with app.app_context():
        db.create_all()
        db.session.add_all([
            AdminUser(username="admin", fullname="Admin", role="admin",
                      password_hash=generate_password_hash("secreto")),
            AdminUser(username="lector", fullname="Lector", role="user",
                      password_hash=generate_password_hash("secreto")),
            AdminUser(username="baja", fullname="Dado de baja", role="admin", is_active=False,
                      password_hash=generate_password_hash("secreto")),
        ])
        db.session.commit()

        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _login_as(client, username, role):
    user = AdminUser.query.filter_by(username=username).one()
    with client.session_transaction() as sess:
        sess["user_id"] = user.id
        sess["username"] = user.username
        sess["role"] = role
    return client


@pytest.fixture
def admin_client(client):
    return _login_as(client, "admin", "admin")


@pytest.fixture
def user_client(client):
    return _login_as(client, "lector", "user")


@pytest.fixture
def make_case(app):
    """Inserta un caso directo en BD (permite datos inconsistentes)."""

    def _make(numbers=(1, 2, 3), current=(), fullname="Ana Torres", notified=False, **kwargs):
        case = Case(
            candidate_fullname=fullname,
            candidate_email=kwargs.get("email", "ana@example.com"),
            due_date=kwargs.get("due_date"),
            applicant_has_been_notified=notified,
        )
        for n in numbers:
            panel = Panel.query.filter_by(name=f"Panel {n}").first() or Panel(name=f"Panel {n}")
            case.work_steps.append(WorkStep(
                step_number=n,
                is_current=n in current,
                due_date=kwargs.get("step_due_date"),
                all_requirements_complete=n in kwargs.get("complete", ()),
                panel=panel,
            ))
        db.session.add(case)
        db.session.commit()
        return case.id

    return _make
