from datetime import date, datetime

from casetracker.filters import fecha_corta, paso_o_guion


def login(client, username, password="secreto", **extra):
    return client.post("/admin/login", data=dict(username=username, password=password, **extra))


class TestLogin:

    def test_login_page(self, client):
        resp = client.get("/admin/login")
        assert resp.status_code == 200
        assert b"Iniciar sesi" in resp.data

    def test_login_ok(self, client):
        resp = login(client, "admin")
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/casos/")
        with client.session_transaction() as sess:
            assert sess["username"] == "admin"
            assert sess["role"] == "admin"

    def test_login_honours_relative_next(self, client):
        resp = login(client, "lector", next="/api/cases")
        assert resp.headers["Location"].endswith("/api/cases")

    def test_login_ignores_external_next(self, client):
        resp = login(client, "lector", next="//evil.example.com/")
        assert resp.headers["Location"].endswith("/casos/")

    def test_bad_password(self, client):
        resp = login(client, "admin", password="otra")
        assert resp.status_code == 401
        with client.session_transaction() as sess:
            assert "user_id" not in sess

    def test_inactive_user(self, client):
        assert login(client, "baja").status_code == 401

    def test_logout(self, client):
        login(client, "admin")
        resp = client.get("/admin/logout")
        assert resp.status_code == 302
        with client.session_transaction() as sess:
            assert "user_id" not in sess
        assert client.get("/api/cases").status_code == 401


class TestPages:

    def test_root_without_session(self, client):
        resp = client.get("/")
        assert resp.status_code == 302
        assert "/admin/login" in resp.headers["Location"]

    def test_root_with_session(self, admin_client):
        resp = admin_client.get("/")
        assert resp.headers["Location"].endswith("/casos/")

    def test_listing_requires_login(self, client):
        resp = client.get("/casos/")
        assert resp.status_code == 302
        location = resp.headers["Location"]
        assert "/admin/login" in location
        assert "next=" in location

    def test_listing_page(self, user_client, make_case):
        make_case(current={2}, fullname="Marta Ruiz")
        make_case(current=(), fullname="Jorge Diaz")

        resp = user_client.get("/casos/")

        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert "Marta Ruiz" in html
        assert "Jorge Diaz" in html
        assert "Panel 2" in html

    def test_unknown_page_renders_error_template(self, client):
        resp = client.get("/no-existe")
        assert resp.status_code == 404
        assert b"Error 404" in resp.data


class TestFilters:

    def test_fecha_corta(self):
        assert fecha_corta(None) == "—"
        assert fecha_corta(datetime(2026, 11, 5, 9, 30)) == "2026-11-05"
        assert fecha_corta(date(2026, 1, 2)) == "2026-01-02"
        assert fecha_corta("2026-11-05T09:00:00") == "2026-11-05"
        assert fecha_corta("pronto") == "pronto"

    def test_paso_o_guion(self):
        assert paso_o_guion(0) == "—"
        assert paso_o_guion(None) == "—"
        assert paso_o_guion(3) == "3"
