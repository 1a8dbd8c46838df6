from flask import redirect, session, url_for


def init_root_routes(app):
    """
    Registra la ruta raíz "/":
      - Sin sesión -> /admin/login
      - Con sesión -> /casos/
    """
    @app.route("/")
    def root_redirect():
        if not session.get("user_id"):
            return redirect(url_for("auth_admin.login"))
        return redirect(url_for("casos.lista"))
