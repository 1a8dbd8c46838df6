# casetracker/blueprints/auth_admin.py
from flask import Blueprint, render_template, redirect, url_for, session, flash, request, current_app
from werkzeug.security import check_password_hash
from ..models import AdminUser

auth_bp = Blueprint("auth_admin", __name__, url_prefix="/admin")


def get_user(username: str):
    """Devuelve el AdminUser activo con ese username o None."""
    if not username:
        return None
    return AdminUser.query.filter_by(username=username, is_active=True).first()


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        username = (request.form.get("username") or "").strip()
        password = (request.form.get("password") or "").strip()

        user = get_user(username)

        if user and check_password_hash(user.password_hash, password):
            # Sesión limpia
            session.clear()
            session.permanent = True
            session["user_id"] = user.id
            session["username"] = user.username
            session["role"] = user.role or "user"
            session["fullname"] = user.fullname
            current_app.logger.info("Login de %s", user.username)

            # Soportar ?next= tanto en GET como POST
            next_url = request.values.get("next")
            if next_url and next_url.startswith("/") and not next_url.startswith("//"):
                return redirect(next_url)

            return redirect(url_for("casos.lista"))

        current_app.logger.info("Login fallido para %r", username)
        flash("Credenciales inválidas.", "danger")
        return render_template("admin_login.html"), 401

    return render_template("admin_login.html")


@auth_bp.route("/logout")
def logout():
    session.clear()
    flash("Sesión cerrada.", "info")
    return redirect(url_for("auth_admin.login"))
