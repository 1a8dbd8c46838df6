from functools import wraps
from flask import session, redirect, url_for, flash, request, jsonify


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not session.get("user_id"):
            flash("Inicia sesión.", "warning")
            return redirect(url_for("auth_admin.login", next=request.path))
        return view(*args, **kwargs)
    return wrapped


def api_login_required(view):
    # Igual que login_required pero para /api: 401 en JSON, sin redirección
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not session.get("user_id"):
            return jsonify({"error": "Debes iniciar sesión."}), 401
        return view(*args, **kwargs)
    return wrapped


def role_required(*roles):
    def deco(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            if not session.get("user_id"):
                if request.path.startswith("/api/"):
                    return jsonify({"error": "Debes iniciar sesión."}), 401
                flash("Inicia sesión.", "warning")
                return redirect(url_for("auth_admin.login", next=request.path))
            if session.get("role") not in roles:
                if request.path.startswith("/api/"):
                    return jsonify({"error": "No tienes permisos."}), 403
                flash("No tienes permisos.", "danger")
                return redirect(url_for("casos.lista"))
            return view(*args, **kwargs)
        return wrapped
    return deco
