from datetime import date, datetime


def fecha_corta(value) -> str:
    if value is None or value == "":
        return "—"
    if isinstance(value, (datetime, date)):
        return value.strftime("%Y-%m-%d")
    value = str(value).strip()
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d")
    except ValueError:
        return value  # no lo rompas si llega en otro formato


def paso_o_guion(value) -> str:
    # 0 / None = sin paso
    return str(value) if value else "—"


def register_filters(app):
    app.jinja_env.filters["fecha_corta"] = fecha_corta
    app.jinja_env.filters["paso_o_guion"] = paso_o_guion
