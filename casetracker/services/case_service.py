# casetracker/services/case_service.py
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import joinedload, selectinload

from casetracker.errors import CaseAdvanceConflict, CaseNotFound, CaseValidationError
from casetracker.extensions import db
from casetracker.models import Case, Panel, WorkStep
from casetracker.sequencer import WorkStepSequencer

log = logging.getLogger(__name__)


def _con_pasos(query):
    # Todos los pasos del caso y su panel en la misma unidad de trabajo:
    # el sequencer recibe una foto consistente y se evita el N+1.
    return query.options(selectinload(Case.work_steps).joinedload(WorkStep.panel))


def _parse_fecha(value, campo, errores):
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        errores[campo] = "Debe ser una fecha ISO-8601."
        return None
    try:
        fecha = datetime.fromisoformat(value.strip())
    except ValueError:
        errores[campo] = "Debe ser una fecha ISO-8601."
        return None
    # Columnas sin zona horaria: se guarda en UTC naive
    if fecha.tzinfo is not None:
        fecha = fecha.astimezone(timezone.utc).replace(tzinfo=None)
    return fecha


def _parse_texto(value, campo, errores):
    if value is None:
        return ""
    if not isinstance(value, str):
        errores[campo] = "Debe ser texto."
        return ""
    return value.strip()


def _validar_caso(data):
    errores = {}
    if not isinstance(data, dict):
        raise CaseValidationError("El cuerpo debe ser un objeto JSON.")

    fullname = _parse_texto(data.get("candidate_fullname"), "candidate_fullname", errores)
    email = _parse_texto(data.get("candidate_email"), "candidate_email", errores)
    if not fullname and "candidate_fullname" not in errores:
        errores["candidate_fullname"] = "Es obligatorio."
    if (not email or "@" not in email) and "candidate_email" not in errores:
        errores["candidate_email"] = "Correo inválido."

    due_date = _parse_fecha(data.get("due_date"), "due_date", errores)

    notified = data.get("applicant_has_been_notified", False)
    if not isinstance(notified, bool):
        errores["applicant_has_been_notified"] = "Debe ser booleano."

    pasos = []
    raw_steps = data.get("steps")
    if raw_steps is None:
        raw_steps = []
    elif not isinstance(raw_steps, list):
        errores["steps"] = "Debe ser una lista."
        raw_steps = []
    for i, s in enumerate(raw_steps, start=1):
        campo = f"steps[{i - 1}]"
        if not isinstance(s, dict):
            errores[campo] = "Cada paso debe ser un objeto."
            continue
        panel_name = _parse_texto(s.get("panel_name"), f"{campo}.panel_name", errores)
        if not panel_name and f"{campo}.panel_name" not in errores:
            errores[f"{campo}.panel_name"] = "Es obligatorio."
        paso_due = _parse_fecha(s.get("due_date"), f"{campo}.due_date", errores)
        pasos.append({"step_number": i, "panel_name": panel_name, "due_date": paso_due})

    if errores:
        raise CaseValidationError("Datos del caso inválidos.", errores)

    return {
        "candidate_fullname": fullname,
        "candidate_email": email,
        "due_date": due_date,
        "applicant_has_been_notified": notified,
        "steps": pasos,
    }


def _panel_por_nombre(nombre, cache):
    panel = cache.get(nombre)
    if panel is None:
        panel = Panel.query.filter_by(name=nombre).first()
        if panel is None:
            panel = Panel(name=nombre)
            db.session.add(panel)
        cache[nombre] = panel
    return panel


class CaseService:

    @staticmethod
    def listar_casos(page=1, per_page=25, max_per_page=100, notified=None):
        query = _con_pasos(db.select(Case)).order_by(Case.id.asc())
        if notified is not None:
            query = query.where(Case.applicant_has_been_notified == notified)

        return db.paginate(
            query,
            page=page,
            per_page=per_page,
            max_per_page=max_per_page,
            error_out=False,
        )

    @staticmethod
    def obtener_caso(case_id):
        case = db.session.execute(
            _con_pasos(db.select(Case)).where(Case.id == case_id)
        ).scalar_one_or_none()
        if case is None:
            raise CaseNotFound(case_id)
        return case

    @staticmethod
    def crear_caso(data):
        datos = _validar_caso(data)

        case = Case(
            candidate_fullname=datos["candidate_fullname"],
            candidate_email=datos["candidate_email"],
            due_date=datos["due_date"],
            applicant_has_been_notified=datos["applicant_has_been_notified"],
        )

        # Caso recién creado: pasos 1..N, ninguno actual
        paneles = {}
        for paso in datos["steps"]:
            case.work_steps.append(WorkStep(
                step_number=paso["step_number"],
                is_current=False,
                due_date=paso["due_date"],
                all_requirements_complete=False,
                panel=_panel_por_nombre(paso["panel_name"], paneles),
            ))

        db.session.add(case)
        db.session.commit()
        log.info("Caso %s creado con %d pasos", case.id, len(datos["steps"]))

        return CaseService.obtener_caso(case.id)

    @staticmethod
    def avanzar_caso(case_id):
        """
        Mueve la marca "actual" exactamente un paso hacia adelante.
        Sin paso actual -> paso 1. En el último paso -> CaseAdvanceConflict.
        Los pasos anteriores se conservan.
        """
        case = db.session.execute(
            _con_pasos(db.select(Case)).where(Case.id == case_id).with_for_update()
        ).scalar_one_or_none()
        if case is None:
            raise CaseNotFound(case_id)

        seq = WorkStepSequencer(case.work_steps, case_id=case.id)
        # Aquí sí fallamos en voz alta: no movemos marcas sobre datos corruptos
        seq.raise_for_integrity()

        if not case.work_steps:
            raise CaseAdvanceConflict(f"El caso {case.id} no tiene pasos.")

        if not seq.position.started:
            destino = seq.step(1)
        elif seq.position.next is None:
            raise CaseAdvanceConflict(f"El caso {case.id} ya está en su último paso.")
        else:
            seq.current_step.is_current = False
            destino = seq.step(seq.position.next)

        destino.is_current = True
        db.session.commit()
        log.info("Caso %s avanzado al paso %s", case.id, destino.step_number)

        return CaseService.obtener_caso(case.id)

    @staticmethod
    def listar_paneles():
        return Panel.query.order_by(Panel.name.asc()).all()
