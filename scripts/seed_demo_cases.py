# scripts/seed_demo_cases.py
# Carga casos de ejemplo a través del servicio (mismas validaciones que el API).
from casetracker import create_app
from casetracker.services.case_service import CaseService

PANELES = ["Screening telefónico", "Entrevista técnica", "Panel de cultura", "Oferta"]

CASOS = [
    # (nombre, correo, vence, notificado, veces a avanzar)
    ("Ana Torres", "ana.torres@example.com", "2026-11-02T09:00:00", False, 0),
    ("Luis Pérez", "luis.perez@example.com", "2026-11-05T09:00:00", False, 1),
    ("Marta Ruiz", "marta.ruiz@example.com", "2026-11-10T09:00:00", True, 2),
    ("Jorge Díaz", "jorge.diaz@example.com", None, True, len(PANELES)),
]

app = create_app()

with app.app_context():
    for nombre, correo, vence, notificado, avances in CASOS:
        case = CaseService.crear_caso({
            "candidate_fullname": nombre,
            "candidate_email": correo,
            "due_date": vence,
            "applicant_has_been_notified": notificado,
            "steps": [{"panel_name": p} for p in PANELES],
        })
        for _ in range(avances):
            CaseService.avanzar_caso(case.id)
        print(f"Caso {case.id}: {nombre} ({avances} avances)")
print("Listo.")
