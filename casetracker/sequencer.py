# casetracker/sequencer.py
"""
Secuencia de work steps de un caso.

Dado el conjunto de pasos de UN caso (ya cargado en memoria), calcula el paso
actual y sus vecinos inmediatos (anterior / siguiente) por número de paso.

Reglas de frontera:
  - sin paso actual            -> current=None, previous=None, next=None
  - actual es el paso 1        -> previous=None
  - actual es el último paso   -> next=None
  - hueco en la numeración     -> el vecino faltante es None

Es una función pura sobre la colección recibida: no hace I/O, no guarda
estado compartido y se puede invocar desde varios hilos siempre que cada
llamada reciba su propia foto de los pasos.

Política ante datos corruptos (varios "current", números duplicados, huecos):
se detecta, se reporta una sola vez en el log y se responde "best effort"
(primera coincidencia). ``raise_for_integrity()`` permite fallar en voz alta.

Cada instancia de ``WorkStepSequencer`` valida y reporta una vez. Las funciones
sueltas (``current_step_number`` etc.) construyen su propia instancia en cada
llamada; para obtener los tres números con un solo reporte usar
``step_numbers(steps)`` o una misma instancia.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

log = logging.getLogger(__name__)

# Valor que el listado serializa cuando no hay paso actual
NO_CURRENT_STEP = 0


class StepIntegrityError(Exception):
    def __init__(self, case_id, problems):
        who = f"caso {case_id}" if case_id is not None else "caso"
        super().__init__(f"Pasos inconsistentes en {who}: " + "; ".join(problems))
        self.case_id = case_id
        self.problems = tuple(problems)


@dataclass(frozen=True)
class StepPosition:
    current: Optional[int] = None
    previous: Optional[int] = None
    next: Optional[int] = None

    @property
    def started(self) -> bool:
        return self.current is not None


class WorkStepSequencer:

    def __init__(self, steps: Iterable[Any], case_id=None):
        if steps is None:
            raise TypeError("steps debe ser una colección ya cargada, no None")

        self.case_id = case_id
        self._by_number: Dict[int, Any] = {}
        self._current_step = None
        problems = []

        current_numbers = []
        total = 0
        for step in steps:
            total += 1
            number = step.step_number
            if number in self._by_number:
                problems.append(f"número de paso duplicado: {number}")
            else:
                self._by_number[number] = step

            if step.is_current:
                current_numbers.append(number)
                if self._current_step is None:
                    self._current_step = step

        # Un "actual" con número < 1 no es un paso válido: se reporta como sin paso
        # actual para que el registro no mezcle current=0 con datos de un paso
        if self._current_step is not None and self._current_step.step_number < 1:
            problems.append(f"paso actual con número inválido: {self._current_step.step_number}")
            self._current_step = None

        if len(current_numbers) > 1:
            problems.append(
                "más de un paso actual: " + ", ".join(str(n) for n in current_numbers)
            )

        expected = set(range(1, len(self._by_number) + 1))
        if total and set(self._by_number) != expected:
            problems.append(
                "numeración fuera de 1..N: " + ", ".join(str(n) for n in sorted(self._by_number))
            )

        self.problems: Tuple[str, ...] = tuple(problems)
        if self.problems:
            log.warning(
                "Integridad de pasos (caso %s): %s",
                case_id if case_id is not None else "?",
                "; ".join(self.problems),
            )

        self.position = self._locate()

    def _locate(self) -> StepPosition:
        if self._current_step is None:
            return StepPosition()

        current = self._current_step.step_number
        previous = current - 1 if current > 1 and (current - 1) in self._by_number else None
        following = current + 1 if (current + 1) in self._by_number else None
        return StepPosition(current=current, previous=previous, next=following)

    @property
    def current_step(self):
        """El objeto paso marcado como actual (o None)."""
        return self._current_step

    def step(self, number: Optional[int]):
        if number is None:
            return None
        return self._by_number.get(number)

    @property
    def is_consistent(self) -> bool:
        return not self.problems

    def raise_for_integrity(self) -> None:
        if self.problems:
            raise StepIntegrityError(self.case_id, self.problems)

    # Números listos para el wire format
    def current_step_number(self) -> int:
        if self.position.current is None:
            return NO_CURRENT_STEP
        return self.position.current

    def previous_step_number(self) -> Optional[int]:
        return self.position.previous

    def next_step_number(self) -> Optional[int]:
        return self.position.next


def step_numbers(steps, case_id=None) -> Tuple[int, Optional[int], Optional[int]]:
    """(current, previous, next) con una sola validación de la colección."""
    seq = WorkStepSequencer(steps, case_id=case_id)
    return seq.current_step_number(), seq.previous_step_number(), seq.next_step_number()


def current_step_number(steps) -> int:
    return WorkStepSequencer(steps).current_step_number()


def previous_step_number(steps) -> Optional[int]:
    return WorkStepSequencer(steps).previous_step_number()


def next_step_number(steps) -> Optional[int]:
    return WorkStepSequencer(steps).next_step_number()
