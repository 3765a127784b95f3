# apps/goals/domain/stages.py
"""
Model etapów celu.

Etapy 0-3 to kolumny tablicy (etykiety bierzemy z tonu grupy po indeksie),
etap 4 to stan końcowy, którego tablica nie pokazuje. Przejścia nie mają
ograniczeń: z każdego poprawnego etapu można przejść do każdego innego.
"""
import logging
from typing import List, Sequence

logger = logging.getLogger(__name__)

STAGE_COUNT = 4          # liczba kolumn tablicy
OVERFLOW_STAGE = 4       # poza tablicą
MIN_STAGE = 0
MAX_STAGE = 4
UNKNOWN_STAGE_LABEL = "unknown"

_STAGE_COLORS = ("bg-rose-500", "bg-amber-500", "bg-sky-500", "bg-emerald-500")
_STAGE_COLORS_LIGHT = ("bg-rose-200", "bg-amber-200", "bg-sky-200", "bg-emerald-200")
_STAGE_BORDERS_LIGHT = ("border-rose-200", "border-amber-200", "border-sky-200", "border-emerald-200")
DEFAULT_STAGE_COLOR = "bg-gray-500"
DEFAULT_STAGE_COLOR_LIGHT = "bg-gray-200"
DEFAULT_STAGE_BORDER_LIGHT = "border-gray-200"


class InvalidStage(ValueError):
    pass


def parse_stage(raw) -> int:
    """Parsowanie na brzegu systemu: wszystko, co nie jest liczbą całkowitą, odrzucamy."""
    if raw is None or isinstance(raw, bool):
        raise InvalidStage("Stage is required")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidStage(f"Stage must be an integer, got {raw!r}") from None


def validate_stage_update(new_stage: int) -> int:
    if new_stage < MIN_STAGE or new_stage > MAX_STAGE:
        raise InvalidStage(f"Stage must be between {MIN_STAGE} and {MAX_STAGE}")
    return new_stage


def is_board_stage(stage: int) -> bool:
    return MIN_STAGE <= stage < STAGE_COUNT


def stages_of(tone) -> List[str]:
    """Zawsze 4 etykiety; brakujące uzupełniamy jako 'unknown'."""
    labels = [str(label) for label in list(tone.stages)[:STAGE_COUNT]]
    return labels + [UNKNOWN_STAGE_LABEL] * (STAGE_COUNT - len(labels))


def partition_by_stage(goals: Sequence) -> List[list]:
    """
    Dzieli cele na 4 kubełki (po jednym na kolumnę), zachowując kolejność.

    Cele z etapem 4 pomijamy po cichu. Każda inna wartość spoza 0-3 to
    błąd danych: cel znika z tablicy, a my zapisujemy diagnostykę.
    """
    goals_in_stages = [[] for _ in range(STAGE_COUNT)]

    for goal in goals:
        if is_board_stage(goal.stage):
            goals_in_stages[goal.stage].append(goal)
        elif goal.stage == OVERFLOW_STAGE:
            logger.debug("Goal %s is in the overflow stage, not on the board", goal.id)
        else:
            logger.error("Goal has invalid stage, skipping: %r", goal)

    return goals_in_stages


def _stage_index(index):
    try:
        index = int(index)
    except (TypeError, ValueError):
        return None
    return index if is_board_stage(index) else None


def stage_color(index) -> str:
    i = _stage_index(index)
    return DEFAULT_STAGE_COLOR if i is None else _STAGE_COLORS[i]


def stage_color_light(index) -> str:
    i = _stage_index(index)
    return DEFAULT_STAGE_COLOR_LIGHT if i is None else _STAGE_COLORS_LIGHT[i]


def stage_border_light(index) -> str:
    i = _stage_index(index)
    return DEFAULT_STAGE_BORDER_LIGHT if i is None else _STAGE_BORDERS_LIGHT[i]


def stage_text(index, labels: Sequence[str]) -> str:
    try:
        index = int(index)
    except (TypeError, ValueError):
        return UNKNOWN_STAGE_LABEL
    if 0 <= index < len(labels):
        return labels[index]
    return UNKNOWN_STAGE_LABEL
