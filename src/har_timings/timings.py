"""Timing phases and normalization of raw HAR timings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Timing phases of one exchange, in rendering order."""

    BLOCKED = "blocked"
    DNS = "dns"
    CONNECT = "connect"
    SSL = "ssl"
    SEND = "send"
    WAIT = "wait"
    RECEIVE = "receive"


PHASE_ORDER: tuple[Phase, ...] = tuple(Phase)

# Always part of the breakdown, even when zero.
MANDATORY_PHASES: frozenset[Phase] = frozenset({Phase.WAIT, Phase.RECEIVE})


class PhaseMeasurement(BaseModel):
    """Measured duration of one phase."""

    model_config = ConfigDict(frozen=True)

    phase: Phase
    duration: float = Field(ge=0)


class TimingSet(BaseModel):
    """Included phases of one exchange in canonical order, with their total."""

    model_config = ConfigDict(frozen=True)

    phases: tuple[PhaseMeasurement, ...] = ()
    total: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        return not self.phases


def _measured(value: float | None) -> float | None:
    if value is None or value < 0:
        return None
    return float(value)


def normalize_timings(raw: Mapping[str, float | None]) -> TimingSet:
    """Filter raw phase durations into a :class:`TimingSet`.

    Optional phases are kept only when strictly positive; ``wait`` and
    ``receive`` are always kept, unmeasured values counting as zero. When
    nothing adds up to a positive total the degenerate (empty) set is
    returned.
    """
    included: list[PhaseMeasurement] = []
    for phase in PHASE_ORDER:
        duration = _measured(raw.get(phase.value))
        if phase in MANDATORY_PHASES:
            included.append(PhaseMeasurement(phase=phase, duration=duration or 0.0))
        elif duration is not None and duration > 0:
            included.append(PhaseMeasurement(phase=phase, duration=duration))

    total = sum(m.duration for m in included)
    if total <= 0:
        logger.debug("All timing phases are zero or unmeasured")
        return TimingSet()
    return TimingSet(phases=tuple(included), total=total)
