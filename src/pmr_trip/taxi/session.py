from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from pmr_trip.geo.models import GeoPoint


class SessionStatus(str, Enum):
    """Taxi ride simulation states."""

    PENDING = "pending"
    RUNNING = "running"
    ARRIVED = "arrived"
    STOPPED = "stopped"

    @property
    def course_label(self) -> str:
        """Value stored in the simulation record's statut_course column."""
        return COURSE_LABELS[self]


COURSE_LABELS = {
    SessionStatus.PENDING: "en_attente",
    SessionStatus.RUNNING: "en_cours",
    SessionStatus.ARRIVED: "arrivee",
    SessionStatus.STOPPED: "arretee",
}


class TaxiSimulationSession(BaseModel):
    """Snapshot of one simulated taxi ride.

    Sessions are immutable; TaxiSimulator returns a new value for every
    transition and the caller stores whichever one is current.
    """

    session_id: str = Field(default_factory=lambda: str(uuid4()))
    origin: GeoPoint
    destination: GeoPoint
    total_eta_minutes: float = Field(gt=0)
    total_ticks: int = Field(default=100, ge=1)
    animation_seconds: float = Field(default=30.0, gt=0)
    ticks_elapsed: int = Field(default=0, ge=0)
    progress_percent: float = Field(default=0.0, ge=0.0, le=100.0)
    current_position: GeoPoint
    remaining_eta_minutes: int = Field(ge=0)
    status: SessionStatus = SessionStatus.PENDING

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def tick_interval_seconds(self) -> float:
        return self.animation_seconds / self.total_ticks

    @property
    def is_terminal(self) -> bool:
        return self.status == SessionStatus.ARRIVED
