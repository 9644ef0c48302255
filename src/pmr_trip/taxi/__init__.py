from .crew import DriverInfo, TaxiCrew, VehicleInfo, create_faker_instance, generate_crew
from .session import SessionStatus, TaxiSimulationSession
from .simulator import TaxiSimulator, interpolate, remaining_eta
from .tracking import SimulationSnapshot, SnapshotSink, TaxiTrackingProcess, snapshot_from_session

__all__ = [
    "SessionStatus",
    "TaxiSimulationSession",
    "TaxiSimulator",
    "interpolate",
    "remaining_eta",
    "SimulationSnapshot",
    "SnapshotSink",
    "TaxiTrackingProcess",
    "snapshot_from_session",
    "TaxiCrew",
    "VehicleInfo",
    "DriverInfo",
    "generate_crew",
    "create_faker_instance",
]
