from passport_reader.workflow.exceptions import PreconditionError
from passport_reader.workflow.orchestrator import ExtractionOrchestrator
from passport_reader.workflow.state import (
    Extracting,
    Failed,
    Idle,
    Ready,
    Succeeded,
    WorkflowState,
)

__all__ = [
    "ExtractionOrchestrator",
    "Extracting",
    "Failed",
    "Idle",
    "PreconditionError",
    "Ready",
    "Succeeded",
    "WorkflowState",
]
