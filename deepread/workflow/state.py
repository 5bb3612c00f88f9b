from dataclasses import dataclass

from deepread.extraction.models import AnalysisResult


@dataclass(frozen=True)
class Idle:
    """Awaiting input; carries the message of the last failed submission, if any."""

    last_error: str | None = None


@dataclass(frozen=True)
class Processing:
    """A single request is in flight."""

    file_name: str


@dataclass(frozen=True)
class Ready:
    """Holds exactly one analysis for presentation."""

    result: AnalysisResult


WorkflowState = Idle | Processing | Ready
