"""Single-owner workflow: idle -> processing -> ready, with failures returning to idle."""

from collections.abc import Awaitable, Callable
from pathlib import Path

from deepread.config.settings import Settings
from deepread.exceptions import DeepReadError
from deepread.extraction.base import BaseExtractor
from deepread.extraction.factory import ExtractorFactory
from deepread.intake.encoder import encode
from deepread.intake.models import EncodedDocument, Rejected, UploadCandidate, ValidationOutcome
from deepread.intake.validator import validate
from deepread.logging.logger import Log
from deepread.presenter.export import write_markdown_export
from deepread.presenter.printing import render_print
from deepread.workflow.exceptions import InvalidTransitionError
from deepread.workflow.messages import GENERIC_FAILURE_MESSAGE, describe_error
from deepread.workflow.state import Idle, Processing, Ready, WorkflowState

StateListener = Callable[[WorkflowState, WorkflowState], None]


class WorkflowStateMachine:
    """Owns the current WorkflowState and is its only mutator.

    One submission is in flight at a time. Submissions made outside ``Idle``
    are ignored. Nothing is retried: every failure lands in ``Idle`` with a
    message and the caller decides whether to resubmit.
    """

    def __init__(
        self,
        extractor: BaseExtractor,
        encoder: Callable[[UploadCandidate], Awaitable[EncodedDocument]] = encode,
        validator: Callable[[UploadCandidate], ValidationOutcome] = validate,
    ) -> None:
        self._extractor = extractor
        self._encoder = encoder
        self._validator = validator
        self._state: WorkflowState = Idle()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> WorkflowState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked with (previous, current) on every transition."""
        self._listeners.append(listener)

    async def submit(self, candidate: UploadCandidate) -> WorkflowState:
        """Validate, encode and analyze a file, returning the resulting state."""
        if not isinstance(self._state, Idle):
            Log.warning(
                f"Ignoring submission of {candidate.name}: "
                f"workflow is {type(self._state).__name__}"
            )
            return self._state

        outcome = self._validator(candidate)
        if isinstance(outcome, Rejected):
            Log.warning(f"Rejected {candidate.name}: {outcome.reason}")
            self._transition(Idle(last_error=describe_error(outcome.error)))
            return self._state

        self._transition(Processing(file_name=candidate.name))
        try:
            document = await self._encoder(candidate)
            result = await self._extractor.extract(document)
        except DeepReadError as exc:
            Log.error(f"Analysis of {candidate.name} failed: {exc}")
            self._transition(Idle(last_error=describe_error(exc)))
            return self._state
        except Exception as exc:
            Log.error(f"Unexpected failure analyzing {candidate.name}: {exc}", exc_info=True)
            self._transition(Idle(last_error=GENERIC_FAILURE_MESSAGE))
            return self._state

        self._transition(Ready(result=result))
        return self._state

    def reset(self) -> WorkflowState:
        """Discard the current analysis and return to intake."""
        self._require_ready("reset")
        self._transition(Idle())
        return self._state

    def export_markdown(self, directory: Path) -> Path:
        """Write the full report of the current analysis into ``directory``."""
        ready = self._require_ready("export")
        return write_markdown_export(ready.result, directory)

    def render_print(self, tab: str = "full-report") -> str:
        ready = self._require_ready("print")
        return render_print(ready.result, tab)

    def _require_ready(self, operation: str) -> Ready:
        if not isinstance(self._state, Ready):
            raise InvalidTransitionError(
                f"Cannot {operation} while workflow is {type(self._state).__name__}"
            )
        return self._state

    def _transition(self, new_state: WorkflowState) -> None:
        previous = self._state
        self._state = new_state
        Log.info(f"Workflow {type(previous).__name__} -> {type(new_state).__name__}")
        for listener in self._listeners:
            try:
                listener(previous, new_state)
            except Exception as exc:
                Log.error(f"State listener {listener!r} failed: {exc}", exc_info=True)


def build_workflow(settings: Settings) -> WorkflowStateMachine:
    """Build a WorkflowStateMachine with the configured extractor."""
    return WorkflowStateMachine(extractor=ExtractorFactory.create(settings))
