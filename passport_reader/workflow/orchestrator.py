"""Extraction workflow: one exclusive state, one request in flight at a time."""

from collections.abc import Awaitable, Callable

from passport_reader.extraction.base import BaseExtractor
from passport_reader.extraction.models import PassportData
from passport_reader.extraction.validator import validate_and_build
from passport_reader.ingestion.ingestor import ingest
from passport_reader.ingestion.models import EncodedImage, RawImage
from passport_reader.logging.logger import Log
from passport_reader.workflow.exceptions import PreconditionError
from passport_reader.workflow.state import (
    Extracting,
    Failed,
    Idle,
    Ready,
    Succeeded,
    WorkflowState,
)

EXTRACTION_FAILED_PREFIX = "extraction failed"
INGESTION_FAILED_PREFIX = "image could not be loaded"
UNKNOWN_ERROR_MESSAGE = "an unknown error occurred"

StateListener = Callable[[WorkflowState], None]


def describe_failure(prefix: str, exc: BaseException) -> str:
    """Build the single user-facing message for a failure."""
    message = str(exc).strip()
    return f"{prefix}: {message or UNKNOWN_ERROR_MESSAGE}"


class ExtractionOrchestrator:
    """Owns the WorkflowState and drives it from user actions.

    Every action that starts or replaces work takes a new generation number.
    An ingestion or extraction result is applied only if its generation is
    still the current one; otherwise it is logged and dropped.
    """

    def __init__(
        self,
        extractor: BaseExtractor,
        *,
        ingestor: Callable[[RawImage], Awaitable[EncodedImage]] = ingest,
    ) -> None:
        self._extractor = extractor
        self._ingestor = ingestor
        self._generation = 0
        self._state: WorkflowState = Idle()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every applied state. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def on_image_selected(self, file: RawImage) -> WorkflowState:
        """Ingest a new image. Supersedes any previous image, record, or error."""
        if isinstance(self._state, Extracting):
            Log.info(
                f"Superseding in-flight extraction (generation {self._state.generation})"
            )
        generation = self._next_generation()
        outcome: WorkflowState
        try:
            image = await self._ingestor(file)
        except Exception as exc:
            Log.error(f"Ingestion of {file.name or 'image'} failed: {exc}")
            outcome = Failed(
                error=describe_failure(INGESTION_FAILED_PREFIX, exc),
                generation=generation,
            )
        else:
            outcome = Ready(image=image, generation=generation)
        self._settle(outcome)
        return self._state

    def clear(self) -> WorkflowState:
        """Reset to Idle. An in-flight request is not aborted, its result is dropped."""
        self._apply(Idle(generation=self._next_generation()))
        return self._state

    async def extract(self) -> WorkflowState:
        """Run one extraction for the Ready image.

        A call while Extracting is ignored.

        Raises:
            PreconditionError: if there is no Ready image. State is unchanged.
        """
        current = self._state
        if isinstance(current, Extracting):
            Log.debug(f"Extraction already in flight (generation {current.generation}), ignoring")
            return current
        if not isinstance(current, Ready):
            raise PreconditionError(
                f"no image available for extraction (state is {current.name})"
            )
        if current.generation != self._generation:
            raise PreconditionError(
                "no image available for extraction (a newer image is still loading)"
            )

        generation = self._next_generation()
        image = current.image
        self._apply(Extracting(image=image, generation=generation))

        outcome: WorkflowState
        try:
            record = self._ensure_record(await self._extractor.extract(image))
        except Exception as exc:
            Log.error(f"Extraction failed (generation {generation}): {exc}")
            outcome = Failed(
                error=describe_failure(EXTRACTION_FAILED_PREFIX, exc),
                generation=generation,
            )
        else:
            outcome = Succeeded(image=image, record=record, generation=generation)
        self._settle(outcome)
        return self._state

    @staticmethod
    def _ensure_record(result: object) -> PassportData:
        if isinstance(result, PassportData):
            return result
        return validate_and_build(result)

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _settle(self, outcome: WorkflowState) -> None:
        if outcome.generation != self._generation:
            Log.warning(
                f"Discarding {outcome.name} result from generation {outcome.generation}, "
                f"current generation is {self._generation}"
            )
            return
        self._apply(outcome)

    def _apply(self, state: WorkflowState) -> None:
        self._state = state
        Log.info(f"state -> {state.name} (generation {state.generation})")
        for listener in list(self._listeners):
            listener(state)
