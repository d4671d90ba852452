import argparse
import asyncio
import json
import sys
from pathlib import Path

from passport_reader.config.settings import Settings
from passport_reader.extraction.factory import ExtractorFactory
from passport_reader.ingestion.models import RawImage
from passport_reader.logging.logger import Log
from passport_reader.workflow.orchestrator import ExtractionOrchestrator
from passport_reader.workflow.state import Failed, Succeeded, WorkflowState


def render_state(state: WorkflowState) -> dict[str, object]:
    """JSON-ready view of a workflow state. The image payload is left out."""
    view: dict[str, object] = {"state": state.name}
    if isinstance(state, Succeeded):
        view["record"] = state.record.to_dict()
    elif isinstance(state, Failed):
        view["error"] = state.error
    return view


async def run(image_path: Path, settings: Settings) -> WorkflowState:
    """Select the image, extract once, and return the final state."""
    orchestrator = ExtractionOrchestrator(ExtractorFactory.create(settings))
    state = await orchestrator.on_image_selected(RawImage.from_path(image_path))
    if isinstance(state, Failed):
        return state
    return await orchestrator.extract()


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> extractor -> select -> extract -> print."""
    parser = argparse.ArgumentParser(
        prog="passport-reader",
        description="Extract passport fields from an image of a passport data page.",
    )
    parser.add_argument("image", type=Path, help="path to the passport image")
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level)

    state = asyncio.run(run(args.image, settings))
    print(json.dumps(render_state(state), indent=2, ensure_ascii=False))
    return 0 if isinstance(state, Succeeded) else 1


if __name__ == "__main__":
    sys.exit(main())
