"""Target command - shows how a target is classified and converted."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.open import OpenTargetOutput
from ..errors.OpenError import OpenError
from ..types.PathOrURI import PathOrURI


def cmd_target(target: str) -> StageResult:
    """Classify target as path or URI and convert it to its URI form.

    Args:
        target: Path or URI string

    Returns:
        StageResult with the display and URI forms
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Parsing target...")
        parsed = PathOrURI.parse(target)
        kind = "uri" if parsed.is_uri else "path"

        yield (0.7, "Converting to URI...")
        errors: list[str] = []
        uri = ""
        try:
            uri = str(parsed.uri())
        except OpenError as e:
            errors.append(str(e))

        yield (1.0, "Complete")

        result_obj.result = f"Target is a {kind}" if not errors else f"Error: {errors[0]}"
        result_obj.output = OpenTargetOutput(
            errors=errors,
            warnings=[],
            target=target,
            kind=kind,
            display=str(parsed),
            uri=uri,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce=f"Inspecting target {target}...",
        progress_callback=do_work,
    )
