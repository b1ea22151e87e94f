"""Resolve command - shows the command that would open a target."""

from collections.abc import Iterator

from pydantic import ValidationError

from ..StageResult import StageResult
from .._output_schemas.open import OpenResolveOutput
from ..config.OpenerConfig import OpenerConfig
from ..errors.OpenError import OpenError
from ..types.PathOrURI import PathOrURI
from .Opener import Opener


def cmd_resolve(target: str, env: str | None = None, backend: str | None = None) -> StageResult:
    """Resolve a target into the command opening it.

    Args:
        target: Path or URI string
        env: Override variable to consult (e.g. "BROWSER"), None for the system handler only
        backend: Force a platform backend instead of the configured one

    Returns:
        StageResult with the resolved program and arguments
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.2, "Parsing target...")
        parsed = PathOrURI.parse(target)
        kind = "uri" if parsed.is_uri else "path"

        yield (0.5, "Loading backend...")
        errors: list[str] = []
        opener = None
        try:
            config = OpenerConfig.from_env()
            if backend:
                config = config.model_copy(update={"type": OpenerConfig(type=backend).type})
            opener = Opener(config)
        except ValidationError as e:
            errors.append(str(e))

        yield (0.8, "Resolving command...")
        spec = None
        if opener is not None:
            try:
                spec = opener.resolve(parsed, env)
            except OpenError as e:
                errors.append(str(e))

        yield (1.0, "Complete")

        if spec is not None:
            result_obj.result = f"Resolved {kind} {parsed} to {spec.program}"
        else:
            result_obj.result = f"Error: could not resolve {target!r}: {errors[0]}"
        result_obj.output = OpenResolveOutput(
            errors=errors,
            warnings=[],
            target=target,
            kind=kind,
            backend=opener.backend if opener is not None else (backend or ""),
            env=env or "",
            program=spec.program if spec is not None else "",
            args=list(spec.args) if spec is not None else [],
            argv=spec.argv if spec is not None else [],
            command=str(spec) if spec is not None else "",
        ).model_dump(mode="python")
        result_obj.success = spec is not None

    return StageResult(
        announce=f"Resolving open command for {target}...",
        progress_callback=do_work,
    )
