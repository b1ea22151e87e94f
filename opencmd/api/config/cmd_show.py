"""Show command - displays the effective configuration."""

import os
from collections.abc import Iterator

from pydantic import ValidationError

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .OpenerConfig import _BACKEND_REGISTRY, OpenerConfig


def cmd_show() -> StageResult:
    """Show the configuration an Opener would be built with.

    Returns:
        StageResult with configuration values and current override variables
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading environment...")
        try:
            config = OpenerConfig.from_env()
        except ValidationError as e:
            yield (1.0, "Complete")
            result_obj.result = "Error: invalid configuration in environment"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                overrides={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")

        content = {key: str(value) for key, value in config.model_dump(mode="python").items()}
        content["handler"] = _BACKEND_REGISTRY[config.type]
        overrides = {name: os.environ.get(name, "") for name in (config.browser_env, config.editor_env)}

        result_obj.result = f"Configuration loaded (backend: {config.type})"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=[],
            content=content,
            overrides=overrides,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
