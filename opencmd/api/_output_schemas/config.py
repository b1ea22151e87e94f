"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - content: dict[str, str] - effective configuration values, empty on error
    - overrides: dict[str, str] - override variable name -> current value ("" if unset)
    """

    content: dict[str, str] = Field(..., description="Effective configuration values")
    overrides: dict[str, str] = Field(..., description="Override variable name mapped to its current value")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
