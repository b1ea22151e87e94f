"""Output schemas for open commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class OpenResolveOutput(BaseOutputSchema):
    """Output schema for open resolve command.

    Program fields are empty when resolution failed; the reason is in errors.
    """

    target: str = Field(..., description="Target as given on the command line")
    kind: str = Field(..., description="'path' or 'uri'")
    backend: str = Field(..., description="Platform backend used when no override applies")
    env: str = Field(..., description="Override variable consulted, empty string if none")
    program: str = Field(..., description="Program to execute, empty string on failure")
    args: list[str] = Field(..., description="Arguments passed to the program")
    argv: list[str] = Field(..., description="Program followed by its arguments")
    command: str = Field(..., description="Shell-quoted command line for display")


class OpenTargetOutput(BaseOutputSchema):
    """Output schema for open target command."""

    target: str = Field(..., description="Target as given on the command line")
    kind: str = Field(..., description="'path' or 'uri'")
    display: str = Field(..., description="Display form passed to path/URI openers")
    uri: str = Field(..., description="URI form, empty string if conversion failed")


register_output_schema("open", "resolve", OpenResolveOutput)
register_output_schema("open", "target", OpenTargetOutput)
