"""Pydantic models for JSON output schemas.

These models define the --json output of qtchooser commands and validate
it before it is printed.
"""

from pydantic import BaseModel, ConfigDict


class SdkEnvironmentResponse(BaseModel):
    """JSON response schema for `qtchooser print-env --json`.

    Attributes:
        name: Name of the selected SDK
        tools_dir: Directory holding the SDK's tools
        libraries_dir: Directory holding the SDK's libraries
        config_file: Descriptor the SDK was read from
    """

    model_config = ConfigDict(strict=True)

    name: str
    tools_dir: str
    libraries_dir: str
    config_file: str | None


class SdkListResponse(BaseModel):
    """JSON response schema for `qtchooser list-versions --json`.

    Attributes:
        versions: Registered SDK names, sorted
    """

    model_config = ConfigDict(strict=True)

    versions: list[str]
