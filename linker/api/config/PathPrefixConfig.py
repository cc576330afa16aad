"""Path prefix configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ..path.PathBase import PathBase


class PathPrefixConfig(BaseModel):
    """One entry of the path prefix table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    description: str = Field(..., description="Human readable meaning of the prefix")
    base: PathBase = Field(..., description="Directory the remainder is joined to")
