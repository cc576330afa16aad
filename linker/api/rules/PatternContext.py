"""Exact text required around a pattern value."""

from pydantic import BaseModel, ConfigDict


class PatternContext(BaseModel):
    """Verbatim text that must precede and/or follow a match."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    before: str | None = None
    after: str | None = None
