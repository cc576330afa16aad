"""One matching strategy attached to a link rule."""

from pydantic import BaseModel, ConfigDict, Field

from .PatternContext import PatternContext
from .PatternKind import PatternKind


class Pattern(BaseModel):
    """A text, regex or line pattern.

    Regex sources are not compiled here; a pattern that fails to compile is
    skipped at scan time.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    kind: PatternKind = Field(..., alias="type", description="Matching type: text, regex or line")
    value: str = Field(..., min_length=1, description="Literal text or regex source")
    case_sensitive: bool | None = Field(None, alias="caseSensitive")
    file_extensions: tuple[str, ...] | None = Field(
        None, alias="fileExtensions", description="Extensions (with dot) the pattern applies to"
    )
    context: PatternContext | None = None
    highlight_group: int | None = Field(
        None, alias="highlightGroup", ge=0, description="Regex group to highlight, 0 for the whole match"
    )

    @property
    def effective_case_sensitive(self) -> bool:
        """Case sensitivity with defaults applied: text is sensitive, regex is not."""
        if self.case_sensitive is not None:
            return self.case_sensitive
        return self.kind != PatternKind.REGEX

    def applies_to(self, extension: str) -> bool:
        """Check the file extension gate."""
        return self.file_extensions is None or extension in self.file_extensions
