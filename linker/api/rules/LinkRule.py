"""Named, user-configured link definition."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .LinkKind import LinkKind
from .Pattern import Pattern

DEFAULT_ICONS: dict[str, str] = {
    "url": "🌐",
    "file": "📁",
    "default": "🔗",
}


class LinkRule(BaseModel):
    """How to recognize a link in text and where it leads."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Display label")
    kind: LinkKind = Field(..., alias="type", description="Link type: url or file")
    target: str = Field(..., min_length=1, description="Target template, may contain ${...} tokens")
    patterns: tuple[Pattern, ...] = Field(..., min_length=1)
    description: str | None = None
    icon: str | None = None
    show_inline: bool | None = Field(
        None,
        validation_alias=AliasChoices("showInline", "showCodeLens", "show_inline"),
        serialization_alias="showInline",
    )

    @property
    def display_icon(self) -> str:
        return self.icon or DEFAULT_ICONS.get(self.kind.value, DEFAULT_ICONS["default"])

    def shows_inline(self, default: bool) -> bool:
        """Inline display flag; unset defers to the host default."""
        return default if self.show_inline is None else self.show_inline
