from ..path.PathBase import PathBase
from .PathPrefixConfig import PathPrefixConfig

# Table order is match order
DEFAULT_PATH_PREFIXES: dict[str, PathPrefixConfig] = {
    "#:": PathPrefixConfig(description="Relative to workspace root", base=PathBase.WORKSPACE),
    "~:": PathPrefixConfig(description="Relative to current file directory", base=PathBase.CURRENT),
    "<:": PathPrefixConfig(description="Relative to parent of current file directory", base=PathBase.PARENT),
    ">:": PathPrefixConfig(description="Relative to child directory of current file directory", base=PathBase.CHILD),
}
