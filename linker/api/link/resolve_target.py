"""Turn a rule match into the target it opens."""

import os

from ..config.is_text_file import is_text_file
from ..match.Match import Match
from ..path.PathResolver import PathResolver
from ..rules.LinkKind import LinkKind
from ..rules.PatternKind import PatternKind
from ..variables.VariableContext import VariableContext
from ..variables.VariableResolver import VariableResolver
from ._extract_line_number import _extract_line_number
from ._validate_url import _validate_url
from .ResolvedTarget import ResolvedTarget


def resolve_target(
    match: Match,
    context: VariableContext,
    path_resolver: PathResolver | None = None,
    variable_resolver: VariableResolver | None = None,
) -> ResolvedTarget:
    """Resolve the rule target of match.

    Capture group tokens (``${1}``) are only available to regex patterns.
    File targets go through path prefix resolution and end up absolute.

    Raises:
        ValueError: For an invalid URL, or a relative file target with no
            workspace or document to anchor it
    """
    path_resolver = path_resolver or PathResolver()
    variable_resolver = variable_resolver or VariableResolver()

    if match.pattern.kind == PatternKind.REGEX:
        context = context.with_match(match.full_match, match.capture_groups)
    else:
        context = context.with_match(None, None)

    target = variable_resolver.resolve(match.rule.target, context)

    if match.rule.kind == LinkKind.URL:
        return ResolvedTarget(kind=LinkKind.URL, target=_validate_url(target))

    file_path = path_resolver.resolve(target, context.file, context.workspace_folder)
    if not os.path.isabs(file_path):
        raise ValueError(f"No workspace folder found for relative path: {file_path}")

    return ResolvedTarget(
        kind=LinkKind.FILE,
        target=file_path,
        line_number=_extract_line_number(match.highlighted_text),
        is_text_file=is_text_file(file_path),
    )
