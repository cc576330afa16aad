"""Turn an inline annotation href into the target it opens."""

import os
import re

from ..annotation.InlineAnnotation import InlineAnnotation
from ..config.is_text_file import is_text_file
from ..path._join import _join
from ..rules.LinkKind import LinkKind
from .ResolvedTarget import ResolvedTarget

_LINE_SUFFIX = re.compile(r"^(.*):(\d+)$")


def resolve_annotation_target(annotation: InlineAnnotation, workspace_root: str | None = None) -> ResolvedTarget:
    """Classify the href of an annotation as a URL or a file (``path:line`` allowed).

    Raises:
        ValueError: If the href is neither an http(s) URL nor a path
    """
    href = annotation.href
    if href.startswith(("http://", "https://")):
        return ResolvedTarget(kind=LinkKind.URL, target=href)

    if not (href.startswith(("./", "../")) or os.path.isabs(href)):
        raise ValueError(f"Unsupported link type: {href}. Only file and URL links are supported.")

    file_path, line_number = href, None
    with_line = _LINE_SUFFIX.match(href)
    if with_line:
        file_path, line_number = with_line.group(1), int(with_line.group(2))

    if not os.path.isabs(file_path) and workspace_root:
        file_path = _join(workspace_root, file_path)

    return ResolvedTarget(
        kind=LinkKind.FILE,
        target=file_path,
        line_number=line_number,
        is_text_file=is_text_file(file_path),
    )
