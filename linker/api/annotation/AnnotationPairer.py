"""Pair comment tags with anchor words in the code line that follows."""

import logging
import os
import re

from .._compile_regex import compile_regex
from ..path.PathResolver import PathResolver
from ..TextRange import TextRange
from ._find_anchor_in_code import _find_anchor_in_code
from ._is_in_comment import _is_in_comment
from ._line_offsets import _line_index, _line_offsets
from .DEFAULT_TAG_PATTERN import DEFAULT_TAG_PATTERN
from .InlineAnnotation import InlineAnnotation

logger = logging.getLogger(__name__)

BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)

# Stand-in document path for hrefs found in block comments
_BLOCK_COMMENT_DOCUMENT = "temp"


def compile_tag_pattern(source: str | None) -> re.Pattern:
    """Compile the tag regex, falling back to the default when unusable.

    The pattern must define the named groups ``anchor`` and ``link``.
    """
    if source:
        try:
            pattern = compile_regex(source)
        except re.error as e:
            logger.warning(f"Invalid inline link pattern {source!r} ({e}), using default pattern")
        else:
            if {"anchor", "link"} <= set(pattern.groupindex):
                return pattern
            logger.warning(
                f'Inline link pattern {source!r} must include named groups "anchor" and "link", using default pattern'
            )
    return compile_regex(DEFAULT_TAG_PATTERN)


class AnnotationPairer:
    """Find inline annotations such as::

        // @link [#helper](./helper.py)
        helper = load()

    Two passes contribute: tags inside ``/* ... */`` blocks are paired with
    the line after the block, and tags inside ``//`` comments (or a ``/*``
    left open on the same line) are paired with the next line. A tag inside
    a one-line block comment is therefore reported by both passes.
    """

    def __init__(self, tag_pattern: str | None = None, path_resolver: PathResolver | None = None):
        self._tag = compile_tag_pattern(tag_pattern)
        self._paths = path_resolver or PathResolver()

    @property
    def tag_pattern(self) -> str:
        return self._tag.pattern

    def find_annotations(
        self,
        text: str,
        document_path: str | None = None,
        workspace_root: str | None = None,
    ) -> list[InlineAnnotation]:
        lines = text.split("\n")
        offsets = _line_offsets(lines)

        annotations = self._block_comment_annotations(text, lines, offsets, workspace_root)
        annotations.extend(self._line_comment_annotations(lines, offsets, document_path, workspace_root))
        return annotations

    def _block_comment_annotations(
        self,
        text: str,
        lines: list[str],
        offsets: list[int],
        workspace_root: str | None,
    ) -> list[InlineAnnotation]:
        annotations: list[InlineAnnotation] = []
        placeholder = os.path.join(workspace_root, _BLOCK_COMMENT_DOCUMENT) if workspace_root else ""

        for comment in BLOCK_COMMENT_PATTERN.finditer(text):
            end_line = _line_index(comment.end(), offsets)
            if end_line >= len(lines) - 1:
                continue
            code_index = end_line + 1

            for tag in self._tag.finditer(comment.group(0)):
                anchor = tag.group("anchor") or ""
                href = self._resolve_href(tag.group("link") or "", placeholder, workspace_root)
                start = comment.start() + tag.start()
                for code_range, code_text in _find_anchor_in_code(lines[code_index], offsets[code_index], anchor):
                    annotations.append(
                        InlineAnnotation(
                            anchor=anchor,
                            href=href,
                            comment_range=TextRange(start, start + len(tag.group(0))),
                            code_range=code_range,
                            comment_text=tag.group(0),
                            code_text=code_text,
                            line_number=code_index + 1,
                        )
                    )
        return annotations

    def _line_comment_annotations(
        self,
        lines: list[str],
        offsets: list[int],
        document_path: str | None,
        workspace_root: str | None,
    ) -> list[InlineAnnotation]:
        annotations: list[InlineAnnotation] = []

        for index in range(len(lines) - 1):
            for tag in self._tag.finditer(lines[index]):
                if not _is_in_comment(lines[index], tag.start()):
                    continue

                anchor = tag.group("anchor") or ""
                href = self._resolve_href(tag.group("link") or "", document_path, workspace_root)
                start = offsets[index] + tag.start()
                for code_range, code_text in _find_anchor_in_code(lines[index + 1], offsets[index + 1], anchor):
                    annotations.append(
                        InlineAnnotation(
                            anchor=anchor,
                            href=href,
                            comment_range=TextRange(start, start + len(tag.group(0))),
                            code_range=code_range,
                            comment_text=tag.group(0),
                            code_text=code_text,
                            line_number=index + 2,
                        )
                    )
        return annotations

    def _resolve_href(self, href: str, document_path: str | None, workspace_root: str | None) -> str:
        """Resolve path-like hrefs; URLs and other targets pass through."""
        if self._paths.has_prefix(href) or href.startswith(("./", "../")):
            return self._paths.resolve(href, document_path or None, workspace_root)
        return href

    def annotation_at_offset(
        self,
        text: str,
        offset: int,
        document_path: str | None = None,
        workspace_root: str | None = None,
    ) -> InlineAnnotation | None:
        """First annotation whose comment or code range contains offset."""
        for annotation in self.find_annotations(text, document_path, workspace_root):
            if annotation.contains(offset):
                return annotation
        return None

    def annotations_in_range(
        self,
        text: str,
        start: int,
        end: int,
        document_path: str | None = None,
        workspace_root: str | None = None,
    ) -> list[InlineAnnotation]:
        """Annotations whose comment or code range lies fully inside ``[start, end]``."""
        return [
            annotation
            for annotation in self.find_annotations(text, document_path, workspace_root)
            if annotation.comment_range.within(start, end) or annotation.code_range.within(start, end)
        ]
