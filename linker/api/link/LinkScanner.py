"""Wire settings, rules, matcher, pairer and resolvers for one workspace."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..annotation.AnnotationPairer import AnnotationPairer
from ..annotation.InlineAnnotation import InlineAnnotation
from ..config.LinkerConfig import LinkerConfig
from ..match.get_file_extension import get_file_extension
from ..match.Match import Match
from ..match.PatternMatcher import PatternMatcher
from ..path.PathResolver import PathResolver
from ..rules.LinkRule import LinkRule
from ..rules.load_rules import load_rules
from ..variables.VariableContext import VariableContext
from ..variables.VariableResolver import VariableResolver

logger = logging.getLogger(__name__)


class LinkScanner:
    """Everything needed to scan documents of one workspace."""

    def __init__(
        self,
        config: LinkerConfig,
        rules: Sequence[LinkRule] = (),
        workspace_root: str | Path | None = None,
    ):
        self.config = config
        self.workspace_root = str(workspace_root) if workspace_root else None
        self.paths = PathResolver(config.path_prefixes)
        self.variables = VariableResolver()
        self.matcher = PatternMatcher(rules)
        self.pairer = AnnotationPairer(config.inline_link_pattern, self.paths)

    @classmethod
    def load(cls, workspace_root: str | Path | None = None) -> "LinkScanner":
        """Load settings and the workspace rule file.

        Raises:
            ValueError: If settings or rules are invalid
        """
        config = LinkerConfig.load()
        rules = load_rules(config.rules_path(workspace_root))
        return cls(config, rules, workspace_root)

    @property
    def rules_path(self) -> Path:
        return self.config.rules_path(self.workspace_root)

    def reload_rules(self) -> list[LinkRule]:
        """Re-read the rule file and swap the rule list.

        Raises:
            ValueError: If the rule file is invalid (current rules are kept)
        """
        rules = load_rules(self.rules_path)
        self.matcher.update_rules(rules)
        logger.info(f"Reloaded {len(rules)} link rules from {self.rules_path}")
        return rules

    def context_for(
        self, document_path: str | None, line_number: int | None = None, selected_text: str = ""
    ) -> VariableContext:
        return VariableContext(
            workspace_folder=self.workspace_root,
            file=document_path,
            line_number=line_number,
            selected_text=selected_text,
        )

    def find_matches(self, text: str, document_path: str) -> list[Match]:
        if not self.config.enabled:
            return []
        return self.matcher.find_matches(text, get_file_extension(document_path))

    def find_annotations(self, text: str, document_path: str) -> list[InlineAnnotation]:
        if not (self.config.enabled and self.config.enable_inline_links):
            return []
        return self.pairer.find_annotations(text, document_path, self.workspace_root)

    def matches_at_offset(self, text: str, document_path: str, offset: int) -> list[Match]:
        """Every rule match containing offset, first one first."""
        if not self.config.enabled:
            return []
        return self.matcher.matches_at_offset(text, offset, get_file_extension(document_path))

    def annotation_at_offset(self, text: str, document_path: str, offset: int) -> InlineAnnotation | None:
        if not (self.config.enabled and self.config.enable_inline_links):
            return None
        return self.pairer.annotation_at_offset(text, offset, document_path, self.workspace_root)
