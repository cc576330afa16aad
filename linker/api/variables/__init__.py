"""Template variable substitution."""

from .VariableContext import VariableContext
from .VariableResolver import VariableResolver

__all__ = ["VariableContext", "VariableResolver"]
