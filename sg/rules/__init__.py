"""Rule registry: guide rules keyed by id, in presentation order."""

from sg.rules.errors import RegistryError
from sg.rules.loader import load_registry
from sg.rules.model import Category, NameSubject, NamingExample, Rule, Snippet
from sg.rules.registry import RuleRegistry

__all__ = [
    "Category",
    "NameSubject",
    "NamingExample",
    "RegistryError",
    "Rule",
    "RuleRegistry",
    "Snippet",
    "load_registry",
]
