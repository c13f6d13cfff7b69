"""Guide documents: sections, folder trees, checklists and runbooks."""

from sg.guide.loader import GuideError, load_document, load_documents
from sg.guide.model import Document, FolderTree, NamedTree, Runbook, Section
from sg.guide.source import GuideSource, default_source, source_from
from sg.guide.tree import TreeParseError, parse_tree

__all__ = [
    "Document",
    "FolderTree",
    "GuideError",
    "GuideSource",
    "NamedTree",
    "Runbook",
    "Section",
    "TreeParseError",
    "default_source",
    "load_document",
    "load_documents",
    "parse_tree",
    "source_from",
]
