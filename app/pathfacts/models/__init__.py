"""Data models for pathfacts.

This module exports the path, ancestor node, and report models.
"""

from pathfacts.models.node import Access, AncestorNode, NodeType, Permissions
from pathfacts.models.path import PathComponents, PathFlavor
from pathfacts.models.report import Classification, DirectoryListing, InspectionReport

__all__ = [
    "Access",
    "AncestorNode",
    "Classification",
    "DirectoryListing",
    "InspectionReport",
    "NodeType",
    "PathComponents",
    "PathFlavor",
    "Permissions",
]
