"""Bundled data files for pathfacts."""
