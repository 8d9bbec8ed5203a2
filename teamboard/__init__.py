"""Teamboard: workspaces, projects and kanban boards over a JSON API."""

__version__ = "1.0.0"
