"""Textual front end."""

from .app import WorkshopApp

__all__ = ["WorkshopApp"]
