"""
UI package for the Courtside schedule viewer.

This package contains the Flask web server that renders the schedule and
exposes the filter actions as JSON endpoints.
"""
from .web_app import create_app, run_web_app, WebAppState

__all__ = ["create_app", "run_web_app", "WebAppState"]
