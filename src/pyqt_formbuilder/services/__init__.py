"""
Service layer for form runtime.

Cross-cutting helpers shared by field bindings and views.
"""

from .signal_service import SignalService

from . import signal_service

__all__ = [
    "SignalService",
    "signal_service",
]
