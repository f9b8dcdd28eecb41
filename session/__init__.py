"""
Session state — the presentation layer's explicit state container.
"""

from .state import RunTicket, SimulatorSession

__all__ = ["RunTicket", "SimulatorSession"]
