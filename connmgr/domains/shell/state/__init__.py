"""Shell key state exports."""

from .machine import UIStateMachine

__all__ = ["UIStateMachine"]
