"""Application layer common building blocks."""

from fallible.application.common.result import Outcome, ValueOutcome

__all__ = ["Outcome", "ValueOutcome"]
