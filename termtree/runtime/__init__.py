"""Background tasks: spinner ticking and leaf callback execution."""

from .activation import LeafActivationRunner
from .spinner import SpinnerCommand, SpinnerScheduler

__all__ = ["LeafActivationRunner", "SpinnerCommand", "SpinnerScheduler"]
