"""Game-agnostic runtime primitives: task scheduling and logging setup."""

from broadside.engine.scheduler import Scheduler

__all__ = ["Scheduler"]
