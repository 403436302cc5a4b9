"""
HyperSynergy — Coordinator Error Hierarchy

The coordinator's operations are total: unknown module names, odd strengths
and zero durations are all tolerated. The only failures it surfaces concern
the process-wide singletons.

  NotInitialisedError      — accessor called before init_*()
  AlreadyInitialisedError  — init_*() called a second time
"""

from __future__ import annotations


class SynergyError(RuntimeError):
    """Base for all HyperSynergy errors."""


class NotInitialisedError(SynergyError):
    """A singleton accessor was called before its initialiser."""


class AlreadyInitialisedError(SynergyError):
    """A singleton initialiser was called more than once."""
