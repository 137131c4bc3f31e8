"""Transition model."""

from .transition_options import TransitionOptions

__all__ = ["TransitionOptions"]
