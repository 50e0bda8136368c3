"""Visualization module for the consumption calendar."""

from .plotter import CalendarPlotter

__all__ = ['CalendarPlotter']
