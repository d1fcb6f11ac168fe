"""
UI state that lives next to the plot.
"""

from .legend import Legend

__all__ = ['Legend']
