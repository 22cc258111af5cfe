"""
Report Generation Module

Exports a completed assessment as a flat plain-text summary, suitable
for pasting into clinical notes.
"""
from .summary import build_summary

__all__ = [
    "build_summary",
]
