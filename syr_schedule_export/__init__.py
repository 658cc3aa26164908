"""
Export a Syracuse (PeopleSoft) class schedule to recurring calendar events.
"""
from __future__ import annotations

__version__ = "0.1.0"
