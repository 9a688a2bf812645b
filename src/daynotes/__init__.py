"""daynotes - calendar day annotations from daily notes."""

__version__ = "0.1.0"
