"""Circle curves puzzle: match the numbered crossings of each curve to make it disappear."""

__version__ = "0.1.0"
