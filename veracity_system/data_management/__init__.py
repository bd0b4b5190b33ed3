"""Data structures shared between the scoring core and its collaborators."""
