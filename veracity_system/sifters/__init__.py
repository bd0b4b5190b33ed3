"""Heuristic sifters that score evidence sources for a claim."""
