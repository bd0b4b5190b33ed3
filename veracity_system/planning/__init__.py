"""Claim-type classification and search planning."""

from veracity_system.planning.claim_planner import ClaimPlanner

__all__ = ["ClaimPlanner"]
