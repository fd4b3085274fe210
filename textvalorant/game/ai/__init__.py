"""Opponent decision making.

- opponent_policy.py: Policy strategies that pick the opponent's turn
"""

from .opponent_policy import OpponentPolicy, RandomPolicy, PolicyType, create_opponent_policy

__all__ = [
    "OpponentPolicy",
    "RandomPolicy",
    "PolicyType",
    "create_opponent_policy",
]
