"""Combat resolution.

- damage_resolver.py: Weapon damage rolls, armor mitigation and health updates
"""

from .damage_resolver import DamageResolver, AttackResult, create_rng, mitigate

__all__ = [
    "DamageResolver",
    "AttackResult",
    "create_rng",
    "mitigate",
]
