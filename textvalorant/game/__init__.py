"""Game layer.

Combatants, damage resolution, the opponent policy, the match loop and the
supporting config, roster and log managers.
"""
