"""
Unit tests for the DamageResolver.

Tests damage bounds per weapon, armor mitigation, the health floor and
independence of successive draws.
"""

import numpy as np
import pytest

from textvalorant.core.data import Side, WeaponType
from textvalorant.game.combat import DamageResolver, create_rng, mitigate
from textvalorant.game.entities import Combatant


def _pair(weapon=WeaponType.PISTOL, armor=0, health=100):
    attacker = Combatant(name="A", agent="Jett", side=Side.HUMAN, weapon=weapon)
    target = Combatant(name="T", agent="Sage", side=Side.OPPONENT, armor=armor, health=health)
    return attacker, target


class TestMitigate:

    @pytest.mark.parametrize("raw,armor,expected", [
        (20, 0, 20),
        (20, 5, 15),
        (5, 20, 0),
        (0, 0, 0),
    ])
    def test_values(self, raw, armor, expected):
        assert mitigate(raw, armor) == expected


class TestDamageBounds:

    @pytest.mark.parametrize("weapon,low,high", [
        (WeaponType.PISTOL, 10, 20),
        (WeaponType.RIFLE, 20, 30),
        (WeaponType.SHOTGUN, 5, 15),
    ])
    def test_rolls_stay_in_range_and_cover_it(self, weapon, low, high):
        resolver = DamageResolver(create_rng(42))
        rolls = {resolver.roll_damage(weapon) for _ in range(10_000)}
        assert min(rolls) == low
        assert max(rolls) == high
        assert rolls == set(range(low, high + 1))

    def test_resolve_attack_reports_dealt_damage(self):
        resolver = DamageResolver(create_rng(7))
        for _ in range(1000):
            attacker, target = _pair(WeaponType.RIFLE)
            result = resolver.resolve_attack(attacker, target)
            assert 20 <= result.damage_dealt <= 30
            assert result.raw_damage == result.damage_dealt
            assert target.health == 100 - result.damage_dealt
            assert result.target_health == target.health

    def test_returns_python_ints(self):
        resolver = DamageResolver(create_rng(0))
        assert type(resolver.roll_damage(WeaponType.PISTOL)) is int


class TestMitigationAndFloor:

    def test_armor_reduces_damage(self):
        resolver = DamageResolver(create_rng(3))
        for _ in range(500):
            attacker, target = _pair(WeaponType.PISTOL, armor=12)
            result = resolver.resolve_attack(attacker, target)
            assert result.damage_dealt == max(0, result.raw_damage - 12)
            assert 0 <= result.damage_dealt <= result.raw_damage

    def test_health_never_negative(self):
        resolver = DamageResolver(create_rng(5))
        attacker, target = _pair(WeaponType.RIFLE)
        for _ in range(50):
            resolver.resolve_attack(attacker, target)
            assert target.health >= 0
        assert target.health == 0

    def test_target_defeated_flag(self):
        resolver = DamageResolver(create_rng(11))
        attacker, target = _pair(WeaponType.RIFLE, health=1)
        result = resolver.resolve_attack(attacker, target)
        assert result.target_defeated

    def test_damage_range_forecast(self):
        resolver = DamageResolver(create_rng(0))
        attacker, target = _pair(WeaponType.SHOTGUN, armor=8)
        assert resolver.damage_range(attacker, target) == (0, 7)


class TestRandomSource:

    def test_same_seed_reproduces(self):
        first = DamageResolver(create_rng(99))
        second = DamageResolver(create_rng(99))
        a = [first.roll_damage(WeaponType.RIFLE) for _ in range(50)]
        b = [second.roll_damage(WeaponType.RIFLE) for _ in range(50)]
        assert a == b

    def test_draws_are_not_cached(self):
        resolver = DamageResolver(create_rng(2024))
        rolls = [resolver.roll_damage(WeaponType.PISTOL) for _ in range(100)]
        assert len(set(rolls)) > 1

    def test_uses_injected_generator(self):
        rng = np.random.default_rng(1)
        resolver = DamageResolver(rng)
        assert resolver.rng is rng
