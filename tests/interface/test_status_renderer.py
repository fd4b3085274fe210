"""
Tests for status rendering and the console event reporter.
"""

from textvalorant.core.data import GameMode, MatchState, PurchaseRejection, Side, WeaponType
from textvalorant.core.events import (
    InvalidSelection,
    MatchEnded,
    MatchStarted,
    PurchaseRejected,
    ShotFired,
    TurnStarted,
    WeaponPurchased,
)
from textvalorant.interface import ConsoleReporter, StatusRenderer


class TestStatusRenderer:

    def test_human_shows_credits_opponent_does_not(self, human, opponent):
        text = StatusRenderer().render(human, opponent)
        human_part, opponent_part = text.split("Opponent's Stats:")

        assert "Alice's Stats:" in human_part
        assert "Credits: 200" in human_part
        assert "Agent: Jett" in human_part
        assert "Weapon: Pistol" in human_part
        assert "Credits" not in opponent_part
        assert "Health: 100" in opponent_part
        assert "Armor: 0" in opponent_part

    def test_reflects_current_state(self, human, opponent):
        human.equip(WeaponType.RIFLE)
        opponent.take_damage(40)
        text = StatusRenderer().render(human, opponent)
        assert "Weapon: Rifle" in text
        assert "Health: 60" in text


class TestConsoleReporter:

    def _reporter(self, event_manager):
        lines = []
        ConsoleReporter(event_manager, write=lines.append)
        return lines

    def _send(self, event_manager, event):
        event_manager.publish(event)
        event_manager.process_events()

    def test_human_turn_renders_status(self, event_manager, human, opponent):
        lines = self._reporter(event_manager)
        self._send(event_manager, MatchStarted(turn=0, mode=GameMode.UNRATED, human=human, opponent=opponent))
        self._send(event_manager, TurnStarted(turn=1, side=Side.HUMAN, actor=human))

        assert "\n=== Turn: Alice ===" in lines
        assert any("Credits: 200" in line for line in lines)

    def test_opponent_turn_is_silent(self, event_manager, human, opponent):
        lines = self._reporter(event_manager)
        self._send(event_manager, TurnStarted(turn=2, side=Side.OPPONENT, actor=opponent))
        assert lines == []

    def test_shot_report(self, event_manager, human, opponent):
        lines = self._reporter(event_manager)
        self._send(event_manager, ShotFired(
            turn=1, attacker=human, target=opponent, weapon=WeaponType.PISTOL,
            raw_damage=12, damage_dealt=12, target_health=88,
        ))
        assert lines == ["Alice shot Opponent for 12 damage."]

    def test_purchase_reports(self, event_manager, human):
        lines = self._reporter(event_manager)
        self._send(event_manager, WeaponPurchased(
            turn=1, actor=human, weapon=WeaponType.RIFLE, cost=100, credits_left=100,
        ))
        self._send(event_manager, PurchaseRejected(
            turn=2, actor=human, reason=PurchaseRejection.INSUFFICIENT_FUNDS, weapon=WeaponType.RIFLE,
        ))
        self._send(event_manager, PurchaseRejected(
            turn=3, actor=human, reason=PurchaseRejection.INVALID_SELECTION,
        ))
        assert lines == [
            "Alice purchased a Rifle.",
            "Alice does not have enough credits to purchase the weapon.",
        ]

    def test_invalid_choice(self, event_manager, human):
        lines = self._reporter(event_manager)
        self._send(event_manager, InvalidSelection(turn=1, actor=human, menu="action"))
        assert lines == ["Invalid choice!"]

    def test_outcomes(self, event_manager, human, opponent):
        lines = self._reporter(event_manager)
        self._send(event_manager, MatchEnded(turn=3, state=MatchState.HUMAN_WINS, winner=human, loser=opponent))
        self._send(event_manager, MatchEnded(turn=4, state=MatchState.OPPONENT_WINS, winner=opponent, loser=human))
        assert lines == [
            "\nCongratulations! Alice wins!",
            "\nYou lost! Better luck next time.",
        ]
