"""
Text rendering for the console.

StatusRenderer formats both combatants' stats; ConsoleReporter subscribes to
match events and prints the player-facing report lines.
"""
from typing import Callable, Optional, TYPE_CHECKING

from ..core.data import MatchState, PurchaseRejection, Side, WEAPON_NAMES
from ..core.events import (
    EventType,
    CombatantMoved,
    InvalidSelection,
    MatchEnded,
    PurchaseRejected,
    ShotFired,
    TurnStarted,
    WeaponPurchased,
)

if TYPE_CHECKING:
    from ..core.events import EventManager
    from ..game.entities import Combatant


class StatusRenderer:
    """Read-only view of both combatants."""

    @staticmethod
    def render_combatant(combatant: "Combatant", show_credits: bool) -> list[str]:
        lines = [
            f"\n{combatant.name}'s Stats:",
            f"Agent: {combatant.agent}",
            f"Weapon: {combatant.weapon_name}",
        ]
        if show_credits:
            lines.append(f"Credits: {combatant.credits}")
        lines.extend([
            f"Health: {combatant.health}",
            f"Armor: {combatant.armor}",
            f"Position: {combatant.position}",
        ])
        return lines

    def render(self, human: "Combatant", opponent: "Combatant") -> str:
        """Human stats with credits, then opponent stats without them."""
        lines = self.render_combatant(human, show_credits=True)
        lines.extend(self.render_combatant(opponent, show_credits=False))
        return "\n".join(lines)


class ConsoleReporter:
    """Prints match events for the human player."""

    def __init__(self, event_manager: "EventManager", write: Callable[[str], None] = print,
                 renderer: Optional[StatusRenderer] = None):
        self.write = write
        self.renderer = renderer or StatusRenderer()
        self.human: Optional["Combatant"] = None
        self.opponent: Optional["Combatant"] = None

        handlers = {
            EventType.MATCH_STARTED: self._on_match_started,
            EventType.TURN_STARTED: self._on_turn_started,
            EventType.COMBATANT_MOVED: self._on_moved,
            EventType.SHOT_FIRED: self._on_shot,
            EventType.WEAPON_PURCHASED: self._on_purchase,
            EventType.PURCHASE_REJECTED: self._on_purchase_rejected,
            EventType.INVALID_SELECTION: self._on_invalid,
            EventType.MATCH_ENDED: self._on_match_ended,
        }
        for event_type, handler in handlers.items():
            event_manager.subscribe(event_type, handler, subscriber_name=f"ConsoleReporter.{handler.__name__}")

    def _on_match_started(self, event) -> None:
        self.human = event.human
        self.opponent = event.opponent
        self.write(f"\n{event.human} faces {event.opponent}.")

    def _on_turn_started(self, event: TurnStarted) -> None:
        if event.side is not Side.HUMAN:
            return
        self.write(f"\n=== Turn: {event.actor.name} ===")
        if self.opponent is not None:
            self.write(self.renderer.render(event.actor, self.opponent))

    def _on_moved(self, event: CombatantMoved) -> None:
        self.write(f"{event.actor.name} moved to {event.to_position}.")

    def _on_shot(self, event: ShotFired) -> None:
        self.write(f"{event.attacker.name} shot {event.target.name} for {event.damage_dealt} damage.")

    def _on_purchase(self, event: WeaponPurchased) -> None:
        self.write(f"{event.actor.name} purchased a {WEAPON_NAMES[event.weapon]}.")

    def _on_purchase_rejected(self, event: PurchaseRejected) -> None:
        # Invalid selections are reported by _on_invalid
        if event.reason is PurchaseRejection.INSUFFICIENT_FUNDS:
            self.write(f"{event.actor.name} does not have enough credits to purchase the weapon.")

    def _on_invalid(self, event: InvalidSelection) -> None:
        self.write("Invalid choice!")

    def _on_match_ended(self, event: MatchEnded) -> None:
        if event.state is MatchState.HUMAN_WINS:
            self.write(f"\nCongratulations! {event.winner.name} wins!")
        else:
            self.write("\nYou lost! Better luck next time.")
