"""
Match loop for a two-combatant duel.

A round is one human turn followed, only if the opponent is still standing, by
one opponent turn. The kill check after the human turn runs before the opponent
acts, so an opponent reduced to zero health never retaliates. Once a terminal
state is reached no further actions run.
"""
from dataclasses import dataclass
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np

from ..core.data import GameMode, MatchState, Side
from ..core.engine import ActionContext, ActionRequest, ActionResult, execute_action
from ..core.events import MatchStarted, MatchEnded, TurnStarted, LogMessage
from .ai import PolicyType, create_opponent_policy
from .combat import DamageResolver
from .entities import Combatant

if TYPE_CHECKING:
    from ..core.events import EventManager, GameEvent
    from .config import GameConfig
    from .roster import Roster

# Picks the request for the acting combatant given (actor, target)
TurnController = Callable[[Combatant, Combatant], ActionRequest]


@dataclass(frozen=True)
class MatchReport:
    """Summary returned when play() stops."""
    state: MatchState
    rounds: int
    winner: Optional[Combatant] = None
    loser: Optional[Combatant] = None

    @property
    def finished(self) -> bool:
        return self.state.is_terminal


class Match:
    """Alternates turns between the human and the opponent until one falls."""

    def __init__(
        self,
        human: Combatant,
        opponent: Combatant,
        human_controller: TurnController,
        opponent_controller: TurnController,
        resolver: DamageResolver,
        event_manager: "EventManager",
        mode: GameMode = GameMode.UNRATED,
    ):
        self.human = human
        self.opponent = opponent
        self.human_controller = human_controller
        self.opponent_controller = opponent_controller
        self.resolver = resolver
        self.event_manager = event_manager
        self.mode = mode

        self.state = MatchState.IN_PROGRESS
        self.rounds = 0
        self.turn = 0
        self.started = False

    @classmethod
    def create(
        cls,
        human_name: str,
        human_agent: str,
        mode: GameMode,
        config: "GameConfig",
        roster: "Roster",
        rng: np.random.Generator,
        human_controller: TurnController,
        event_manager: "EventManager",
    ) -> "Match":
        """Build both combatants and wire the match.

        The opponent's agent is drawn from the roster with the match rng, and
        its policy shares the same generator as the damage resolver.

        Raises:
            ConfigError: If the config fails validation, e.g. an unknown policy
        """
        config.validate()
        human = Combatant(
            name=human_name,
            agent=human_agent,
            side=Side.HUMAN,
            credits=config.starting_credits(mode),
            health=config.starting_health,
            armor=config.starting_armor,
        )
        opponent = Combatant(
            name=config.opponent_name,
            agent=roster.random_agent(rng),
            side=Side.OPPONENT,
            credits=config.opponent_credits,
            health=config.starting_health,
            armor=config.starting_armor,
        )
        policy_type = PolicyType[config.opponent_policy.strip().upper()]
        policy = create_opponent_policy(policy_type, rng, roster.weapon_types())

        return cls(
            human=human,
            opponent=opponent,
            human_controller=human_controller,
            opponent_controller=policy.decide,
            resolver=DamageResolver(rng),
            event_manager=event_manager,
            mode=mode,
        )

    def _emit(self, event: "GameEvent") -> None:
        self.event_manager.publish(event, source="Match")

    def _log(self, message: str, category: str = "SYSTEM", level: str = "INFO") -> None:
        self._emit(LogMessage(turn=self.turn, message=message, category=category, level=level, source="Match"))

    def start(self) -> None:
        """Announce the match; called automatically by the first round."""
        if self.started:
            return
        self.started = True
        self._emit(MatchStarted(turn=0, mode=self.mode, human=self.human, opponent=self.opponent))
        self._log(
            f"Match started: {self.human} vs {self.opponent} "
            f"({self.human.credits} starting credits)"
        )
        self.event_manager.process_events()

    def _take_turn(self, side: Side) -> ActionResult:
        if side is Side.HUMAN:
            actor, target, controller = self.human, self.opponent, self.human_controller
        else:
            actor, target, controller = self.opponent, self.human, self.opponent_controller

        self.turn += 1
        self._emit(TurnStarted(turn=self.turn, side=side, actor=actor))
        self.event_manager.process_events()

        request = controller(actor, target)
        if side is Side.OPPONENT:
            self._log(f"{actor.name} chose {request.action_type.name if request.action_type else 'nothing'}", "AI")

        context = ActionContext(resolver=self.resolver, emit=self._emit, turn=self.turn)
        result = execute_action(request, actor, target, context)
        self.event_manager.process_events()
        return result

    def _finish(self, state: MatchState) -> None:
        self.state = state
        if state is MatchState.HUMAN_WINS:
            winner, loser = self.human, self.opponent
        else:
            winner, loser = self.opponent, self.human
        self._emit(MatchEnded(turn=self.turn, state=state, winner=winner, loser=loser))
        self._log(f"Match over after {self.rounds} rounds: {winner.name} wins")
        self.event_manager.process_events()

    def play_round(self) -> MatchState:
        """Run one round and return the resulting state.

        Raises:
            RuntimeError: If the match already reached a terminal state
        """
        if self.state.is_terminal:
            raise RuntimeError(f"Match is over ({self.state.name}); no further actions allowed")

        self.start()
        self.rounds += 1

        self._take_turn(Side.HUMAN)
        if self.opponent.is_defeated:
            self._finish(MatchState.HUMAN_WINS)
            return self.state

        self._take_turn(Side.OPPONENT)
        if self.human.is_defeated:
            self._finish(MatchState.OPPONENT_WINS)

        return self.state

    def play(self, max_rounds: Optional[int] = None) -> MatchReport:
        """Play rounds until a terminal state or max_rounds is reached."""
        while not self.state.is_terminal:
            if max_rounds is not None and self.rounds >= max_rounds:
                break
            self.play_round()
        return self.report()

    def report(self) -> MatchReport:
        if self.state is MatchState.HUMAN_WINS:
            return MatchReport(self.state, self.rounds, winner=self.human, loser=self.opponent)
        if self.state is MatchState.OPPONENT_WINS:
            return MatchReport(self.state, self.rounds, winner=self.opponent, loser=self.human)
        return MatchReport(self.state, self.rounds)
