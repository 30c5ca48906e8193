"""Line-oriented console front end: prompts, notices and the input loop."""

from __future__ import annotations

from typing import Callable, Optional

from .exploration import ExplorationEngine, Outcome, RoomVisit
from .session import GameSession
from .verdict import VerdictReport, describe

MENU = "Escolha: (e) esquerdo, (d) direito, (s) sair da exploração"

_DEAD_END = {
    "left": "Não há sala à esquerda.",
    "right": "Não há sala à direita.",
}


class Console:
    """Wraps the read/write callables so tests can script a whole session."""

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        *,
        max_input: int = 256,
    ) -> None:
        self.read_line = read_line
        self.write = write
        self.max_input = max_input

    def ask(self, prompt: str) -> Optional[str]:
        """One line of input, or None at end of input."""
        try:
            line = self.read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            self.write("")
            return None
        return line.rstrip("\r\n")[: self.max_input - 1]

    # ---------- Exploration ----------

    def show_visit(self, visit: RoomVisit) -> None:
        self.write(f"Você está na sala: {visit.room}")
        if visit.new_clue:
            self.write(f'\n> Pista encontrada: "{visit.clue}"')
            self.write("Pista adicionada ao caderno do jogador.\n")
        else:
            # already noted clues count as nothing new to find
            self.write("Não há pistas aparentes nesta sala.\n")

    def explore(self, engine: ExplorationEngine) -> None:
        self.write("\n--- Início da exploração da mansão ---")
        self.show_visit(engine.start())
        while not engine.finished:
            self.write(MENU)
            line = self.ask("> ")
            if line is None:
                engine.step("stop")
                break
            if not line.strip():
                continue
            result = engine.step(line)
            if result.outcome is Outcome.MOVED and result.visit is not None:
                self.show_visit(result.visit)
            elif result.outcome is Outcome.DEAD_END and result.move is not None:
                self.write(_DEAD_END[result.move.value] + "\n")
            elif result.outcome is Outcome.INVALID:
                self.write("Opção inválida. Use e, d ou s.\n")
            elif result.outcome is Outcome.STOPPED:
                self.write("Saindo da exploração...")
        self.write("--- Fim da exploração ---\n")

    # ---------- Accusation ----------

    def accuse(self, session: GameSession) -> Optional[VerdictReport]:
        """Run the trial phase; None when the player names nobody."""
        if not session.ledger:
            report = session.accuse(None)
            self.write(describe(report))
            return report

        self.write("Pistas coletadas:")
        for clue in session.ledger:
            self.write(f" - {clue}")

        accused = self.ask("\nDigite o nome do suspeito que você deseja acusar: ")
        if not accused:
            self.write("Nenhum suspeito informado. Encerrando julgamento.")
            return None

        report = session.accuse(accused)
        self.write(f"\nVocê acusou: {report.accused}")
        self.write(f"Pistas que apontam para {report.accused}: {report.count}")
        self.write(describe(report))
        return report

    def play(self, session: GameSession) -> Optional[VerdictReport]:
        self.explore(session.explorer())
        return self.accuse(session)


__all__ = ["Console", "MENU"]
