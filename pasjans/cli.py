import logging
import os
import random

import keyboard
from pyfiglet import Figlet
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from pasjans import render
from pasjans.cards import Suit
from pasjans.config import Difficulty, load_settings
from pasjans.errors import MoveError, MoveResult
from pasjans.game import Game, Phase
from pasjans.leaderboard import Leaderboard, ScoreEntry

logger = logging.getLogger(__name__)

MENU = (
    ("1", "Kolumna -> Kolumna"),
    ("2", "Dobierz z talii"),
    ("3", "Waste -> Kolumna"),
    ("4", "Kolumna -> Foundation"),
    ("5", "Waste -> Foundation"),
    ("6", "Foundation -> Kolumna"),
    ("7", "Wyjdź z gry"),
    ("8", "Cofnij ruch"),
    ("9", "Zobacz ranking"),
)
QUIT, UNDO, LEADERBOARD = "7", "8", "9"


def setup_logging(level):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def show_banner(console):
    f = Figlet(font='slant')
    console.print(Text("===============================================", style="bold green"))
    console.print(Text(f.renderText('PASJANS'), style="bold green"), end="")
    console.print(Text("===============================================", style="bold green"))


# Wyświetla menu główne i obsługuje wybór poziomu trudności
def choose_difficulty(console, leaderboard, top_n):
    message = None
    while True:
        clear_screen()
        show_banner(console)
        console.print("\n[bold cyan]Witaj w grze Pasjans.[/bold cyan]")
        console.print("\n[bold]Wybierz poziom trudności:[/bold]")
        console.print("  [magenta]1.[/magenta] Łatwy (dobieranie 1 karty)")
        console.print("  [magenta]2.[/magenta] Trudny (dobieranie 3 kart, używasz wierzchniej)")
        render.display_leaderboard(console, leaderboard.top(top_n), top_n=top_n)
        console.print("\n[yellow]ESC[/yellow] - Wyjście")
        if message:
            console.print(Panel(f"[bold red]{message}[/bold red]", border_style="red"))

        choice = keyboard.read_key(suppress=True)
        if choice == '1':
            return Difficulty.EASY
        if choice == '2':
            return Difficulty.HARD
        if choice.lower() == 'esc':
            return None
        message = "Nieprawidłowy wybór, spróbuj ponownie."


def _ask_column(ask, prompt):
    try:
        return int(ask(prompt)) - 1
    except ValueError:
        return None


def execute(game, choice, ask):
    """Run one menu intent against ``game``; ``ask`` reads a line of input.

    Returns None when ``choice`` is not a move intent.
    """
    if choice == "1":
        src = _ask_column(ask, "Z której kolumny chcesz przenieść kartę: ")
        dst = _ask_column(ask, "Do której kolumny chcesz przenieść kartę: ")
        try:
            amount = int(ask("Ile chcesz przenieść kart?: "))
        except ValueError:
            return MoveResult.failure(MoveError.INVALID_COUNT)
        if src is None or dst is None:
            return MoveResult.failure(MoveError.INVALID_COLUMN)
        return game.move_cards(src, dst, amount)
    if choice == "2":
        return game.draw()
    if choice == "3":
        dst = _ask_column(ask, "Na kolumnę (1-7): ")
        if dst is None:
            return MoveResult.failure(MoveError.INVALID_COLUMN)
        return game.move_waste_to_column(dst)
    if choice == "4":
        src = _ask_column(ask, "Z której kolumny (1-7): ")
        if src is None:
            return MoveResult.failure(MoveError.INVALID_COLUMN)
        return game.move_column_to_foundation(src)
    if choice == "5":
        return game.move_waste_to_foundation()
    if choice == "6":
        suit = Suit.parse(ask("Z którego foundation (♥/♦/♣/♠ lub h/d/c/s): "))
        dst = _ask_column(ask, "Na którą kolumnę (1-7): ")
        if suit is None:
            return MoveResult.failure(MoveError.INVALID_SUIT)
        if dst is None:
            return MoveResult.failure(MoveError.INVALID_COLUMN)
        return game.move_foundation_to_column(suit, dst)
    if choice == UNDO:
        return game.undo()
    return None


def _print_menu(console):
    for key, label in MENU:
        console.print(f"  [magenta]{key}:[/magenta] {label}")


def _ask_play_again(console):
    answer = console.input("\nChcesz zagrać ponownie? (t/n): ").strip().lower()
    return answer in ("t", "tak")


# Rozgrywa jedno rozdanie, zwraca True jeśli gracz chce zagrać ponownie
def play_game(console, difficulty, leaderboard, settings, rng=None):
    won = []
    game = Game(difficulty, rng=rng, undo_limit=settings.undo_limit,
                on_win=lambda moves, diff: won.append((moves, diff)))
    message, failed = "", False

    while True:
        clear_screen()
        render.display_game(game, console, message, failed)
        message, failed = "", False

        if game.phase is Phase.WON:
            moves, diff = won[0]
            console.print(Panel(Text(f"Gratulacje! Wygrałeś w {moves} ruchach!", justify="center"),
                                title="[bold green]Koniec Gry![/bold green]", border_style="green", padding=(1, 2)))
            name = console.input("Podaj swoją nazwę (max 15 znaków): ")
            entry = ScoreEntry.create(name, moves, diff)
            try:
                leaderboard.add(entry)
            except OSError as e:
                logger.error("Could not save score: %s", e)
                console.print("[red](Nie udało się zapisać wyniku)[/red]")
            render.display_leaderboard(console, leaderboard.top(settings.leaderboard_top_n),
                                       highlight=entry, top_n=settings.leaderboard_top_n)
            rank = leaderboard.rank_of(entry)
            if rank == 1:
                console.print(Panel("[bold green]Niesamowite! Nowy najlepszy wynik! Gratulacje![/bold green]",
                                    title="[bold yellow]REKORD![/bold yellow]", border_style="yellow"))
            elif rank is not None and rank <= settings.leaderboard_top_n:
                console.print(Panel(f"[bold blue]Świetna gra! Twój wynik znalazł się na {rank}. miejscu "
                                    f"w TOP {settings.leaderboard_top_n}![/bold blue]",
                                    title="[bold cyan]Gratulacje![/bold cyan]", border_style="cyan"))
            return _ask_play_again(console)

        if game.phase is Phase.LOST:
            console.print(Panel(Text("PRZEGRANA! Nie ma więcej dostępnych ruchów.", justify="center"),
                                title="[bold red]Koniec Gry![/bold red]", border_style="red", padding=(1, 2)))
            return _ask_play_again(console)

        _print_menu(console)
        choice = console.input("Wybór: ").strip()

        if choice == QUIT:
            console.print("\n[bold blue]Do zobaczenia![/bold blue]")
            return False
        if choice == LEADERBOARD:
            clear_screen()
            render.display_leaderboard(console, leaderboard.top(settings.leaderboard_top_n),
                                       top_n=settings.leaderboard_top_n)
            console.input("\nNaciśnij Enter, aby kontynuować...")
            continue

        result = execute(game, choice, console.input)
        if result is None:
            message, failed = "Nieprawidłowy wybór. Wpisz liczbę od 1 do 9.", True
        else:
            message, failed = result.message, not result.ok


def main():
    settings = load_settings()
    setup_logging(settings.log_level)
    console = Console()
    leaderboard = Leaderboard(settings.scores_file)
    rng = random.Random()

    while True:
        difficulty = choose_difficulty(console, leaderboard, settings.leaderboard_top_n)
        if difficulty is None:
            console.print("\n[bold blue]Do zobaczenia![/bold blue]")
            return
        if not play_game(console, difficulty, leaderboard, settings, rng):
            return


if __name__ == "__main__":
    main()
