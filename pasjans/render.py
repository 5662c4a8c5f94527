from colorama import Fore, Style
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pasjans.cards import Suit
from pasjans.config import Difficulty

CARD_WIDTH = 7
CARD_HEIGHT = 5
DRAW3_PARTIAL_WIDTH = 4


def _back_lines(border=Fore.LIGHTBLACK_EX):
    return [border + l + Style.RESET_ALL for l in ["┌─────┐"] + ["│││││││"] * 3 + ["└─────┘"]]


def _empty_slot_lines(border=Fore.LIGHTBLACK_EX):
    return [border + l + Style.RESET_ALL for l in ["┌─────┐"] + ["│     │"] * 3 + ["└─────┘"]]


def _blank_lines(width=CARD_WIDTH):
    return [" " * width] * CARD_HEIGHT


# Generuje wygląd karty
def card_face_lines(card, width=CARD_WIDTH):
    if card is None:
        return _empty_slot_lines()
    if card.hidden:
        return _back_lines()
    color = Fore.RED if card.is_red() else Fore.WHITE
    pad = " " if card.value != "10" else ""
    if width == DRAW3_PARTIAL_WIDTH:
        return [color + "┌───" + Style.RESET_ALL,
                color + "│" + f"{card.value + pad} " + Style.RESET_ALL,
                color + "│ " + f"{card.suit.value} " + Style.RESET_ALL,
                color + "│   " + Style.RESET_ALL,
                color + "└───" + Style.RESET_ALL]
    return [color + "┌─────┐" + Style.RESET_ALL,
            color + "│" + f"{card.value + pad}   " + "│" + Style.RESET_ALL,
            color + "│" + f"  {card.suit.value}  " + "│" + Style.RESET_ALL,
            color + "│" + f"   {pad + card.value}" + "│" + Style.RESET_ALL,
            color + "└─────┘" + Style.RESET_ALL]


# Rysuje kolumny tableau: przykryte karty pokazują tylko trzy górne linie
def tableau_lines(tableau):
    col_blocks = []
    max_height = 0
    for column in tableau.columns:
        block = []
        for row_idx, card in enumerate(column):
            full = card_face_lines(card)
            block.extend(full[:3] if row_idx < len(column) - 1 else full)
        if not column:
            block.extend(_empty_slot_lines())
        col_blocks.append(block)
        max_height = max(max_height, len(block))

    header = "  ".join(f"{i + 1:^{CARD_WIDTH}}" for i in range(len(col_blocks)))
    lines = [header]
    for line_idx in range(max_height):
        lines.append("  ".join(
            block[line_idx] if line_idx < len(block) else " " * CARD_WIDTH for block in col_blocks
        ))
    return lines


# Obszar talii, waste i kupek końcowych
def top_row_lines(draw_pile, waste, foundation):
    blocks = [_back_lines() if draw_pile.has_cards() else _empty_slot_lines()]

    visible = waste.visible()
    if waste.draw_count == Difficulty.HARD.draw_count:
        fan = [""] * CARD_HEIGHT
        partial = list(visible[:-1])
        while len(partial) < 2:
            partial.insert(0, None)
        for card in partial:
            lines = card_face_lines(card, DRAW3_PARTIAL_WIDTH) if card else _blank_lines(DRAW3_PARTIAL_WIDTH)
            fan = [a + b for a, b in zip(fan, lines)]
        top_lines = card_face_lines(visible[-1]) if visible else _empty_slot_lines()
        blocks.append([a + b for a, b in zip(fan, top_lines)])
    else:
        blocks.append(card_face_lines(visible[-1]) if visible else _empty_slot_lines())

    blocks.append(_blank_lines())
    for suit in Suit:
        blocks.append(card_face_lines(foundation.top(suit)))

    return ["  ".join(block[r] for block in blocks) for r in range(CARD_HEIGHT)]


def status_text(game):
    status_line = Text()
    status_line.append(f"Ruchy: {game.move_count}", style="bold")
    status_line.append(f"   Talia: {len(game.draw_pile)}", style="dim")
    status_line.append(f"   Poziom: {game.difficulty.label}", style="dim")
    status_line.append(f"   Cofnięcia: {game.undo_available}", style="dim yellow" if game.undo_available else "dim")
    return status_line


def message_panel(message, failed=False):
    border_style = "bold red" if failed else "bold green"
    return Panel(Text(message, justify="center"), border_style=border_style)


# Główna funkcja rysująca całą planszę
def display_game(game, console, message="", failed=False):
    for line in top_row_lines(game.draw_pile, game.waste, game.foundation):
        print(line)
    print()
    for line in tableau_lines(game.tableau):
        print(line)
    console.print(status_text(game))
    if message:
        console.print(message_panel(message, failed))


# Tabela najlepszych wyników
def leaderboard_table(entries, highlight=None, top_n=None):
    title = "[bold yellow]Najlepsze wyniki[/bold yellow]"
    if top_n:
        title = f"[bold yellow]Najlepsze wyniki (TOP {top_n})[/bold yellow]"
    table = Table(title=title, show_header=True, header_style="bold magenta", title_justify="left")
    table.add_column("Miejsce", style="dim", width=7, justify="center")
    table.add_column("Gracz", justify="left")
    table.add_column("Ruchy", justify="center", style="cyan")
    table.add_column("Trudność", justify="center")
    table.add_column("Data", style="green", justify="center")

    for i, entry in enumerate(entries):
        row_style = "bold yellow on dark_blue" if entry is highlight else ""
        difficulty_style = "green" if entry.difficulty is Difficulty.EASY else "red"
        table.add_row(
            Text(str(i + 1), style=row_style),
            Text(entry.player, style=row_style),
            Text(str(entry.moves), style=row_style),
            Text(entry.difficulty.label.capitalize(), style=f"{difficulty_style} {row_style}".strip()),
            Text(entry.timestamp, style=row_style),
        )
    return table


def display_leaderboard(console, entries, highlight=None, top_n=None):
    if not entries:
        console.print(Panel(Text("Brak zapisanych wyników. Wygraj, aby się tu pojawić!", justify="center"),
                            title="[dim]Tabela wyników[/dim]", border_style="dim white"))
        return False
    console.print(leaderboard_table(entries, highlight, top_n))
    return True
