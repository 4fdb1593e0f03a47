"""Tiny Fields headless simulation CLI."""

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from tiny_fields.models import Roster
from tiny_fields.models.intent import BuyTimeSlot, SkipSeconds, ToggleJob
from tiny_fields.simulation.game_state import GameState
from tiny_fields.utils.formatting import format_duration, pretty_number
from tiny_fields.utils.job_loader import get_default_roster, load_roster_from_json

console = Console()


def create_jobs_table(state: GameState) -> Table:
    """Create a rich table showing every job of the game."""
    table = Table(title="Jobs", show_header=True, header_style="bold magenta")

    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Job", style="cyan", width=14)
    table.add_column("Level", style="green", width=6, justify="right")
    table.add_column("State", width=9)
    table.add_column("Action", style="yellow", width=8, justify="right")
    table.add_column("Level Up", style="yellow", width=12, justify="right")
    table.add_column("Total", style="blue", width=8, justify="right")
    table.add_column("¢/Action", style="white", width=10, justify="right")

    for i, job in enumerate(state.jobs):
        status = "[green]running[/green]" if job.running else "[dim]idle[/dim]"
        table.add_row(
            str(i),
            job.name,
            str(job.level),
            status,
            f"{job.action_progress.get():.0%}",
            f"{job.actions_done}/{job.actions_to_level_up}",
            pretty_number(job.actions_done_total),
            pretty_number(job.money_per_action),
        )

    return table


def format_inventory(state: GameState) -> str:
    return "  ".join(
        f"{item.display_name}: {pretty_number(count)}"
        for item, count in state.inventory.items()
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Tiny Fields headless simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --start 0 --seconds 100        # Run woodcutting for 100 seconds
  %(prog)s --start 0 --start 1 --seconds 3600
  %(prog)s --money 100 --buy-slots 1      # Buy a fourth time slot
  %(prog)s --config my_jobs.json          # Use a custom job roster
  %(prog)s --quiet                        # Only print the inventory
        """,
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a job roster JSON file",
    )

    parser.add_argument(
        "--start",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Index of a job to start (repeatable)",
    )

    parser.add_argument(
        "--seconds",
        type=int,
        default=0,
        help="Seconds to simulate (default: 0)",
    )

    parser.add_argument(
        "--money",
        type=int,
        default=0,
        help="Money to start with (default: 0)",
    )

    parser.add_argument(
        "--buy-slots",
        type=int,
        default=0,
        help="Time slots to buy before starting jobs (default: 0)",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Minimal output (only the inventory)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)
    if args.seconds < 0:
        parser.error("--seconds must not be negative")
    if args.money < 0:
        parser.error("--money must not be negative")
    return args


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def run_simulation(
    roster: Roster,
    start: list[int],
    seconds: int,
    money: int = 0,
    buy_slots: int = 0,
) -> GameState:
    """Build a game from a roster and play it forward."""
    state = GameState.from_roster(roster)
    state.total_money = money

    # Toggles in one step share a free slot count, so every start gets its
    # own step; a repeated index would stop the job it just started.
    state.step([BuyTimeSlot() for _ in range(buy_slots)], 0.0)
    for index in dict.fromkeys(start):
        state.step([ToggleJob(index)], 0.0)
    state.step([SkipSeconds(seconds)], 0.0)

    return state


def main(argv: list[str] | None = None) -> None:
    """Run the simulation with CLI arguments."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    roster = load_roster_from_json(args.config) if args.config else get_default_roster()
    state = run_simulation(
        roster,
        start=args.start,
        seconds=args.seconds,
        money=args.money,
        buy_slots=args.buy_slots,
    )

    if args.quiet:
        print(format_inventory(state))
        return

    console.print(
        Panel.fit(
            "[bold cyan]Tiny Fields[/bold cyan]\n[yellow]Headless Simulation[/yellow]",
            border_style="blue",
        )
    )

    console.print(f"\n[bold]Simulated:[/bold] [cyan]{format_duration(args.seconds)}[/cyan]")

    slots = state.time_slots
    console.print(
        f"[bold]Time slots:[/bold] {slots.used}/{slots.total} used, "
        f"next slot costs [yellow]{pretty_number(slots.upgrade_cost)}[/yellow]"
    )
    console.print(f"[bold]Money:[/bold] [yellow]{pretty_number(state.total_money)}[/yellow]\n")

    console.print(create_jobs_table(state))

    console.print("\n[bold]Inventory:[/bold]")
    for item, count in state.inventory.items():
        console.print(f"  • {item.display_name}: [cyan]{pretty_number(count)}[/cyan]")


if __name__ == "__main__":
    main()
