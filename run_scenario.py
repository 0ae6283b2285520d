"""
Walk-through of a symptom shared by several disease modules.

This script demonstrates:
1. Configuration loading and logging setup
2. Reports from multiple modules feeding one symptom
3. Resolution and reactivation of a module's contribution
4. Shallow cloning and what clones share
5. JSON export of the final state

Run with: uv run python run_scenario.py
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from expressed_symptoms.config import get_config
from expressed_symptoms.observability import configure_logging
from expressed_symptoms.services import SymptomTracker, tracker_to_json

console = Console()


def render_tracker(tracker: SymptomTracker, title: str) -> None:
    """Print one row per module plus the aggregate view."""
    table = Table(title=title)
    table.add_column("Module", style="cyan")
    table.add_column("Current", style="green")
    table.add_column("Last update", style="yellow")
    table.add_column("Resolved", style="magenta")
    table.add_column("Reports", style="white")

    for module, track in tracker.get_sources().items():
        table.add_row(
            module,
            str(track.get_current_value()),
            str(track.get_last_update_time()),
            "yes" if track.is_resolved() else "no",
            str(len(track)),
        )

    console.print(table)
    console.print(
        f"Expressed {tracker.name}: {tracker.get_aggregate_value()} "
        f"(dominant source: {tracker.get_dominant_source()})",
        style="bold",
    )


def run() -> None:
    config = get_config()
    configure_logging(config.logging)

    console.print(Panel(f"Symptom tracking walk-through ({config.environment})", style="bold blue"))

    fever = SymptomTracker("fever", config.tracking)
    fever.on_set("flu", 10, 3)
    fever.on_set("cold", 10, 5)
    render_tracker(fever, "Two active modules")

    console.print(Panel("Resolving the cold", style="blue"))
    fever.resolve_source("cold")
    render_tracker(fever, "After resolution")

    console.print(Panel("Cold relapses", style="blue"))
    fever.on_set("cold", 20, 7)
    render_tracker(fever, "After a new report")

    console.print(Panel("Cloning", style="blue"))
    clone = fever.clone()
    clone.on_set("sepsis", 25, 9)
    clone.resolve_source("flu")
    render_tracker(fever, "Original (sees resolution of shared flu track)")
    render_tracker(clone, "Clone (only one that knows sepsis)")

    console.print(Panel("Export", style="blue"))
    console.print_json(tracker_to_json(fever))


if __name__ == "__main__":
    run()
