"""Command line entry point for the departure simulation."""
import click

from runway_sim.report import format_report, history_frame
from runway_sim.simulation import run_simulation


@click.command()
@click.option("--progress/--no-progress", default=False, help="Show a progress bar while ticking")
@click.option("--history/--no-history", default=False, help="Print the airport state after every tick")
def main(progress, history):
    """Simulate departures from a single-runway airport and print a report."""
    result = run_simulation(progress=progress, record_history=history)

    click.echo(format_report(result))

    if history:
        click.echo()
        click.echo("Airport state per tick:")
        click.echo(history_frame(result.history).to_string(index=False))


if __name__ == "__main__":
    main()
