#!/usr/bin/env python3
"""
Transfer CLI - Budget Balancing Commands

Command-line interface for calculating a budget's transfers and todo list
from a JSON budget snapshot.
"""

from pathlib import Path

import click

from ..budget import Budget, BudgetLoadError, load_budget
from ..core.config import get_config
from ..core.currency import format_dollars
from ..core.json_utils import format_json
from ..core.money import Money
from ..todo import build_todo_list
from ..transfers import TransferCalculationError, TransferResult, calculate_budget_transfers

BUDGET_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _load_and_calculate(budget_file: Path, strict: bool | None) -> tuple[Budget, TransferResult]:
    """Load a snapshot and calculate its transfers, mapping errors to ClickException."""
    try:
        budget = load_budget(budget_file)
        result = calculate_budget_transfers(budget, strict=strict)
    except BudgetLoadError as e:
        raise click.ClickException(f"Could not load budget: {e}") from e
    except TransferCalculationError as e:
        raise click.ClickException(str(e)) from e
    return budget, result


def _money(amount: Money) -> str:
    return format_dollars(amount.to_decimal(), symbol=get_config().display.currency_symbol)


@click.command()
@click.argument("budget_file", type=BUDGET_FILE)
@click.option(
    "--format", type=click.Choice(["text", "json"]), default="text", help="Output format (default: text)"
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail if the budget is not reconciled (default: LEDGER_STRICT_BALANCE)",
)
@click.pass_context
def transfers(ctx: click.Context, budget_file: Path, format: str, strict: bool | None) -> None:
    """
    Calculate the transfers that balance every account of a budget.

    Examples:
      budget-ledger transfers budget-2025-01.json
      budget-ledger transfers budget-2025-01.json --format json --strict
    """
    budget, result = _load_and_calculate(budget_file, strict)

    if format == "json":
        click.echo(
            format_json(
                {
                    "budget_id": budget.id,
                    "period": budget.label,
                    "transfers": [
                        {
                            **transfer.to_dict(),
                            "from_account_name": budget.account_name(transfer.from_account_id),
                            "to_account_name": budget.account_name(transfer.to_account_id),
                        }
                        for transfer in result.transfers
                    ],
                    "total_transferred": str(result.total_transferred.to_decimal()),
                    "summary": result.summary.to_dict(),
                }
            )
        )
        return

    click.echo(f"Budget {budget.label} ({budget.id})")

    if ctx.obj and ctx.obj.get("verbose", False):
        click.echo("Net positions:")
        for position in result.positions:
            click.echo(f"  {budget.account_name(position.account_id)}: {_money(position.net_amount)}")

    if not result.transfers:
        click.echo("No transfers needed.")
    else:
        click.echo(f"Transfers needed: {len(result.transfers)}")
        for i, transfer in enumerate(result.transfers, start=1):
            click.echo(
                f"  {i}. {budget.account_name(transfer.from_account_id)} -> "
                f"{budget.account_name(transfer.to_account_id)}: {_money(transfer.amount)}"
            )
        click.echo(f"Total: {_money(result.total_transferred)}")

    if not result.summary.is_balanced:
        click.echo(
            f"⚠️  Budget is not reconciled: {_money(result.summary.imbalance)} unmatched",
            err=True,
        )


@click.command()
@click.argument("budget_file", type=BUDGET_FILE)
@click.option(
    "--format", type=click.Choice(["text", "json"]), default="text", help="Output format (default: text)"
)
def todo(budget_file: Path, format: str) -> None:
    """
    Show the todo list (transfers and manual payments) for a budget.

    Examples:
      budget-ledger todo budget-2025-01.json
    """
    budget, result = _load_and_calculate(budget_file, strict=None)
    todo_list = build_todo_list(budget, result.transfers)

    if format == "json":
        click.echo(format_json(todo_list.to_dict()))
        return

    summary = todo_list.summary()
    click.echo(f"Todo list for budget {budget.label}: {summary.total_items} items")
    for item in todo_list.items:
        mark = "x" if item.is_completed else " "
        click.echo(f"  [{mark}] {item.type.value:<8} {item.name}")
