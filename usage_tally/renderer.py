"""
Terminal rendering of aggregated token usage.
Turns the sorted aggregation result into a rich table.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from usage_tally.models.token_usage import TokenUsage
from usage_tally.services.usage_aggregator import UsageRow
from usage_tally.utils import format_token_count, simplify_model_name

NO_DATA_MESSAGE = "No usage data to display."
TABLE_TITLE = "Usage Summary"


def _token_cells(usage: TokenUsage) -> List[str]:
    return [
        format_token_count(usage.input_tokens),
        format_token_count(usage.output_tokens),
        format_token_count(usage.cache_creation_input_tokens),
        format_token_count(usage.cache_read_input_tokens),
    ]


def visible_rows(data: Sequence[UsageRow]) -> List[UsageRow]:
    """Drop entries that carry no token counts at all."""
    return [row for row in data if row[1].total_tokens > 0]


def build_usage_table(data: Sequence[UsageRow], short_names: bool = False) -> Table:
    table = Table(title=TABLE_TITLE, title_style="bold", box=box.ROUNDED)
    table.add_column("Model", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    for header in ("Input", "Output", "Cache Create", "Cache Read"):
        table.add_column(header, justify="right", style="cyan", no_wrap=True)

    total = TokenUsage()
    for (model, date), usage in data:
        name = simplify_model_name(model) if short_names else model
        table.add_row(name, date, *_token_cells(usage))
        total += usage

    table.add_section()
    table.add_row(Text("TOTAL", style="bold"), "", *_token_cells(total), style="bold")
    return table


def render_usage_table(data: Sequence[UsageRow], console: Optional[Console] = None,
                       short_names: bool = False) -> None:
    console = console or Console()
    rows = visible_rows(data)
    if not rows:
        console.print(NO_DATA_MESSAGE)
        return

    console.print()
    console.print(build_usage_table(rows, short_names=short_names))
