# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from yeargrid.model.category import CategoryMatch, CategoryRule
from yeargrid.service.categorize import get_category_rule, with_uncategorized
from yeargrid.view.views.header import header


def categories_view(rules: list[CategoryRule]) -> None:
    """Show the category legend in match and render priority order."""
    header("categories", "priority order")

    table = Table(box=box.SIMPLE)
    table.add_column("#")
    table.add_column("category")
    table.add_column("id")
    table.add_column("match")
    table.add_column("keywords")

    for index, rule in enumerate(with_uncategorized(rules)):
        label = Text()
        label.append("■ ", style=rule["color"])
        label.append(rule["label"])
        table.add_row(
            str(index + 1),
            label,
            rule["id"],
            rule["match_mode"],
            ", ".join(rule["keywords"]),
        )

    console = Console()
    console.print(table)


def classification_view(
    title: str, match: CategoryMatch, rules: list[CategoryRule]
) -> None:
    header("classify")

    rule = get_category_rule(match["category"], rules)
    line = Text()
    line.append("■ ", style=match["color"])
    line.append(rule["label"], style=f"bold {match['color']}")
    line.append(f"  {match['category']} {match['color']}", style="dim")

    console = Console()
    console.print(Text(title, style="bold"))
    console.print(line)
