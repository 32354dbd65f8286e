from collections.abc import Sequence
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from .models.product import Color, Product

CATALOG_THEME = Theme(
    {
        "header": "bold blue",
        "dim": "dim white",
        "color.red": "bold red",
        "color.green": "bold green",
        "color.blue": "bold blue",
    }
)

_COLOR_STYLES = {
    Color.RED: "color.red",
    Color.GREEN: "color.green",
    Color.BLUE: "color.blue",
}


class CatalogRenderer:
    """Renders filtered products as a rich table."""

    def __init__(
        self,
        products: Sequence[Product],
        *,
        title: str = "Products",
        console: Optional[Console] = None,
    ):
        self.products = products
        self.title = title
        self.console = console or Console(theme=CATALOG_THEME)

    def build_table(self) -> Table:
        table = Table(title=self.title, box=box.SIMPLE_HEAVY, header_style="header")
        table.add_column("Name")
        table.add_column("Color")
        table.add_column("Size")
        for product in self.products:
            table.add_row(
                product.name,
                f"[{_COLOR_STYLES[product.color]}]{product.color}[/]",
                str(product.size),
            )
        return table

    def render(self) -> None:
        if not self.products:
            self.console.print("No matching products.", style="dim")
            return
        self.console.print(self.build_table())
