# cli.py - interactive product store console
import sys
from typing import Any, Callable, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, Prompt
from rich.table import Table

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from app.config import get_settings
from sdk.pystore import StoreAPIError, StoreClient

console = Console()

ID_COMPLETION_STYLE = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#1f3b4d #e0e0e0',
    'completion-menu.completion.current': 'bg:#3c7a99 #ffffff',
})

COLUMNS = ("ID", "Name", "Description", "Price", "Stock", "Updated")


def product_rows(products: List[Dict[str, Any]]) -> List[List[str]]:
    return [
        [
            str(p.get("id", "?")),
            p.get("name", ""),
            p.get("description", ""),
            f"{p.get('price', 0):.2f}",
            str(p.get("stock", 0)),
            # drop fractional seconds and zone
            str(p.get("updatedAt", ""))[:19],
        ]
        for p in products
    ]


def products_table(products: List[Dict[str, Any]]) -> Table:
    table = Table(box=box.SIMPLE_HEAVY, header_style="bold cyan")
    for name in COLUMNS:
        table.add_column(name, justify="right" if name in ("ID", "Price", "Stock") else "left")
    for row in product_rows(products):
        table.add_row(*row)
    return table


def read_optional_number(label: str) -> Optional[float]:
    raw = Prompt.ask(f"{label} [dim](blank keeps current)[/dim]", default="", show_default=False)
    while raw:
        try:
            return float(raw)
        except ValueError:
            raw = Prompt.ask(f"[red]Not a number.[/red] {label}", default="", show_default=False)
    return None


class ProductConsole:
    """Menu-driven front end over :class:`StoreClient`."""

    def __init__(self, client: StoreClient):
        self.client = client
        self.last_status = "Connected to " + client.base_url
        self.known_ids: List[str] = []

    def call_store(self, fn: Callable, *args, done: Optional[str] = None, **kwargs):
        """Run one SDK call under a spinner; store and connection errors become the status line."""
        try:
            with console.status("Talking to the product store..."):
                result = fn(*args, **kwargs)
        except (StoreAPIError, OSError) as e:
            self.last_status = f"[red]Failed:[/red] {e}"
            return None
        if done:
            self.last_status = f"[green]{done}[/green]"
        return result

    def refresh_ids(self):
        products = self.call_store(self.client.list_products) or []
        self.known_ids = [str(p["id"]) for p in products]
        return products

    def pick_id(self) -> Optional[int]:
        raw = prompt("Product ID: ", completer=WordCompleter(self.known_ids),
                     style=ID_COMPLETION_STYLE).strip()
        if not raw.isdigit():
            self.last_status = f"[red]Failed:[/red] {raw!r} is not a product ID"
            return None
        return int(raw)

    def show(self, *products: Dict[str, Any]):
        if products:
            console.print(products_table(list(products)))
        else:
            console.print("[yellow]The store is empty.[/yellow]")

    # ---------------------------
    # Menu actions
    # ---------------------------
    def list_all(self):
        products = self.refresh_ids()
        self.show(*products)

    def inspect(self):
        pid = self.pick_id()
        if pid is not None:
            product = self.call_store(self.client.get_product, pid)
            if product:
                self.show(product)

    def add(self):
        name = Prompt.ask("Name")
        description = Prompt.ask("Description", default="")
        price = FloatPrompt.ask("Price")
        stock = FloatPrompt.ask("Stock", default=1.0)
        product = self.call_store(self.client.create_product, name, description, price, stock,
                                  done=f"Created '{name}'")
        if product:
            self.known_ids.append(str(product["id"]))
            self.show(product)

    def edit(self):
        pid = self.pick_id()
        if pid is None:
            return
        fields = {
            "name": Prompt.ask("Name [dim](blank keeps current)[/dim]", default="", show_default=False) or None,
            "description": Prompt.ask("Description [dim](blank keeps current)[/dim]", default="",
                                      show_default=False) or None,
            "price": read_optional_number("Price"),
            "stock": read_optional_number("Stock"),
        }
        product = self.call_store(self.client.update_product, pid, done=f"Product {pid} saved", **fields)
        if product:
            self.show(product)

    def drop(self):
        pid = self.pick_id()
        if pid is None or not Confirm.ask(f"Delete product {pid} for good?"):
            return
        answer = self.call_store(self.client.delete_product, pid)
        if answer:
            self.last_status = f"[green]{answer['message']}[/green]"
            self.known_ids = [i for i in self.known_ids if i != str(pid)]

    def ping(self):
        health = self.call_store(self.client.health)
        if health:
            self.last_status = f"[green]{health['service']} {health['status']}[/green], {health['products']} product(s)"

    ACTIONS = {
        "l": ("list products", list_all),
        "g": ("get one product", inspect),
        "c": ("create a product", add),
        "u": ("update a product", edit),
        "d": ("delete a product", drop),
        "h": ("service health", ping),
    }

    def run(self):
        self.refresh_ids()
        while True:
            console.print(Panel(self.last_status, title="product-store", subtitle=self.client.base_url,
                                border_style="blue"))
            console.print("  ".join(f"[bold cyan]{key}[/bold cyan] {label}"
                                    for key, (label, _) in self.ACTIONS.items()) + "  [bold cyan]q[/bold cyan] quit")
            key = Prompt.ask("Action", choices=list(self.ACTIONS) + ["q"], show_choices=False)
            if key == "q":
                return
            _, action = self.ACTIONS[key]
            action(self)


def main():
    shell = ProductConsole(StoreClient(base_url=get_settings().base_url))
    try:
        shell.run()
    except KeyboardInterrupt:
        console.print("\n[bold red]Interrupted[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
