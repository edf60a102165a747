# cli.py: terminal frontend for the catalog (list view + creation form)
import argparse
import logging
import os
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, List, Optional

import requests
from rich import box
from rich.columns import Columns
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle
from pydantic import ValidationError

from app.models import Product, ProductIn
from sdk.catalog import DEFAULT_BASE_URL, CatalogClient, CatalogClientError

logger = logging.getLogger(__name__)

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})

# Failures the views turn into a message instead of crashing the menu.
CLIENT_FAILURES = (CatalogClientError, requests.RequestException)


def format_price(price: Decimal) -> str:
    return f"${price:.2f}"


# ---------------------------
# Change signal shared by the form and the list
# ---------------------------
class ChangeSignal:
    """Monotonic version number; the list view re-fetches when it moves."""

    def __init__(self):
        self.version = 0

    def bump(self) -> int:
        self.version += 1
        return self.version


# ---------------------------
# List view
# ---------------------------
class ViewState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


class ProductListView:
    def __init__(self, client: CatalogClient, signal: ChangeSignal):
        self.client = client
        self.signal = signal
        self.state = ViewState.LOADING
        self.products: List[Product] = []
        self.error: Optional[str] = None
        self._seen_version: Optional[int] = None

    def mount(self):
        self.refresh()

    def sync(self) -> bool:
        """Re-fetch if the change signal moved since the last fetch."""
        if self._seen_version == self.signal.version:
            return False
        self.refresh()
        return True

    def refresh(self):
        self._seen_version = self.signal.version
        self.state = ViewState.LOADING
        self.error = None
        try:
            products = self.client.fetch_all()
        except CLIENT_FAILURES as e:
            logger.warning("loading products failed: %s", e)
            self.products = []
            self.error = "Failed to load products"
            self.state = ViewState.ERROR
            return
        self.products = products
        self.state = ViewState.LOADED

    def render(self) -> RenderableType:
        if self.state is ViewState.LOADING:
            return Text("Loading products...", style="italic")
        if self.state is ViewState.ERROR:
            return Text(f"Error: {self.error}", style="red")
        if not self.products:
            return Text("No products found", style="italic yellow")
        cards = [product_card(p) for p in self.products]
        return Panel(Columns(cards, equal=True, expand=True), title="Products", border_style="cyan")


def product_card(p: Product) -> Panel:
    body = Text()
    body.append(f"{p.description}\n", style="dim")
    body.append(format_price(p.price), style="bold blue")
    return Panel(body, title=f"[bold]{p.name}[/bold]", box=box.ROUNDED, width=36)


# ---------------------------
# Creation form
# ---------------------------
class ProductForm:
    def __init__(self, client: CatalogClient, signal: ChangeSignal,
                 on_pending: Optional[Callable[["ProductForm"], None]] = None):
        self.client = client
        self.signal = signal
        self.on_pending = on_pending
        self.name = ""
        self.price = ""
        self.description = ""
        self.pending = False
        self.error: Optional[str] = None

    @property
    def submit_label(self) -> str:
        return "Creating..." if self.pending else "Add Product"

    def clear(self):
        self.name = ""
        self.price = ""
        self.description = ""

    def submit(self) -> Optional[Product]:
        self.pending = True
        self.error = None
        if self.on_pending:
            self.on_pending(self)
        try:
            candidate = ProductIn(name=self.name, price=Decimal(self.price), description=self.description)
            created = self.client.create(candidate)
        except (InvalidOperation, ValidationError, *CLIENT_FAILURES) as e:
            logger.warning("creating product failed: %s", e)
            self.error = "Failed to create product"
            return None
        finally:
            self.pending = False
        self.clear()
        self.signal.bump()
        return created


# ---------------------------
# Interactive shell
# ---------------------------
def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "Product Catalog",
        "[bold blue]Catalog CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_price(message: str, default: str = "10.00") -> str:
    while True:
        raw = Prompt.ask(message, default=default)
        try:
            finite = Decimal(raw).is_finite()
        except InvalidOperation:
            finite = False
        if not finite:
            console.print("[red]Please enter a valid number.[/red]")
            continue
        return raw


def show_product(client: CatalogClient, product_id: int):
    try:
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), transient=True) as progress:
            progress.add_task(description="Fetching...", total=None)
            product = client.fetch_one(product_id)
    except CLIENT_FAILURES as e:
        console.print(show_status(f"Error: {e}", False))
        return
    console.print(product_card(product))


def fill_form(form: ProductForm):
    form.name = prompt_with_autocomplete("Name:")
    form.price = ask_price("Price")
    form.description = prompt_with_autocomplete("Description:")
    created = form.submit()
    if created is None:
        console.print(show_status(form.error, False))
    else:
        console.print(show_status(f"Product '{created.name}' created with id {created.id}"))


def menu(client: CatalogClient):
    signal = ChangeSignal()
    view = ProductListView(client, signal)
    form = ProductForm(client, signal, on_pending=lambda f: console.print(f"[dim]{f.submit_label}[/dim]"))

    console.clear()
    console.print(create_header())
    view.mount()

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in (("1", "List products"), ("2", "Get product by ID"),
                    ("3", "Add product"), ("q", "Quit")):
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            if view.state is ViewState.ERROR:
                view.refresh()
            else:
                view.sync()
            console.print(view.render())

        elif choice == "2":
            ids = [str(p.id) for p in view.products]
            raw = prompt_with_autocomplete("Enter product ID", completer=WordCompleter(ids))
            try:
                product_id = int(raw)
            except ValueError:
                console.print(show_status(f"'{raw}' is not a product id", False))
                continue
            show_product(client, product_id)

        elif choice == "3":
            fill_form(form)
            if view.sync():
                console.print(view.render())

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye![/bold green]"))
                return

        console.print()
        console.rule(style="dim")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Catalog API base URL")
    args = parser.parse_args(argv)
    logging.basicConfig(level=os.getenv("CATALOG_LOG_LEVEL", "WARNING").upper())
    menu(CatalogClient(base_url=args.base_url))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
