"""Terminal rendering of invoices using rich."""

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.common.config.settings import settings
from src.common.dtos.billing_dtos import InvoiceDTO
from src.common.utils.currency_utils import format_currency

STATUS_STYLES = {"paid": "bold green", "pending": "bold yellow", "cancelled": "bold red"}


class RichInvoicePrinter:

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def build(self, invoice: InvoiceDTO) -> Panel:
        """Builds the renderable for an invoice without printing it."""
        header = Table.grid(expand=True)
        header.add_column()
        header.add_column(justify="right")
        header.add_row(
            Text(f"{settings.PHARMACY_NAME}\n{settings.PHARMACY_ADDRESS}", style="bold"),
            Text.assemble(
                (f"{invoice.invoice_number}\n", "bold"),
                f"Date: {invoice.invoice_date}\nDue: {invoice.due_date}\n",
                (invoice.status.upper(), STATUS_STYLES.get(invoice.status, "bold")),
            ),
        )

        customer = invoice.customer_details
        bill_to = Text(f"Bill to: {customer.name}\n{customer.address}\n{customer.email} | {customer.phone}")

        items = Table(box=box.SIMPLE_HEAVY, expand=True)
        items.add_column("Item")
        items.add_column("Qty", justify="right")
        items.add_column("Price", justify="right")
        items.add_column("Tax", justify="right")
        items.add_column("Discount", justify="right")
        items.add_column("Total", justify="right")
        for item in invoice.items:
            items.add_row(
                item.name,
                str(item.quantity),
                format_currency(item.price),
                format_currency(item.tax),
                format_currency(item.discount),
                format_currency(item.total),
            )

        summary = Table.grid(padding=(0, 2))
        summary.add_column(justify="right")
        summary.add_column(justify="right")
        summary.add_row("Subtotal:", format_currency(invoice.subtotal))
        summary.add_row("Tax:", format_currency(invoice.tax))
        summary.add_row("Discount:", format_currency(invoice.discount))
        summary.add_row(Text("Total:", style="bold"), Text(format_currency(invoice.total), style="bold"))
        summary.add_row("Payment method:", invoice.payment_method)

        return Panel(Group(header, bill_to, items, summary), title="INVOICE", box=box.ROUNDED)

    def render(self, invoice: InvoiceDTO) -> None:
        self.console.print(self.build(invoice))
