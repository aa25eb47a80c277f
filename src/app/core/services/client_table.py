"""Pure projection of a client sequence into table rows."""
from collections.abc import Sequence

from src.app.core.domain.models import Client, ClientRow, ClientTable, RowAction, RowActionKind

EMPTY_TABLE_PLACEHOLDER = "No clients added yet."
END_DATE_PLACEHOLDER = "–"


def client_count_text(count: int) -> str:
    """Summary text for the number of clients currently shown."""
    if count == 0:
        return "(no clients to show)"
    if count == 1:
        return "(1 client shown)"
    return f"({count} clients shown)"


def row_actions(client: Client) -> list[RowAction]:
    return [
        RowAction(kind=RowActionKind.VIEW, client_id=client.id, label=f"View {client.full_name}"),
        RowAction(kind=RowActionKind.EDIT, client_id=client.id, label=f"Edit {client.full_name}"),
        RowAction(kind=RowActionKind.DELETE, client_id=client.id, label=f"Delete {client.full_name}"),
    ]


def to_client_row(client: Client) -> ClientRow:
    return ClientRow(
        client_id=client.id,
        full_name=client.full_name,
        email=client.email,
        phone=client.phone,
        goal=client.goal,
        start_date=client.start_date.isoformat(),
        end_date=client.end_date.isoformat() if client.end_date else END_DATE_PLACEHOLDER,
        actions=row_actions(client),
    )


def build_client_table(clients: Sequence[Client]) -> ClientTable:
    """
    Project clients into display rows, keeping their order.

    An empty sequence yields no rows and a single placeholder message.
    """
    if not clients:
        return ClientTable(
            rows=[],
            count=0,
            count_text=client_count_text(0),
            placeholder=EMPTY_TABLE_PLACEHOLDER,
        )

    return ClientTable(
        rows=[to_client_row(client) for client in clients],
        count=len(clients),
        count_text=client_count_text(len(clients)),
    )
