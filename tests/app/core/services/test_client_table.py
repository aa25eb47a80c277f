from datetime import date

import pytest

from src.app.core.domain.models import Client, RowActionKind
from src.app.core.services.client_search_service import ClientSearchService, filter_by_name
from src.app.core.services.client_table import (
    EMPTY_TABLE_PLACEHOLDER,
    END_DATE_PLACEHOLDER,
    build_client_table,
    client_count_text,
)


def create_client(client_id: int, full_name: str, end_date: date | None = date(2030, 4, 15)) -> Client:
    return Client(
        id=client_id,
        full_name=full_name,
        email=f"{full_name.split()[0].lower()}@x.com",
        phone="55119876543",
        goal="Lose weight",
        start_date=date(2030, 1, 15),
        end_date=end_date,
    )


@pytest.fixture
def clients():
    return [
        create_client(1, "Ana Silva"),
        create_client(2, "Bruno Costa"),
        create_client(3, "Mariana Alves"),
    ]


# =============================================================================
# Table projection
# =============================================================================

@pytest.mark.parametrize(
    "count,expected",
    [(0, "(no clients to show)"), (1, "(1 client shown)"), (2, "(2 clients shown)"), (17, "(17 clients shown)")],
)
def test_client_count_text(count, expected):
    assert client_count_text(count) == expected


def test_empty_table_shows_single_placeholder():
    table = build_client_table([])

    assert table.rows == []
    assert table.count == 0
    assert table.placeholder == EMPTY_TABLE_PLACEHOLDER
    assert table.count_text == "(no clients to show)"


def test_rows_keep_input_order(clients):
    table = build_client_table(clients)

    assert [row.client_id for row in table.rows] == [1, 2, 3]
    assert table.count == 3
    assert table.placeholder is None


def test_row_carries_display_fields(clients):
    row = build_client_table(clients).rows[0]

    assert row.full_name == "Ana Silva"
    assert row.email == "ana@x.com"
    assert row.phone == "55119876543"
    assert row.goal == "Lose weight"
    assert row.start_date == "2030-01-15"
    assert row.end_date == "2030-04-15"


def test_missing_end_date_shows_dash():
    row = build_client_table([create_client(1, "Ana Silva", end_date=None)]).rows[0]

    assert row.end_date == END_DATE_PLACEHOLDER


def test_row_actions_are_keyed_by_id_and_labelled_by_name(clients):
    actions = build_client_table(clients).rows[1].actions

    assert [a.kind for a in actions] == [RowActionKind.VIEW, RowActionKind.EDIT, RowActionKind.DELETE]
    assert all(a.client_id == 2 for a in actions)
    assert [a.label for a in actions] == ["View Bruno Costa", "Edit Bruno Costa", "Delete Bruno Costa"]


def test_projection_does_not_mutate_input(clients):
    before = [c.model_copy() for c in clients]

    build_client_table(clients)

    assert clients == before


# =============================================================================
# Search
# =============================================================================

def test_filter_is_case_insensitive_substring(clients):
    assert [c.full_name for c in filter_by_name(clients, "ANA")] == ["Ana Silva", "Mariana Alves"]


def test_blank_query_returns_everyone_in_order(clients):
    assert filter_by_name(clients, "") == clients
    assert filter_by_name(clients, "   ") == clients
    assert filter_by_name(clients, None) == clients


def test_query_is_trimmed(clients):
    assert [c.id for c in filter_by_name(clients, "  costa ")] == [2]


def test_no_match_renders_empty_table_text(client_repository, clients):
    # Arrange
    for client in clients:
        client_repository.add(client)
    service = ClientSearchService(client_repository)

    # Act
    table = service.table("zzz")

    # Assert
    assert table.rows == []
    assert table.count_text == "(no clients to show)"


def test_search_does_not_touch_repository(client_repository, clients):
    # Arrange
    for client in clients:
        client_repository.add(client)
    service = ClientSearchService(client_repository)

    # Act
    table = service.table("bruno")

    # Assert
    assert table.count_text == "(1 client shown)"
    assert client_repository.count() == 3
