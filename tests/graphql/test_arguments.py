"""
Tests for agenda operation argument validation
"""

import uuid

import pytest

from agendas.graphql.arguments import (
    AgendaItemKind,
    CreateAgendaItemArguments,
    QueryAgendaItemArguments,
    parse_arguments,
)
from agendas.graphql.errors import InvalidArgumentsError

FOLDER_ID = "123e4567-e89b-12d3-a456-426614174000"


def issue_paths(error: InvalidArgumentsError) -> list[tuple]:
    return [issue.argument_path for issue in error.issues]


class TestCreateAgendaItemArguments:
    def test_valid_minimal_input(self):
        result = parse_arguments(
            CreateAgendaItemArguments, {"folderId": FOLDER_ID, "name": "name", "type": "general"}
        )

        assert isinstance(result, CreateAgendaItemArguments)
        assert result.folder_id == uuid.UUID(FOLDER_ID)
        assert result.type is AgendaItemKind.GENERAL
        assert result.description is None

    @pytest.mark.parametrize("folder_id", ["1", "", "123e4567-e89b-12d3-a456", "zzzz"])
    def test_malformed_folder_id(self, folder_id):
        result = parse_arguments(
            CreateAgendaItemArguments, {"folderId": folder_id, "name": "name", "type": "general"}
        )

        assert isinstance(result, InvalidArgumentsError)
        assert issue_paths(result) == [("input", "folderId")]

    def test_missing_required_fields(self):
        result = parse_arguments(CreateAgendaItemArguments, {})

        assert isinstance(result, InvalidArgumentsError)
        assert set(issue_paths(result)) == {
            ("input", "folderId"),
            ("input", "name"),
            ("input", "type"),
        }

    def test_name_length_bounds(self):
        too_long = parse_arguments(
            CreateAgendaItemArguments,
            {"folderId": FOLDER_ID, "name": "x" * 257, "type": "general"},
        )
        longest = parse_arguments(
            CreateAgendaItemArguments,
            {"folderId": FOLDER_ID, "name": "x" * 256, "type": "general"},
        )

        assert isinstance(too_long, InvalidArgumentsError)
        assert isinstance(longest, CreateAgendaItemArguments)

    @pytest.mark.parametrize("field", ["name", "description"])
    def test_blank_text_rejected(self, field):
        raw = {"folderId": FOLDER_ID, "name": "name", "type": "general", field: "   "}

        result = parse_arguments(CreateAgendaItemArguments, raw)

        assert isinstance(result, InvalidArgumentsError)
        assert issue_paths(result) == [("input", field)]

    def test_surrounding_whitespace_is_stripped(self):
        result = parse_arguments(
            CreateAgendaItemArguments,
            {"folderId": FOLDER_ID, "name": "  Opening hymn ", "type": "song", "key": " G "},
        )

        assert result.name == "Opening hymn"
        assert result.key == "G"

    def test_unknown_field_rejected(self):
        result = parse_arguments(
            CreateAgendaItemArguments,
            {"folderId": FOLDER_ID, "name": "name", "type": "general", "colour": "red"},
        )

        assert isinstance(result, InvalidArgumentsError)
        assert issue_paths(result) == [("input", "colour")]

    @pytest.mark.parametrize(
        "kind,field",
        [
            ("note", "duration"),
            ("note", "key"),
            ("general", "key"),
            ("scripture", "key"),
        ],
    )
    def test_field_not_allowed_for_type(self, kind, field):
        result = parse_arguments(
            CreateAgendaItemArguments,
            {"folderId": FOLDER_ID, "name": "name", "type": kind, field: "value"},
        )

        assert isinstance(result, InvalidArgumentsError)
        assert issue_paths(result) == [("input", field)]
        assert result.issues[0].message == (
            f'Cannot be provided for an agenda item of type "{kind}".'
        )

    @pytest.mark.parametrize(
        "kind,extra",
        [
            ("song", {"duration": "3m", "key": "D"}),
            ("general", {"duration": "5m"}),
            ("scripture", {"duration": "2m"}),
            ("note", {"description": "Remember the candles"}),
        ],
    )
    def test_fields_allowed_for_type(self, kind, extra):
        result = parse_arguments(
            CreateAgendaItemArguments,
            {"folderId": FOLDER_ID, "name": "name", "type": kind, **extra},
        )

        assert isinstance(result, CreateAgendaItemArguments)


class TestQueryAgendaItemArguments:
    def test_valid_id(self):
        result = parse_arguments(QueryAgendaItemArguments, {"id": FOLDER_ID})

        assert isinstance(result, QueryAgendaItemArguments)
        assert result.id == uuid.UUID(FOLDER_ID)

    def test_invalid_id(self):
        result = parse_arguments(QueryAgendaItemArguments, {"id": "abc"})

        assert isinstance(result, InvalidArgumentsError)
        assert issue_paths(result) == [("input", "id")]
