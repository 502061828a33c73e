import json

import pytest
from pydantic import ValidationError
from infrastructure.operations import OperationStatus
from modules.scryscraper.schemas import (
    FieldIssue,
    SchemaValidationError,
    ScryfallSet,
    validate_set,
    validate_set_json,
)


def _reasons(result):
    return {issue.path: issue.reason for issue in result.data.issues}


@pytest.mark.unit
class TestValidateSet:
    def test_valid_payload(self, set_payload):
        result = validate_set(set_payload)

        assert result.is_success
        assert isinstance(result.data, ScryfallSet)
        assert result.data.code == "tla"
        assert result.data.card_count == 358
        assert result.data.released_at == "2025-11-21"

    def test_optional_fields_may_be_absent(self, set_payload):
        for name in ("mtgo_code", "arena_code", "tcgplayer_id"):
            set_payload.pop(name)

        result = validate_set(set_payload)

        assert result.is_success
        assert result.data.tcgplayer_id is None

    def test_optional_fields_reject_null(self, set_payload_factory):
        result = validate_set(
            set_payload_factory(mtgo_code=None, arena_code=None, tcgplayer_id=None)
        )

        assert not result.is_success
        issues = {issue.path: issue.reason for issue in result.data.issues}
        assert issues == {
            "mtgo_code": "invalid_value",
            "arena_code": "invalid_value",
            "tcgplayer_id": "invalid_value",
        }

    def test_missing_required_field(self, set_payload):
        del set_payload["card_count"]

        result = validate_set(set_payload)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_SCHEMA"
        assert _reasons(result) == {"card_count": "missing"}

    def test_wrong_object_literal(self, set_payload_factory):
        result = validate_set(set_payload_factory(object="card"))

        assert _reasons(result) == {"object": "wrong_type"}

    def test_no_type_coercion(self, set_payload_factory):
        result = validate_set(set_payload_factory(card_count="358", digital="false"))

        assert _reasons(result) == {"card_count": "wrong_type", "digital": "wrong_type"}

    def test_pattern_mismatches(self, set_payload_factory):
        result = validate_set(
            set_payload_factory(id="not-a-uuid", released_at="Nov 21 2025")
        )

        assert _reasons(result) == {
            "id": "pattern_mismatch",
            "released_at": "pattern_mismatch",
        }

    def test_unexpected_field_rejected(self, set_payload_factory):
        result = validate_set(set_payload_factory(block_code="xyz"))

        assert _reasons(result) == {"block_code": "unexpected_field"}

    @pytest.mark.parametrize(
        "overrides,path",
        [
            ({"code": "ab"}, "code"),
            ({"code": "abcdef"}, "code"),
            ({"name": ""}, "name"),
            ({"card_count": -1}, "card_count"),
            ({"tcgplayer_id": 0}, "tcgplayer_id"),
            ({"uri": "/sets/tla"}, "uri"),
            ({"icon_svg_uri": "ftp://svgs.scryfall.io/tla.svg"}, "icon_svg_uri"),
        ],
    )
    def test_invalid_values(self, set_payload_factory, overrides, path):
        result = validate_set(set_payload_factory(**overrides))

        assert not result.is_success
        assert _reasons(result) == {path: "invalid_value"}

    def test_reports_every_failing_field(self, set_payload):
        del set_payload["name"]
        set_payload["card_count"] = "many"
        set_payload["extra"] = True

        result = validate_set(set_payload)

        assert len(result.data.issues) == 3

    def test_non_object_payload(self):
        result = validate_set(["not", "a", "set"])

        assert not result.is_success
        assert result.data.issues[0].reason == "wrong_type"


@pytest.mark.unit
class TestValidateSetJson:
    def test_valid_json(self, set_payload):
        result = validate_set_json(json.dumps(set_payload))

        assert result.is_success
        assert result.data.name == "Avatar: The Last Airbender"

    def test_invalid_json(self):
        result = validate_set_json("{not json")

        assert result.error_code == "INVALID_SCHEMA"
        assert result.data.issues[0].path == ""
        assert result.data.issues[0].reason == "invalid_json"

    def test_empty_body(self):
        result = validate_set_json("")

        assert result.data.issues[0].reason == "invalid_json"


@pytest.mark.unit
class TestScryfallSet:
    def test_cache_json_round_trips(self, set_payload):
        record = validate_set(set_payload).data

        assert json.loads(record.to_cache_json()) == set_payload

    def test_cache_json_omits_unset_optionals(self, set_payload):
        del set_payload["arena_code"]
        record = validate_set(set_payload).data

        assert "arena_code" not in json.loads(record.to_cache_json())

    def test_frozen(self, set_payload):
        record = validate_set(set_payload).data

        with pytest.raises(ValidationError):
            record.card_count = 1


@pytest.mark.unit
class TestSchemaValidationError:
    def test_summary_and_dict(self):
        error = SchemaValidationError(
            issues=[
                FieldIssue(path="code", reason="missing", message="Field required"),
                FieldIssue(path="", reason="invalid_json", message="bad"),
            ]
        )

        assert error.summary() == (
            "code: missing (Field required); <root>: invalid_json (bad)"
        )
        assert error.to_dict()[0] == {
            "path": "code",
            "reason": "missing",
            "message": "Field required",
        }
