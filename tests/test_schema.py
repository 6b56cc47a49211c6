import copy

import pytest
from jsonschema import ValidationError

from aria_ingestor import AriaSpecIngestor
from schema import check_references, validate_data

from conftest import ref


@pytest.fixture
def data(alert_document, quiet_logger):
    return AriaSpecIngestor(logger=quiet_logger).parse(alert_document).to_dict()


def test_extracted_data_is_valid(data):
    assert validate_data(data) is data
    assert check_references(data) is data


def test_missing_top_level_key_is_rejected(data):
    del data["attributes"]
    with pytest.raises(ValidationError, match="'attributes' is a required property"):
        validate_data(data)


def test_extra_top_level_key_is_rejected(data):
    data["extra"] = {}
    with pytest.raises(ValidationError):
        validate_data(data)


def test_error_message_names_the_path(data):
    data["roles"][ref("alert")]["name"] = None
    with pytest.raises(ValidationError) as excinfo:
        validate_data(data)
    assert f"data.roles['{ref('alert')}'].name" in excinfo.value.message


def test_missing_abstract_is_rejected(data):
    del data["roles"][ref("alert")]["abstract"]
    with pytest.raises(ValidationError, match="'abstract' is a required property"):
        validate_data(data)


def test_description_may_be_null(data):
    data["roles"][ref("alert")]["description"] = None
    data["valueTypes"][ref("valuetype_token")]["description"] = None
    validate_data(data)


def test_values_may_be_absent_but_rows_are_strict(data):
    live = data["attributes"][ref("live")]
    without = copy.deepcopy(data)
    del without["attributes"][ref("live")]["values"]
    validate_data(without)

    del live["values"][0]["isDefault"]
    with pytest.raises(ValidationError, match="isDefault"):
        validate_data(data)


def test_values_must_be_a_list(data):
    data["attributes"][ref("live")]["values"] = "off"
    with pytest.raises(ValidationError):
        validate_data(data)


def test_dangling_superclass_is_rejected(data):
    data["roles"][ref("alert")]["superClassRoles"] = [ref("section")]
    with pytest.raises(ValidationError) as excinfo:
        check_references(data)
    assert list(excinfo.value.absolute_path) == ["roles", ref("alert"), "superClassRoles", 0]
    assert "does not resolve to an entry in roles" in excinfo.value.message


def test_dangling_role_attribute_is_rejected(data):
    data["roles"][ref("alert")]["attributes"].append(ref("relevant"))
    with pytest.raises(ValidationError, match="attributes\\[2\\]"):
        check_references(data)


def test_dangling_value_type_is_rejected(data):
    data["attributes"][ref("atomic")]["valueType"] = ref("valuetype_number")
    with pytest.raises(ValidationError, match="valueTypes"):
        check_references(data)
