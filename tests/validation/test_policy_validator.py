import copy
import json

import pytest

from policy_validator import ErrorCode, PolicyValidator, check_limit, normalize_policy


@pytest.fixture
def validator():
    return PolicyValidator()


def _codes(report):
    return [e.code for e in report.errors]


def test_valid_policy_text(validator, s3_ec2_policy):
    report = validator.validate(json.dumps(s3_ec2_policy))

    assert report.is_valid
    assert report.errors == []
    assert report.warnings == []
    assert report.policy is not None
    assert len(report.policy.statements) == 5
    assert report.policy.version == "2012-10-17"


def test_valid_policy_dict_and_bytes(validator, s3_ec2_policy):
    assert validator.validate(s3_ec2_policy).is_valid
    assert validator.validate(json.dumps(s3_ec2_policy).encode("utf-8")).is_valid


def test_invalid_json_is_fail_fast(validator):
    report = validator.validate('{"Version": "2012-10-17", "Statement": [')

    assert not report.is_valid
    assert _codes(report) == [ErrorCode.JSON_INVALID]
    assert report.policy is None


def test_top_level_must_be_object(validator):
    report = validator.validate("[1, 2, 3]")

    assert _codes(report) == [ErrorCode.SCHEMA_VIOLATION]
    assert report.errors[0].path == "/"


def test_version_must_be_string(validator):
    report = validator.validate({"Version": 2012, "Statement": [{"Effect": "Allow"}]})

    assert _codes(report) == [ErrorCode.SCHEMA_VIOLATION]
    assert report.errors[0].path == "/Version"


def test_statement_items_must_be_objects(validator):
    report = validator.validate({"Version": "2012-10-17", "Statement": ["s3:GetObject"]})

    assert ErrorCode.SCHEMA_VIOLATION in _codes(report)
    assert report.errors[0].path.startswith("/Statement")


@pytest.mark.parametrize("doc", [
    {"Statement": [{"Effect": "Allow"}]},
    {"Version": "", "Statement": [{"Effect": "Allow"}]},
])
def test_missing_version(validator, doc):
    report = validator.validate(doc)

    assert _codes(report) == [ErrorCode.VERSION_MISSING]
    assert report.errors[0].path == "/Version"
    assert report.policy is None


@pytest.mark.parametrize("doc", [
    {"Version": "2012-10-17"},
    {"Version": "2012-10-17", "Statement": []},
])
def test_empty_statements(validator, doc):
    report = validator.validate(doc)

    assert _codes(report) == [ErrorCode.STATEMENT_EMPTY]


def test_missing_version_and_statements_reported_together(validator):
    report = validator.validate({})

    assert _codes(report) == [ErrorCode.VERSION_MISSING, ErrorCode.STATEMENT_EMPTY]


def test_single_statement_object_is_accepted(validator):
    report = validator.validate({"Version": "2012-10-17", "Statement": {"Effect": "Deny", "Action": "*"}})

    assert report.is_valid
    assert report.policy.statements == [{"Effect": "Deny", "Action": "*"}]


def test_unknown_version_is_a_warning(validator):
    report = validator.validate({"Version": "2020-01-01", "Statement": [{"Effect": "Allow"}]})

    assert report.is_valid
    assert len(report.warnings) == 1
    assert "2020-01-01" in report.warnings[0]


def test_effect_problems_are_warnings(validator):
    report = validator.validate({
        "Version": "2012-10-17",
        "Statement": [{"Action": "*"}, {"Effect": "Maybe"}, {"Effect": "Allow"}],
    })

    assert report.is_valid
    assert len(report.warnings) == 2
    assert "Statement[0]" in report.warnings[0]
    assert "Maybe" in report.warnings[1]


def test_unserializable_statement(validator):
    report = validator.validate({
        "Version": "2012-10-17",
        "Statement": [{"Effect": "Allow"}, {"Effect": "Allow", "Condition": float("nan")}],
    })

    assert _codes(report) == [ErrorCode.STATEMENT_NOT_SERIALIZABLE]
    assert report.errors[0].path == "/Statement/1"
    assert report.errors[0].details == {"index": 1}


def test_id_is_carried_to_policy(validator):
    report = validator.validate({"Version": "2012-10-17", "Id": "doc-1", "Statement": [{"Effect": "Allow"}]})

    assert report.policy.id == "doc-1"


def test_null_id_means_no_id(validator):
    report = validator.validate('{"Version":"2012-10-17","Id":null,"Statement":[{"Effect":"Allow"}]}')

    assert report.is_valid
    assert report.policy.id is None
    assert "Id" not in report.policy.to_dict()


def test_non_utf8_bytes_are_invalid_json(validator):
    report = validator.validate(b'{"Sid":"\xff"}')

    assert _codes(report) == [ErrorCode.JSON_INVALID]
    assert report.errors[0].path == "/"


def test_deeply_nested_json_is_invalid_json(validator):
    depth = 100_000

    report = validator.validate("[" * depth + "]" * depth)

    assert _codes(report) == [ErrorCode.JSON_INVALID]


def test_lone_surrogate_is_not_serializable(validator):
    report = validator.validate(
        r'{"Version":"2012-10-17","Statement":[{"Effect":"Allow"},{"Sid":"\ud800","Effect":"Allow"}]}'
    )

    assert _codes(report) == [ErrorCode.STATEMENT_NOT_SERIALIZABLE]
    assert report.errors[0].path == "/Statement/1"


def test_validate_does_not_mutate_input(validator):
    doc = {"Version": "2012-10-17", "Statement": {"Effect": "Allow"}}
    before = copy.deepcopy(doc)

    validator.validate(doc)

    assert doc == before


@pytest.mark.parametrize("limit", [0, -1, -6144, True, "6144", 10.5, None])
def test_check_limit_rejects(limit):
    errors = check_limit(limit)

    assert len(errors) == 1
    assert errors[0].code == ErrorCode.LIMIT_NOT_POSITIVE


@pytest.mark.parametrize("limit", [1, 2048, 6144])
def test_check_limit_accepts(limit):
    assert check_limit(limit) == []


def test_normalize_policy_wraps_statement_and_copies():
    stmt = {"Effect": "Allow", "Action": ["s3:GetObject"]}
    doc = {"Version": "2012-10-17", "Statement": stmt}

    out = normalize_policy(doc)

    assert out["Statement"] == [stmt]
    assert out["Statement"][0] is not stmt
    assert doc["Statement"] is stmt
