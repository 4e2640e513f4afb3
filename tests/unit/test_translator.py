"""Unit tests for the failure-kind to API error mapping."""

from __future__ import annotations

import json

import pytest

from meetups.core.error_codes import ApiErrorCode
from meetups.core.failures import ArgumentNotValid
from meetups.core.failures import ArgumentTypeMismatch
from meetups.core.failures import BadCredentials
from meetups.core.failures import ConstraintViolation
from meetups.core.failures import DuplicateEntity
from meetups.core.failures import EmptyConflictListError
from meetups.core.failures import EntityNotFound
from meetups.core.failures import FieldError
from meetups.core.failures import MediaTypeNotSupported
from meetups.core.failures import MessageNotReadable
from meetups.core.failures import MethodNotSupported
from meetups.core.failures import MissingParameter
from meetups.core.failures import NoHandlerFound
from meetups.core.failures import Unhandled
from meetups.core.failures import ValueNotAllowed
from meetups.core.failures import Violation
from meetups.core.translator import INTERNAL_ERROR
from meetups.core.translator import INTERNAL_MESSAGE
from meetups.core.translator import translate
from meetups.schemas.error import ApiError

REPRESENTATIVE_FAILURES = [
    (MethodNotSupported("PUT", ("GET", "POST")), 405, "METHOD_NOT_ALLOWED"),
    (MediaTypeNotSupported("text/plain", ("application/json",)), 415, "UNSUPPORTED_MEDIA_TYPE"),
    (ArgumentNotValid((FieldError("name", "must not be blank"),)), 400, "BAD_REQUEST"),
    (MissingParameter("owner_id"), 400, "BAD_REQUEST"),
    (MessageNotReadable("Unexpected character ('x')"), 400, "BAD_REQUEST"),
    (ConstraintViolation((Violation("day", "must be a future date"),)), 409, "CONFLICT"),
    (ArgumentTypeMismatch("meetup_id", "int"), 400, "BAD_REQUEST"),
    (BadCredentials("Bad credentials"), 401, "UNAUTHORIZED"),
    (EntityNotFound("Meetup", 7), 400, "BAD_REQUEST"),
    (DuplicateEntity("User", ("alice@example.com",), ("email",)), 409, "CONFLICT"),
    (ValueNotAllowed("check_in", "true", "the user is already checked in"), 409, "CONFLICT"),
    (NoHandlerFound("GET", "/nowhere"), 404, "NOT_FOUND"),
    (Unhandled(), 500, "INTERNAL_SERVER_ERROR"),
]


@pytest.mark.parametrize(("failure", "expected_status", "expected_name"), REPRESENTATIVE_FAILURES)
def test_each_failure_kind_maps_to_its_status(failure, expected_status: int, expected_name: str) -> None:
    status_code, api_error = translate(failure)

    assert status_code == expected_status
    assert api_error.status == expected_name


def test_codes_are_unique_per_kind_and_stable() -> None:
    first = [translate(failure)[1].code for failure, _, _ in REPRESENTATIVE_FAILURES]
    second = [translate(failure)[1].code for failure, _, _ in REPRESENTATIVE_FAILURES]

    assert first == second
    assert len(set(first)) == len(first)


def test_same_kind_with_different_data_keeps_code_and_status() -> None:
    status_a, error_a = translate(EntityNotFound("Meetup", 1))
    status_b, error_b = translate(EntityNotFound("User", 99))

    assert (status_a, error_a.code) == (status_b, error_b.code) == (400, ApiErrorCode.ENTITY_NOT_FOUND)
    assert error_a.message != error_b.message


def test_argument_not_valid_lists_fields_then_objects_in_order() -> None:
    failure = ArgumentNotValid(
        field_errors=(
            FieldError("name", "must not be blank"),
            FieldError("email", "invalid format"),
        ),
        object_errors=(FieldError("body", "passwords do not match"),),
    )

    status_code, api_error = translate(failure)

    assert status_code == 400
    assert api_error.code == ApiErrorCode.METHOD_ARGUMENT_NOT_VALID
    assert api_error.message == "Invalid arguments: name email body"
    assert api_error.errors == [
        "name: must not be blank",
        "email: invalid format",
        "body: passwords do not match",
    ]


def test_constraint_violation_keeps_every_violation() -> None:
    failure = ConstraintViolation(
        (
            Violation("owner_id", "must be greater than 0"),
            Violation("day", "must be a future date"),
        )
    )

    status_code, api_error = translate(failure)

    assert status_code == 409
    assert api_error.message == "Invalid arguments: owner_id day"
    assert api_error.errors == ["owner_id: must be greater than 0", "day: must be a future date"]


def test_method_not_supported_names_method_and_alternatives() -> None:
    _, api_error = translate(MethodNotSupported("DELETE", ("GET", "POST")))

    assert api_error.message == "Unsupported HTTP method"
    assert api_error.errors == ["DELETE method is not supported for this request. Supported methods are GET POST"]


def test_media_type_not_supported_names_content_type() -> None:
    _, api_error = translate(MediaTypeNotSupported("text/plain", ("application/json", "application/merge-patch+json")))

    assert api_error.message == "Unsupported media type"
    assert api_error.errors == [
        "text/plain media type is not supported. "
        "Supported media types are application/json, application/merge-patch+json"
    ]


def test_missing_parameter_detail() -> None:
    _, api_error = translate(MissingParameter("owner_id"))

    assert api_error.message == "Parameter missing"
    assert api_error.errors == ["owner_id parameter is missing"]


def test_unreadable_body_keeps_first_token_only() -> None:
    _, api_error = translate(MessageNotReadable("Unexpected character ('x')"))

    assert api_error.message == "Invalid body"
    assert api_error.errors == ["Unexpected"]


def test_unreadable_body_without_cause_renders_empty_detail() -> None:
    _, api_error = translate(MessageNotReadable("   "))

    assert api_error.errors == [""]


def test_type_mismatch_keeps_legacy_message_spacing() -> None:
    _, api_error = translate(ArgumentTypeMismatch("meetup_id", "int"))

    assert api_error.message == "Invalid meetup_idargument type"
    assert api_error.errors == ["meetup_id should be of type int"]


def test_type_mismatch_without_type_renders_unknown() -> None:
    _, api_error = translate(ArgumentTypeMismatch("meetup_id"))

    assert api_error.errors == ["meetup_id should be of type unknown"]


def test_bad_credentials_detail_is_trimmed() -> None:
    status_code, api_error = translate(BadCredentials("  Wrong password  "))

    assert status_code == 401
    assert api_error.message == "Bad credentials"
    assert api_error.errors == ["Wrong password"]


def test_entity_not_found_detail() -> None:
    _, api_error = translate(EntityNotFound("Meetup", 42))

    assert api_error.message == "Meetup was not found"
    assert api_error.errors == ["Meetup was not found for parameter 42"]


def test_duplicate_entity_single_value() -> None:
    _, api_error = translate(DuplicateEntity("User", ("alice@example.com",), ("email",)))

    assert api_error.message == "User already exists"
    assert api_error.errors == ["{alice@example.com} already exists. Select another {email}"]


def test_duplicate_entity_several_values() -> None:
    _, api_error = translate(DuplicateEntity("Enrollment", (3, 8), ("meetup_id", "user_id")))

    assert api_error.errors == ["{3, 8} already exists. Select another {meetup_id, user_id}"]


@pytest.mark.parametrize(
    ("values", "unique_fields"),
    [((), ("email",)), (("alice@example.com",), ())],
)
def test_duplicate_entity_rejects_empty_conflict_lists(values: tuple, unique_fields: tuple) -> None:
    with pytest.raises(EmptyConflictListError):
        DuplicateEntity("User", values, unique_fields)


def test_value_not_allowed_detail() -> None:
    status_code, api_error = translate(ValueNotAllowed("check_in", "true", "the user is already checked in"))

    assert status_code == 409
    assert api_error.message == "Value not allowed"
    assert api_error.errors == ["The check_in {true} is not allowed because the user is already checked in"]


def test_unhandled_never_exposes_cause() -> None:
    status_code, api_error = translate(Unhandled(cause=RuntimeError("password=hunter2")))

    assert status_code == 500
    assert api_error.code == ApiErrorCode.INTERNAL
    assert api_error.message == INTERNAL_MESSAGE
    assert api_error.errors == [INTERNAL_ERROR]
    assert "hunter2" not in api_error.model_dump_json()


@pytest.mark.parametrize("failure", [None, "oops", 42, ValueError("boom")])
def test_unknown_values_fall_through_to_internal_error(failure: object) -> None:
    status_code, api_error = translate(failure)

    assert status_code == 500
    assert api_error.code == ApiErrorCode.INTERNAL


def test_api_error_round_trips_through_json() -> None:
    _, api_error = translate(
        ArgumentNotValid((FieldError("name", "must not be blank"), FieldError("email", "invalid format")))
    )

    restored = ApiError.model_validate(json.loads(api_error.model_dump_json()))

    assert restored == api_error
    assert restored.errors == ["name: must not be blank", "email: invalid format"]


def test_list_constructor_does_not_trim_entries() -> None:
    from http import HTTPStatus

    api_error = ApiError.of(1, HTTPStatus.BAD_REQUEST, "msg", [" padded "])

    assert api_error.errors == [" padded "]
    assert ApiError.single(1, HTTPStatus.BAD_REQUEST, "msg", " padded ").errors == ["padded"]
