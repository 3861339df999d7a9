from rulerkit.clients.errors import (
    CodecError,
    ErrNoConfig,
    ErrResourceNotFound,
    NoConfigError,
    RequestEncodeError,
    RequestFailedError,
    ResourceNotFoundError,
    ResponseDecodeError,
    RulerClientError,
)
from rulerkit.core.errors import ProviderError, RulerkitError, format_error_message


def test_sentinels_are_match_targets():
    assert ErrResourceNotFound is ResourceNotFoundError
    assert ErrNoConfig is NoConfigError


def test_default_messages():
    assert str(ResourceNotFoundError()) == "requested resource not found"
    assert str(NoConfigError()) == "no config exists for this user"


def test_hierarchy():
    for cls in (ResourceNotFoundError, NoConfigError, RequestFailedError, CodecError):
        assert issubclass(cls, RulerClientError)
    assert issubclass(RulerClientError, ProviderError)
    assert issubclass(ProviderError, RulerkitError)
    assert issubclass(RequestEncodeError, CodecError)
    assert issubclass(ResponseDecodeError, CodecError)


def test_request_failed_truncates_message_not_body():
    body = "x" * 500
    err = RequestFailedError(500, body)

    assert err.status_code == 500
    assert err.body == body
    assert len(err.message) < len(body)
    assert err.message.endswith("...")


def test_format_error_message_with_details():
    err = ResourceNotFoundError(details={"status_code": 404})
    assert format_error_message(err) == "requested resource not found (status_code=404)"


def test_format_error_message_without_details():
    assert format_error_message(RulerkitError("boom")) == "boom"


def test_request_failed_empty_body_message():
    err = RequestFailedError(500, "")

    assert err.body == ""
    assert err.message == "failed request to the ruler api (status 500)"


def test_request_failed_summary_overrides_body_in_message():
    err = RequestFailedError(502, "", summary="unable to decode body, reset")

    assert err.body == ""
    assert err.message == "failed request to the ruler api (status 502): unable to decode body, reset"
