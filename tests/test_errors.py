import pytest

import core.errors as errors


@pytest.mark.parametrize("name", errors.__all__)
def test_every_error_documents_itself(name):
    cls = getattr(errors, name)

    assert issubclass(cls, errors.SkyError)
    assert (cls.__doc__ or "").strip()


def test_timeout_is_both_transport_and_builtin_timeout():
    exc = errors.RequestTimeoutError("deadline exceeded")

    assert isinstance(exc, errors.TransportError)
    assert isinstance(exc, TimeoutError)


def test_status_and_not_found_messages():
    assert str(errors.RemoteStatusError(503)) == "API returned status 503"
    assert errors.RemoteStatusError(503).status_code == 503
    assert str(errors.NotFoundError()) == "location not found"
