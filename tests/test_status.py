import pytest

from storefront.status import RpcError, StatusCode


def test_standard_code_numbers():
    assert RpcError(3, "bad").code is StatusCode.INVALID_ARGUMENT
    assert RpcError(13, "boom").code is StatusCode.INTERNAL
    assert StatusCode(3) is StatusCode.INVALID_ARGUMENT
    assert StatusCode(13) is StatusCode.INTERNAL


def test_rpc_error_keeps_code_and_message():
    err = RpcError(StatusCode.NOT_FOUND, "missing thing")
    assert err.code is StatusCode.NOT_FOUND
    assert err.message == "missing thing"


def test_rpc_error_accepts_plain_int_code():
    err = RpcError(13, "boom")
    assert err.code is StatusCode.INTERNAL


def test_rpc_error_string_mentions_label_and_message():
    text = str(RpcError(StatusCode.INVALID_ARGUMENT, "bad input"))
    assert "InvalidArgument" in text
    assert text.endswith("bad input")


def test_label_of_ok_and_multiword():
    assert StatusCode(0).label == "OK"
    assert RpcError(4, "late").code.label == "DeadlineExceeded"
    assert "DeadlineExceeded" in str(RpcError(StatusCode.DEADLINE_EXCEEDED, "late"))


def test_rpc_error_is_raisable():
    err = RpcError(StatusCode.UNAVAILABLE, "down")
    with pytest.raises(RpcError) as info:
        raise err
    assert info.value is err
    assert info.value.code is StatusCode.UNAVAILABLE
    assert info.value.message == "down"


def test_invalid_code_rejected():
    with pytest.raises(ValueError):
        RpcError(99, "nope")