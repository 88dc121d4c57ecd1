import pytest

from pngparse.errors import (
    BadFileError,
    InvalidDataError,
    NotImplementedFeatureError,
    PngError,
    SignatureError,
)


@pytest.mark.parametrize(
    "cls, text",
    [
        (NotImplementedFeatureError, "Not Implemented"),
        (InvalidDataError, "Invalid Data"),
        (BadFileError, "Bad File"),
        (SignatureError, "Bad Signature"),
    ],
)
def test_default_messages(cls, text):
    assert str(cls()) == text


@pytest.mark.parametrize(
    "cls, text",
    [
        (NotImplementedFeatureError, "Not Implemented"),
        (InvalidDataError, "Invalid Data"),
        (BadFileError, "Bad File"),
        (SignatureError, "Bad Signature"),
    ],
)
def test_all_derive_from_png_error(cls, text):
    with pytest.raises(PngError) as excinfo:
        raise cls()
    assert type(excinfo.value) is cls
    assert str(excinfo.value) == text


def test_custom_message_overrides_default():
    assert str(InvalidDataError("broken block")) == "broken block"