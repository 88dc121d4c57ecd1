"""Exceptions raised while loading PNG images."""


class PngError(Exception):
    """Base class for all PNG loading errors."""

    message = "PNG Error"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.message)


class NotImplementedFeatureError(PngError):
    """The file uses a feature the decoder does not support."""

    message = "Not Implemented"


class InvalidDataError(PngError):
    """The compressed or structural data is malformed."""

    message = "Invalid Data"


class BadFileError(PngError):
    """The file could not be opened or read."""

    message = "Bad File"


class SignatureError(PngError):
    """The file does not start with the PNG signature."""

    message = "Bad Signature"