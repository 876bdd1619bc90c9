"""
Exceptions for CredKDF
Every error raised by the package derives from CredKdfError so callers have a single catch point
"""


class CredKdfError(Exception):
    # general container for errors
    pass


class EntropyError(CredKdfError):
    # raised when the OS random source cannot produce a salt
    pass


class DerivationParameterError(CredKdfError, ValueError):
    # raised on bad KDF inputs (iterations, output bits, salt), programmer error
    pass


class InvalidPasswordError(DerivationParameterError):
    # raised when a password is empty or cannot be encoded as UTF-8
    pass


class EmptyPasswordError(InvalidPasswordError):
    # raised when asked to derive a key from an empty password
    pass


class InvalidEmailError(CredKdfError, ValueError):
    # raised when an email cannot be encoded as UTF-8 for the deterministic salt
    pass


class EncodingOverflowError(CredKdfError):
    # raised when an encoded credential exceeds the field ceiling (72 chars)
    pass


class MalformedCredentialError(CredKdfError, ValueError):
    # raised when a stored credential cannot be split or decoded
    pass
