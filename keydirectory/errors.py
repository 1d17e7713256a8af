"""Typed failures raised by the keyspace and the key deriver."""


class KeyDirectoryError(ValueError):
    """Base class for every recoverable keydirectory failure"""


class MalformedInput(KeyDirectoryError):
    """Text does not parse as a number or as a Base58Check string"""


class OutOfRange(KeyDirectoryError):
    """Index or page number outside the valid domain"""


class ChecksumMismatch(KeyDirectoryError):
    """Base58Check payload does not match its checksum"""
