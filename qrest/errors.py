class QrestError(Exception):
    """Base class for errors raised by the document store."""


class NotFound(QrestError):
    """Collection or record absent."""


class BadRequest(QrestError):
    """Request payload is malformed or not a JSON object."""


class CodecError(BadRequest, ValueError):
    """JSON text could not be decoded, or a value could not be encoded."""


class SerializationFailure(QrestError):
    """The in-memory document could not be encoded for a snapshot."""


class IOFailure(QrestError):
    """The snapshot could not be written to the backing file."""


class LoadError(QrestError):
    """The backing file is missing or does not hold a valid document."""


class IdExhausted(BadRequest):
    """The collection's highest id is already the largest 64-bit integer."""
