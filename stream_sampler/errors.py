class StreamSamplerError(Exception):
    """Base class for all errors raised by the sampler."""


class InvalidArgument(StreamSamplerError, ValueError):
    """A size, seed or other configuration value is outside its valid domain."""


class ReadFailure(StreamSamplerError, RuntimeError):
    """The input source faulted while it was being read. The original error is chained."""


class InvariantViolation(StreamSamplerError, RuntimeError):
    """Internal consistency check failed, e.g. a malformed frequency table."""
