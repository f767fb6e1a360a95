"""Error types raised by the zipout pipeline.

Key distinction:
- ConfigurationError: bad input selection (unknown format tag, bad path)
- MissingKeyError: a snapshot lacks a key the pipeline needs
- ShapeMismatchError: a field does not fit the coordinate grid
- ContractViolation: a stage broke its promised invariants (pipeline bug)
"""


class ZipoutError(Exception):
    """Base class for all zipout errors."""
    pass


class ConfigurationError(ZipoutError, ValueError):
    """Raised when the pipeline is asked to do something it cannot."""
    pass


class UnsupportedFormatError(ConfigurationError):
    """Raised for a snapshot format tag with no registered reader."""

    def __init__(self, tag, supported=()):
        self.tag = tag
        self.supported = tuple(supported)
        msg = f"Unsupported snapshot format: {tag!r}"
        if self.supported:
            msg += f" (supported: {', '.join(self.supported)})"
        super().__init__(msg)


class MissingKeyError(ZipoutError, KeyError):
    """Raised when a snapshot does not hold a requested variable."""

    def __init__(self, key, path=None):
        self.key = key
        self.path = path
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Variable '{key}' not found{where}")

    def __str__(self):
        # KeyError.__str__ repr()s the message
        return self.args[0]


class ShapeMismatchError(ZipoutError, ValueError):
    """Raised when a field's shape does not match the coordinate grid."""

    def __init__(self, name, shape, expected, path=None):
        self.name = name
        self.shape = tuple(shape)
        self.expected = tuple(expected)
        self.path = path
        where = f" in {path}" if path is not None else ""
        super().__init__(
            f"Variable '{name}' has shape {self.shape}{where}, expected {self.expected}"
        )


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in pipeline logic, not bad input. It means a
    pipeline stage did not produce the invariants it promised.
    """
    pass
