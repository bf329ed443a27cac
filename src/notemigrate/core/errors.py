"""Exception types raised by the migration pipeline"""


class MigrationError(RuntimeError):
    """Base class for failures that abort a migration run."""


class PreconditionError(MigrationError):
    """A configured directory is missing; raised before anything is modified."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "Expecting " + ", ".join(missing) + " to exist and "
            + ("it doesn't" if len(missing) == 1 else "they don't")
        )


class DocumentError(MigrationError):
    """A single document could not be transformed."""

    def __init__(self, path, cause: Exception):
        self.path = path
        super().__init__(f"Failed to migrate {path}: {cause}")


class ContentNotFoundError(ValueError):
    """The primary content container is missing from a document."""
