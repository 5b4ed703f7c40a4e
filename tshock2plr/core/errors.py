"""Domain errors raised while turning a TShock character row into a player record."""


class ConversionError(Exception):
    """Base class for every conversion failure."""


class MalformedToken(ConversionError):
    """A single inventory token could not be decoded into an item slot."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Malformed inventory token {token!r}: {reason}")


class PrefixParseFailure(MalformedToken):
    """The prefix field of a token is not an unsigned byte."""


class RegionOutOfRange(ConversionError):
    """The flat slot sequence is too short to contain a region."""

    def __init__(self, region: str, required: int, available: int):
        self.region = region
        self.required = required
        self.available = available
        super().__init__(
            f"Inventory region '{region}' needs {required} slots but only {available} were decoded"
        )


class MissingRequiredField(ConversionError):
    """A required column of the character row is absent, NULL or of the wrong type."""

    def __init__(self, column: str, value=None):
        self.column = column
        self.value = value
        super().__init__(f"Required column '{column}' is missing or unreadable (got {value!r})")


class PlayerNotFound(ConversionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No account named '{name}'")


class UnsupportedVersion(ConversionError):
    def __init__(self, version: int, supported: range):
        self.version = version
        self.supported = supported
        super().__init__(
            f"Save file version {version} is not supported (supported: {supported.start}-{supported.stop - 1})"
        )
