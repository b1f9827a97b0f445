"""
Errors raised while decoding hex input.

Both kinds are detected before any hashing starts, so the permutation and
sponge never see malformed input.
"""


class InvalidArgument(ValueError):
    kind = "InvalidArgument"
    reason = "invalid argument"

    def __init__(self, detail=""):
        self.detail = detail
        message = f"{self.reason}: {detail}" if detail else self.reason
        super().__init__(message)

    def __reduce__(self):
        # args holds the formatted message, not the constructor arguments
        return type(self), (self.detail,)


class InvalidLength(InvalidArgument):
    """The hex text has an odd number of characters."""

    kind = "InvalidLength"
    reason = "odd-length input"


class InvalidCharacter(InvalidArgument):
    """The hex text contains something other than 0-9, a-f or A-F."""

    kind = "InvalidCharacter"
    reason = "non-hex character"

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"{char!r} at position {position}")

    def __reduce__(self):
        return type(self), (self.char, self.position)
