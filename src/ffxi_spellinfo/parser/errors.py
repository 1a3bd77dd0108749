"""The one failure category raised while walking a spell/ability DAT."""


class StructuralMismatch(ValueError):
    """Framing or record content did not match the expected layout.

    Subclasses ValueError so callers that already catch BinaryReader
    overruns handle both the same way.
    """

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        expected: object = None,
        actual: object = None,
    ) -> None:
        super().__init__(message)
        self.offset = offset
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        msg = super().__str__()
        if self.expected is not None or self.actual is not None:
            msg = f"{msg} (expected {self.expected!r}, got {self.actual!r})"
        if self.offset is not None:
            msg = f"{msg} at offset {self.offset:#x}"
        return msg
