"""Domain exceptions for document-value computation."""


class InvalidAmountError(ValueError):
    """An input amount, rate or quantity violates its constraint."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
