from typing import Optional


class ParseError(ValueError):
    """
    Raised when a color or gradient string does not match any accepted grammar.

    Attributes:
        token: the offending fragment of the input
        text: the full input string, when known
    """

    def __init__(self, message: str, token: Optional[str] = None, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.token = token
        self.text = text

    def __str__(self) -> str:
        message = super().__str__()
        if self.token is not None and self.token not in message:
            return f"{message} (at {self.token!r})"
        return message
