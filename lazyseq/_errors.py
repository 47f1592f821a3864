from __future__ import annotations

class NotASequenceError(TypeError):
    """A combinator received a value that is not sequence-like."""

    code: int = 1
    value: object

    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__("Value is not a sequence")

__all__ = ("NotASequenceError",)
