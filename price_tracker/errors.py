from __future__ import annotations


class PriceError(Exception):
    """Base error for a single instrument's fetch or save attempt."""

    label = "Price Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.label}: {self.detail}"


class NetworkError(PriceError):
    label = "Network Error"


class ParseError(PriceError):
    label = "Parse Error"


class FileError(PriceError):
    label = "File Error"
