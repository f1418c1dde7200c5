"""Domain errors raised by the rate graph converter."""


class ConversionError(Exception):
    pass


class NoConversionPathError(ConversionError):
    """No chain of rates leads from ``from_currency`` to ``to_currency``."""

    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(
            f"Cannot find a conversion path from {from_currency} to {to_currency}"
        )
