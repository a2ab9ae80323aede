"""Exception types raised by recolor."""


class RecolorError(Exception):
    """Base class for recolor errors."""


class InvalidColorError(RecolorError, ValueError):
    """Raised when text is not a 6-digit hex color."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid hex color: {text!r} (use #RRGGBB)")
        self.text = text


class UnknownChannelError(RecolorError, ValueError):
    """Raised when a channel name is not one of fg, bg or sp."""

    def __init__(self, channel: str) -> None:
        super().__init__(f"Unknown channel: {channel!r} (expected fg, bg or sp)")
        self.channel = channel
