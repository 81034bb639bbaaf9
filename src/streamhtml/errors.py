class TagProtocolError(Exception):
    """Raised when structural calls arrive out of order.

    Examples: writing text while a start tag is still waiting for
    ``finalize_tag()``, finalizing the same tag twice, or closing a tag
    that was never opened.
    """

    def __init__(self, code, message=None, *, tag_name=None):
        self.code = code
        self.message = message or code
        self.tag_name = tag_name
        super().__init__(self.message)

    def __repr__(self):
        if self.tag_name is not None:
            return f"TagProtocolError({self.code!r}, tag_name={self.tag_name!r})"
        return f"TagProtocolError({self.code!r})"

    def __str__(self):
        if self.tag_name is not None:
            if self.message != self.code:
                return f"<{self.tag_name}>: {self.code} - {self.message}"
            return f"<{self.tag_name}>: {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code
