class LinkHubError(Exception):
    """Base class for errors raised by the list and engagement services."""


class NotFound(LinkHubError):
    pass


class InvalidShape(LinkHubError):
    """Request body matches none of the accepted payload variants."""

    def __init__(self, keys):
        self.keys = sorted(keys)
        super().__init__(f"unexpected payload keys: {self.keys}")


class NoContent(LinkHubError):
    """Nothing to return; carries a message meant for the end user."""


class InternalError(LinkHubError):
    pass
