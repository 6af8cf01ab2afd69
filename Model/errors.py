# Model/errors.py
# Exception hierarchy shared by the model, the client and the renderer.


class CanvasError(Exception):
    """Base class for all errors raised by this application."""


class RenderSurfaceError(CanvasError):
    # The canvas or its painter could not be obtained - drawing cannot continue.
    pass


class CampusClientError(CanvasError):
    """Base class for failures while talking to the path server."""


class TransportError(CampusClientError):
    # Non-200 status or a network failure.
    pass


class PayloadDecodeError(CampusClientError):
    # The server answered, but the payload does not have the expected shape.
    pass
