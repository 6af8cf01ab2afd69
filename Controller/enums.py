from enum import Enum, auto

# Which canvas a piece of state belongs to
class PanelId(str, Enum):
    DOTS = "dots"
    CAMPUS = "campus"

# The two kinds of server requests - each has its own generation counter
class RequestKind(Enum):
    BUILDINGS = auto()
    PATH = auto()
