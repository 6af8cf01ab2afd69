"""
Configuration & Path Management
===============================
Central registry for file paths and global constants.

It keeps asset paths out of the rest of the code and resolves them both when
running from the source tree and when frozen with PyInstaller (sys._MEIPASS).

Exports:
    RESOURCES_PATH (str): Absolute path to the Resources directory.
    CAMPUS_MAP_PATH (str): Background image of the campus paths canvas.
    DOTS_BACKGROUND_PATH (str): Background image of the connect-the-dots canvas.
    SERVER_URL (str): Base URL of the path server (env CAMPUSPATHS_SERVER_URL).
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py lives in the project root
    project_root: Path = Path(__file__).resolve().parent
    return os.path.join(str(project_root), relative_path)


# Assets
RESOURCES_PATH: str = get_resource_path("Resources")
CAMPUS_MAP_PATH: str = os.path.join(RESOURCES_PATH, "campus_map.jpg")
DOTS_BACKGROUND_PATH: str = os.path.join(RESOURCES_PATH, "image.jpg")

# Path server
SERVER_URL: str = os.environ.get("CAMPUSPATHS_SERVER_URL", "http://localhost:4567")
HTTP_TIMEOUT: float = 10.0

# Canvas
CANVAS_SIZE: int = 500
DEFAULT_GRID_SIZE: int = 4
GRID_SIZE_RANGE: tuple[int, int] = (1, 200)

# Path overlay styling (pixels / color names understood by QColor)
PATH_LINE_WIDTH: float = 7.0
MARKER_RADIUS: float = 7.0
JUNCTION_COLOR: str = "blue"
SOURCE_COLOR: str = "lawngreen"
DESTINATION_COLOR: str = "red"
DOT_COLOR: str = "white"
