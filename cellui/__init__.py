"""Layout containers and widgets that draw into an in-memory cell screen."""

__version__ = "0.1.0"

__all__ = [
    "boxchars",
    "frame",
    "grid",
    "gridlayout",
    "listmodel",
    "listview",
    "pages",
    "primitive",
    "semigraphics",
]