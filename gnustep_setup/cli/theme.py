"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for the gnustep-setup CLI."""

    # -------------------------------------------------------------------------
    # Status colors
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    WARNING = "yellow"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    DIM = "grey62"
    PROMPT = "cyan"

    # -------------------------------------------------------------------------
    # Progress line
    # -------------------------------------------------------------------------
    SPINNER = "cyan"
    SPINNER_DONE = "green"

    # -------------------------------------------------------------------------
    # Report table
    # -------------------------------------------------------------------------
    TABLE_SECTION = "bold magenta"
    TABLE_SUBJECT = "cyan"
    TABLE_DETAIL = "white"

    # -------------------------------------------------------------------------
    # Panel borders
    # -------------------------------------------------------------------------
    BORDER_ERROR = "red"


# Default theme instance - import this in other modules
theme = Theme()
