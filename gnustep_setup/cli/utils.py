"""CLI utility functions."""


def sanitize_terminal_input(text: str) -> str:
    """Remove surrogate characters that can't be encoded as UTF-8.

    Terminal input can sometimes contain surrogate characters (U+D800 to U+DFFF)
    due to encoding issues. These characters are invalid in UTF-8 and would
    end up in the run log.
    """
    return text.encode("utf-8", "ignore").decode("utf-8")


def is_yes(answer: str) -> bool:
    """Only an answer starting with y or Y counts as yes."""
    return sanitize_terminal_input(answer).strip()[:1] in ("y", "Y")
