# ABOUTME: Debug logging helper gated on the DEBUG environment flag
# ABOUTME: Prints tagged lines to stdout so they show up in container logs

from discwind.config import Config


def debug_log(message: str, category: str = "APP") -> None:
    """
    Print a debug line when DEBUG mode is on.

    Args:
        message: Text to print
        category: Short tag identifying the component (e.g. "WEATHER")
    """
    if Config.DEBUG:
        print(f"[DEBUG][{category}] {message}", flush=True)
