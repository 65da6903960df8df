"""
Logger wrapper used across hg-vendor.
"""

import logging


class VendorLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "hg_vendor") -> None:
        self.logger = logging.getLogger(name)

    def log(self, debug_message: str, level: int, sanitized_error_message: str = "") -> None:
        """
        Log the message. ``sanitized_error_message`` is appended for errors
        whose detail should surface on its own line.
        """
        debug_message = debug_message.replace("'", '"').replace("\n", " ")
        if sanitized_error_message:
            debug_message = f"{debug_message} ({sanitized_error_message})"
        self.logger.log(level=level, msg=debug_message)
