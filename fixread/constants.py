"""Constants and configuration for the fixread reader."""

import os


class ReaderConstants:
    """Central configuration constants for the reader."""

    # Terminal requirements
    MIN_TERMINAL_WIDTH = 10  # Minimum columns needed to show a page
    MIN_TERMINAL_HEIGHT = 2  # One text row plus the status line

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
    RESIZE_SETTLE_DELAY = 0.05  # Seconds to wait for a burst of resize signals to end

    # Colors (blessed formatting names)
    TEXT_COLOR = "green_on_black"
    MATCH_COLOR = "blue_on_white"
    CURRENT_MATCH_COLOR = "bright_black_on_white"
    PROMPT_COLOR = "white_on_blue"

    # Search prompt
    SEARCH_PROMPT = "/ "

    # Logging
    LOG_FILE_NAME = "fixread.log"
    LOG_LEVEL = os.environ.get("FIXREAD_LOG_LEVEL", "WARNING")
    LOG_MAX_BYTES = 512 * 1024
    LOG_BACKUP_COUNT = 2

    # Status messages
    PAGE_STATUS = "Page {} of {}"
    MATCH_STATUS = "Match {} of {} for '{}'"
    PATTERN_NOT_FOUND_MESSAGE = "Pattern not found: {}"
    EMPTY_DOCUMENT_MESSAGE = "Empty document"
    TERMINAL_TOO_SMALL_MESSAGE = "Terminal too small! Need at least {}x{}."
    CURRENT_SIZE_MESSAGE = "Current size: {}x{}."
