"""Constants and configuration for the late editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Buffer rendering
    TAB_SIZE = 4  # Spaces shown for each tab character
    NEWLINE = "\n"

    # Screen layout
    STATUS_BAR_ROWS = 1  # File name / line counter at the top
    MESSAGE_ROWS = 1  # Prompt and status message line at the bottom
    DEFAULT_WIDTH = 80
    DEFAULT_HEIGHT = 24
    EMPTY_ROW_MARKER = "~"

    # Keyword files
    KEYWORD_DIR_NAME = "markup"  # Directory holding <extension>.txt files
    KEYWORD_FILE_SUFFIX = ".txt"

    # File operations
    UNTITLED_NAME = "[No Name]"

    # Status messages
    WELCOME_MESSAGE = "Welcome to LATE - Version {}"
    HELP_MESSAGE = "Ctrl-S to save | Ctrl-Q to quit"
    SAVE_PROMPT = "Save As: "
    UNSAVED_CHANGES_MESSAGE = "Unsaved changes! Press Ctrl-Q again to quit."
