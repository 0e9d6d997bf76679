"""Constants for catalog translations."""

# Sentinel category used for catalog values that are plain strings
FLAT_CATEGORY = "flat"

# Placeholder protection, e.g. "Hello {$name}" -> "Hello <x>{$name}</x>"
PLACEHOLDER_TAG = "x"
PLACEHOLDER_TAG_HANDLING = "xml"

# DeepL reports English only as regional variants on the target side
DEFAULT_ENGLISH_TARGET = "en-US"

# Formality value sent for informal locales
INFORMAL_FORMALITY = "less"
INFORMAL_MEMORY_SUFFIX = "-informal"

# Files
DEFAULT_JSON_INDENT = 2
CATALOG_FILE_EXTENSION = ".json"
DEFAULT_MEMORY_FILENAME = ".translation-memory.json"

# Context lookup
DEFAULT_CONTEXT_EXTENSIONS = [
    ".html",
    ".js",
    ".jsx",
    ".py",
    ".svelte",
    ".ts",
    ".tsx",
    ".vue",
]
DEFAULT_CONTEXT_EXCLUDED_DIRS = [
    ".git",
    ".venv",
    "__pycache__",
    "build",
    "dist",
    "node_modules",
]
CONTEXT_LINES_AROUND = 2
MAX_CONTEXT_LENGTH = 1000

MAX_LOG_STRING_LENGTH = 50
