APP_ORG = "PyNotes"
APP_NAME = "Notes"

NOTES_DIR_NAME = "Notes"
PLACEHOLDER_NAME = "New note"

WELCOME_NOTE_NAME = "First note.html"
WELCOME_TEXT = (
    "Welcome to Notes!\n\n"
    "This is your first note. You can edit this text or create a new note."
)

NOTE_FILE_FILTER = "Text Files (*.txt);;Rich Text Files (*.html)"
IMAGE_FILE_FILTER = "Images (*.jpg *.jpeg *.png *.gif *.bmp)"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_SPLITTER = "window/splitter"
SETTINGS_LIST_HEADER = "window/list_header"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 5
