import os

os.environ.setdefault("PERHAPS_DISABLE_FILE_LOGS", "1")
