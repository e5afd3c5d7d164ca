import os
from dotenv import load_dotenv

# read overrides from a .env file in the working directory, if there is one
load_dotenv()

# characters that separate ids inside a precedence spec ("A,B" or "A;B")
DELIMITERS = os.getenv("CRITPATH_DELIMITERS", ",;")

# marker meaning "no predecessors"; an empty entry always counts as one too
EMPTY_MARKER = os.getenv("CRITPATH_EMPTY_MARKER", "-")
EMPTY_MARKERS = (EMPTY_MARKER, "")

# what to do with a repeated task id: "overwrite" (last one wins) or "error"
ON_DUPLICATE = os.getenv("CRITPATH_ON_DUPLICATE", "overwrite").strip().lower()
DUPLICATE_POLICIES = ("overwrite", "error")

LOG_LEVEL = os.getenv("CRITPATH_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("CRITPATH_LOG_FILE") or None
