import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Separator configuration
DEFAULT_SEPARATOR = "<|RELATED_DOC_SEP|>"
AUTO_SEPARATOR = "auto"  # Discover the token from the loaded files
SEPARATOR = os.getenv("DOCSTORE_SEPARATOR", DEFAULT_SEPARATOR)

# Reading configuration
ENCODING = os.getenv("DOCSTORE_ENCODING", "utf-8")

# Paths
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONTENT_DIR = os.getenv(
    "DOCSTORE_CONTENT_DIR",
    os.path.join(PROJECT_ROOT, "content")
)
OUTPUT_DIR = os.getenv(
    "DOCSTORE_OUTPUT_DIR",
    os.path.join(PROJECT_ROOT, "output")
)
