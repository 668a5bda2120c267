# session_registry/cli/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

# This cli/config.py file is at <project>/session_registry/cli/config.py
# Three .parent calls navigate to the project root directory
project_root = Path(__file__).parent.parent.parent.resolve()

# Load environment variables from .env file without overriding the real environment
load_dotenv(dotenv_path=project_root / '.env', override=False)

# JSON file with sessions loaded into the store before each command
SESSION_REGISTRY_SEED_FILE = os.getenv("SESSION_REGISTRY_SEED_FILE")
