import sys
from pathlib import Path

# Ensure the src directory is on sys.path for tests executing without an install
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"

str_path = str(SRC)
if str_path not in sys.path:
    sys.path.insert(0, str_path)
