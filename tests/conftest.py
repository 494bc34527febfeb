# tests/conftest.py
from pathlib import Path
import sys

# Ensure src/ (patient_monitor) and project root (tools) are on sys.path
ROOT = Path(__file__).resolve().parents[1]
for p in (ROOT / "src", ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))
