from __future__ import annotations

import sys
from pathlib import Path


# Ensure the repo root is importable without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT))
