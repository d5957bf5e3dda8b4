import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local `src/` package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _clear_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep the developer's shell settings out of the tests; opt in per test.
    for name in ("SCAFFOLD_ROOT_DIR", "SCAFFOLD_MAX_WORKERS", "SCAFFOLD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
