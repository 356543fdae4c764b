from __future__ import annotations

import json
import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from jsonmask.obfuscate import ObfuscationContext


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def context(rng: random.Random) -> ObfuscationContext:
    return ObfuscationContext(rng=rng)


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, payload: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload) + "\n", encoding="utf-8")
        return path

    return _write
