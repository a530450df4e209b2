from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from evds_api_client.common import ApiKey, Evds, ReturnFormat  # noqa: E402

VALID_KEY = "AbCdE12345"


@pytest.fixture()
def api_key() -> ApiKey:
    return ApiKey.from_text(VALID_KEY)


@pytest.fixture()
def evds(api_key: ApiKey) -> Evds:
    return Evds(api_key=api_key, return_format=ReturnFormat.JSON)
