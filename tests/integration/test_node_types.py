import os
from pathlib import Path

import pytest

from subsocial_types.aggregation import PALLETS, TypeAggregationService
from subsocial_types.settings import AppSettings

SUBSOCIAL_PATH = os.environ.get("SUBSOCIAL_PATH") or "../subsocial-node"


@pytest.mark.skipif(
    not (Path(SUBSOCIAL_PATH) / "pallets").exists(), reason="subsocial-node repo not found"
)
def test_collect_node_types():
    settings = AppSettings(base_dir=Path(SUBSOCIAL_PATH) / "scripts")
    types = TypeAggregationService(settings).collect()
    assert types, "no types collected"
    assert "LookupSource" in types
    print(f"✓ collected {len(types)} types from {len(PALLETS)} pallets")
