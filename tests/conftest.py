"""
Shared fixtures: an 8 x 6 x 8 ft unit (96 x 72 x 96 in, 384 cu ft) and a
small catalog with easy-to-reason-about sizes.
"""
import pytest

from storage_calculator.model import Catalog, CatalogItem, Container


@pytest.fixture
def container():
    return Container(width=96, depth=72, height=96)


@pytest.fixture
def catalog():
    return Catalog([
        # 2 x 2 x 2 ft, 8 cu ft
        CatalogItem(id="crate", name="Crate", category="boxes", width=24, depth=24, height=24, color="#D4A574"),
        # 4 x 3 x 4 ft, 48 cu ft
        CatalogItem(id="big", name="Big Cabinet", category="misc", width=48, depth=36, height=48, color="#374151"),
        CatalogItem(id="box-large", name="Large Box", category="boxes", width=24, depth=18, height=18),
        CatalogItem(id="cube", name="Cube", category="misc", width=10, depth=10, height=10),
        CatalogItem(id="slab", name="Slab", category="misc", width=20, depth=10, height=5),
        CatalogItem(id="tall", name="Tall Thing", category="misc", width=30, depth=30, height=30),
    ])
