"""Shared fixtures: a small two-crate symbol index."""

from pathlib import Path

import pytest
import yaml

from doclinks.load_symbol_index import build_symbol_index
from doclinks.symbol_index import SymbolIndex

WIDGETS_YML = """
crates:
  - name: widgets
    attributes:
      - 'doc = "Widgets and gadgets."'
      - 'doc(html_root_url = "https://widgets.example/")'
    items:
      - kind: module
        path: gadget
        public_path: gadget
        docs: "Home of [Gizmo] and [`Shape`]."
      - kind: struct
        path: gadget::Gizmo
        public_path: gadget::Gizmo
        docs: "A [Shape::Circle] spinner. See [spin](<fn  spin>)."
      - kind: enum
        path: gadget::Shape
        public_path: gadget::Shape
      - kind: variant
        path: gadget::Shape::Circle
        public_path: gadget::Shape::Circle
      - kind: module
        uid: widgets::gadget::spin_mod
        path: gadget::spin
        public_path: gadget::spin
      - kind: fn
        path: gadget::spin
        public_path: gadget::spin
      - kind: const
        path: gadget::MAX_SPEED
        public_path: gadget::MAX_SPEED
      - kind: struct
        path: gadget::Secret
      - kind: macro
        path: gizmo
        public_path: gizmo
      - kind: struct
        path: Widget
        public_path: Widget
      - kind: fn
        path: build
        public_path: build
  - name: gears
    items:
      - kind: trait
        path: Gear
        public_path: Gear
      - kind: type
        path: Ratio
        public_path: Ratio
"""


@pytest.fixture
def index() -> SymbolIndex:
    """Fixture providing the widgets/gears symbol index."""
    return build_symbol_index(yaml.safe_load(WIDGETS_YML))


@pytest.fixture
def symbols_file(tmp_path: Path) -> Path:
    """Fixture writing the widgets/gears symbol index to a file."""
    path = tmp_path / "symbols.yml"
    path.write_text(WIDGETS_YML, encoding="utf-8")
    return path
