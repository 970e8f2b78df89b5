from sysdesign.export.snapshot import SNAPSHOT_VERSION, export_json, import_json
from sysdesign.export.svg_renderer import render_svg

__all__ = ["SNAPSHOT_VERSION", "export_json", "import_json", "render_svg"]
