from html import escape

from sysdesign.graph.style import display_icon, node_color
from sysdesign.graph.types import Diagram

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 800
NODE_WIDTH = 120
NODE_HEIGHT = 80


def _fill(node) -> str:
    color = node.data.color
    if color and color.startswith("#"):
        return color
    return node_color(node.data.type)


def render_svg(diagram: Diagram) -> str:
    svg = [
        f'<svg width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        '<rect width="100%" height="100%" fill="white"/>',
        "<defs>",
        '<marker id="arrowhead" markerWidth="10" markerHeight="7" '
        'refX="9" refY="3.5" orient="auto">',
        '<polygon points="0 0, 10 3.5, 0 7" fill="#6b7280"/>',
        "</marker>",
        "</defs>",
    ]

    # Draw edges first
    node_map = {n.id: n for n in diagram.nodes}

    for edge in diagram.edges:
        src = node_map.get(edge.source)
        dst = node_map.get(edge.target)
        if src is None or dst is None:
            continue

        x1 = src.position.x + NODE_WIDTH / 2
        y1 = src.position.y + NODE_HEIGHT
        x2 = dst.position.x + NODE_WIDTH / 2
        y2 = dst.position.y + NODE_HEIGHT / 2
        mid_y = (y1 + y2) / 2

        svg.append(
            f'<path d="M {x1} {y1} C {x1} {mid_y}, {x2} {mid_y}, {x2} {y2}" '
            f'stroke="#6b7280" stroke-width="2" fill="none" '
            f'marker-end="url(#arrowhead)"/>'
        )

    # Draw nodes
    for node in diagram.nodes:
        svg.append(
            f'<g transform="translate({node.position.x}, {node.position.y})" '
            f'data-icon="{escape(display_icon(node.data))}">'
        )
        svg.append(
            f'<rect width="{NODE_WIDTH}" height="{NODE_HEIGHT}" rx="8" '
            f'fill="white" stroke="#e5e7eb" stroke-width="2"/>'
        )
        svg.append(
            f'<rect x="35" y="10" width="50" height="30" rx="6" fill="{_fill(node)}"/>'
        )
        svg.append(
            f'<text x="{NODE_WIDTH / 2}" y="55" text-anchor="middle" '
            f'font-family="Arial" font-size="12" font-weight="bold">'
            f"{escape(node.label)}</text>"
        )
        if node.data.description:
            svg.append(
                f'<text x="{NODE_WIDTH / 2}" y="70" text-anchor="middle" '
                f'font-family="Arial" font-size="10" fill="#6b7280">'
                f"{escape(node.data.description)}</text>"
            )
        svg.append("</g>")

    svg.append("</svg>")
    return "\n".join(svg)
