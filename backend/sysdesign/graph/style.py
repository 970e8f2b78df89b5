NODE_STYLE = {
    "server": {"icon": "server", "color": "#3B82F6"},
    "database": {"icon": "database", "color": "#A855F7"},
    "api": {"icon": "zap", "color": "#22C55E"},
    "frontend": {"icon": "monitor", "color": "#F97316"},
    "mobile": {"icon": "smartphone", "color": "#EC4899"},
    "cloud": {"icon": "cloud", "color": "#0EA5E9"},
    "security": {"icon": "shield", "color": "#EF4444"},
    "network": {"icon": "wifi", "color": "#14B8A6"},
    "storage": {"icon": "hard-drive", "color": "#EAB308"},
    "payment": {"icon": "credit-card", "color": "#10B981"},
    "notification": {"icon": "bell", "color": "#6366F1"},
    "search": {"icon": "search", "color": "#8B5CF6"},
    "analytics": {"icon": "bar-chart", "color": "#F43F5E"},
    "auth": {"icon": "lock", "color": "#DC2626"},
    "users": {"icon": "users", "color": "#2563EB"},
    "chat": {"icon": "message-square", "color": "#16A34A"},
    "ecommerce": {"icon": "shopping-cart", "color": "#9333EA"},
    "email": {"icon": "mail", "color": "#EA580C"},
    "compute": {"icon": "cpu", "color": "#4B5563"},
    "web": {"icon": "globe", "color": "#06B6D4"},
}

FALLBACK_COLOR = "#6B7280"


def node_color(node_type: str) -> str:
    style = NODE_STYLE.get(node_type)
    return style["color"] if style else FALLBACK_COLOR


def node_icon(node_type: str) -> str:
    return NODE_STYLE.get(node_type, NODE_STYLE["server"])["icon"]


def display_icon(data) -> str:
    """A custom block's own icon, else the icon of its type."""
    return data.icon or node_icon(data.type)
