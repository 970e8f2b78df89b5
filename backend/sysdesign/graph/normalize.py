from typing import List, Tuple

# -------------------------
# Canonical node types
# -------------------------

NODE_TYPES = (
    "server",
    "database",
    "cloud",
    "mobile",
    "web",
    "security",
    "api",
    "users",
    "chat",
    "ecommerce",
    "payment",
    "email",
    "notification",
    "search",
    "analytics",
    "auth",
    "network",
    "storage",
    "compute",
    "frontend",
)

DEFAULT_NODE_TYPE = "server"

# (substring key, canonical type). Order is priority: first key wins.
TYPE_RULES: List[Tuple[str, str]] = [
    ("web server", "server"),
    ("api server", "api"),
    ("database", "database"),
    ("load balancer", "network"),
    ("cache", "storage"),
    ("frontend", "frontend"),
    ("mobile app", "mobile"),
    ("microservice", "api"),
    ("service", "api"),
    ("queue", "storage"),
    ("cdn", "cloud"),
    ("auth", "security"),
    ("payment", "payment"),
    ("notification", "notification"),
    ("search", "search"),
    ("analytics", "analytics"),
]


def normalize_type(phrase) -> str:
    """
    Map a loosely worded component type onto NODE_TYPES.
    Never fails: anything no rule matches becomes DEFAULT_NODE_TYPE.
    """
    if not isinstance(phrase, str):
        return DEFAULT_NODE_TYPE

    text = phrase.strip().lower()

    for key, node_type in TYPE_RULES:
        if key in text:
            return node_type

    return DEFAULT_NODE_TYPE
