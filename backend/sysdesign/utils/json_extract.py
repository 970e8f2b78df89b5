import json
import re

FENCE_OPEN = re.compile(r"^```(?:json)?\s*")
FENCE_CLOSE = re.compile(r"\s*```$")


def strip_fences(text: str) -> str:
    text = FENCE_OPEN.sub("", text.strip())
    return FENCE_CLOSE.sub("", text.strip())


def extract_json(text: str):
    """
    Extract the first JSON object from LLM output.
    Returns None if nothing parses.
    """
    if not text or not isinstance(text, str):
        return None

    text = strip_fences(text)

    try:
        return json.loads(text)
    except ValueError:
        pass

    # Try to extract JSON block
    match = re.search(r"\{.*\}", text, re.DOTALL)
    if not match:
        return None

    try:
        return json.loads(match.group(0))
    except ValueError:
        return None
