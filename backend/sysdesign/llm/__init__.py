from sysdesign.llm.client import ChatCompletionsClient, LLMClient, get_llm_client
from sysdesign.llm.parser import SystemDesignPayload, parse_design_payload, to_proposals
from sysdesign.llm.prompt import build_messages, build_system_context

__all__ = [
    "ChatCompletionsClient",
    "LLMClient",
    "get_llm_client",
    "SystemDesignPayload",
    "parse_design_payload",
    "to_proposals",
    "build_messages",
    "build_system_context",
]
