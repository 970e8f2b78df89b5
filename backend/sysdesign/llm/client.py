from abc import ABC, abstractmethod
from typing import Dict, List

import requests

from sysdesign.config import LLM_BASE_URL, LLM_MODEL, LLM_TEMPERATURE, LLM_TIMEOUT
from sysdesign.errors import ServiceCallError
from sysdesign.utils.json_extract import strip_fences


class LLMClient(ABC):
    @abstractmethod
    def generate(self, messages: List[Dict]) -> str:
        """Generate assistant text from chat messages"""
        pass


class ChatCompletionsClient(LLMClient):
    def __init__(
        self,
        base_url: str = LLM_BASE_URL,
        model: str = LLM_MODEL,
        temperature: float = LLM_TEMPERATURE,
        timeout: int = LLM_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = timeout

    def generate(self, messages: List[Dict]) -> str:
        url = f"{self.base_url}/chat/completions"

        try:
            response = requests.post(
                url,
                json={
                    "model": self.model,
                    "messages": messages,
                    "temperature": self.temperature,
                    "stream": False,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            content = response.json()["choices"][0]["message"]["content"]
        except requests.RequestException as e:
            print(f"[LLM] Request to {url} failed: {e}")
            raise ServiceCallError(f"Generative service request failed: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            print(f"[LLM] Unexpected response shape from {url}: {e}")
            raise ServiceCallError("Generative service returned an unexpected response") from e

        if not isinstance(content, str):
            raise ServiceCallError("Generative service returned no text content")

        return strip_fences(content)


def get_llm_client() -> LLMClient:
    return ChatCompletionsClient()
