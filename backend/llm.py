# llm.py: uses google-generativeai directly (no LangChain wrapper)
import logging
from typing import Optional

import google.generativeai as genai

from config import Settings

logger = logging.getLogger(__name__)


class GeminiGenerator:
    """
    Thin client around one Gemini model: prompt in, free-form text out.
    Built once per process; the SDK call blocks until Gemini answers.
    """

    def __init__(self, api_key: str, model_name: str, api_endpoint: Optional[str] = None):
        client_options = {"api_endpoint": api_endpoint} if api_endpoint else None
        genai.configure(api_key=api_key, client_options=client_options)
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["GeminiGenerator"]:
        # No key, no client: requests are refused before anything is sent
        if not settings.has_api_key:
            logger.error("GEMINI_API_KEY is not set.")
            return None
        return cls(settings.api_key, settings.model_name, settings.api_endpoint)

    def generate(self, prompt: str) -> str:
        resp = self.model.generate_content(prompt)
        return resp.text

    def ping(self) -> dict:
        """
        Returns {"ok": True, "model": <model>, "content": "..."} on success,
                or {"ok": False, "error": "..."} on failure.
        """
        try:
            text = (self.generate("Reply with OK") or "").strip()
        except Exception as e:
            logger.warning("LLM ping failed for %s: %s", self.model_name, e)
            return {"ok": False, "model": self.model_name, "error": str(e)}
        if not text:
            return {"ok": False, "model": self.model_name, "error": "Empty response"}
        return {"ok": True, "model": self.model_name, "content": text[:200]}
