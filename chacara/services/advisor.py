"""
Farming-advice assistant ("Agrônomo Virtual") on the Gemini generateContent REST API.

Single-turn and stateless: every question is sent alone under the same system
instruction. Never raises; missing credentials or any failure come back as a
fixed pt-BR message for the user.

API: POST {GEMINI_BASE_URL}/models/{model}:generateContent
Response: {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}
"""
import logging
from typing import Optional

import httpx

from chacara.core.config import Settings

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    'Você é um agrônomo sênior e especialista em vida rural, muito sábio e prático. '
    'Seu nome é "Agrônomo Virtual".\n'
    'Responda a perguntas sobre plantio, colheita, controle de pragas, cuidados com animais '
    'e manutenção de chácaras.\n'
    'Use uma linguagem simples, direta e encorajadora, adequada para um pequeno produtor rural.\n'
    'Dê respostas concisas, preferencialmente em tópicos quando houver instruções passo-a-passo.'
)

MISSING_KEY_MESSAGE = "Chave de API do Gemini não configurada nas variáveis de ambiente."
EMPTY_ANSWER_MESSAGE = "Desculpe, não consegui gerar uma resposta no momento."
ERROR_MESSAGE = (
    "Ocorreu um erro ao consultar o assistente virtual. "
    "Verifique sua conexão ou a validade da chave API."
)


def _extract_text(raw) -> str:
    """Concatenate the text parts of the first candidate; anything off-shape reads as empty."""
    if not isinstance(raw, dict):
        return ""
    candidates = raw.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts")
    if not isinstance(parts, list):
        return ""
    texts = [p.get("text") for p in parts if isinstance(p, dict)]
    return "".join(t for t in texts if isinstance(t, str)).strip()


class Advisor:
    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key.strip()
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "Advisor":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_BASE_URL,
            timeout=settings.ADVICE_TIMEOUT_SECONDS,
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, query: str) -> dict:
        """Raw HTTP call to Gemini. Returns parsed JSON."""
        url = f"{self._base_url}/models/{self._model}:generateContent"
        payload = {
            "system_instruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
            "contents": [{"role": "user", "parts": [{"text": query}]}],
        }
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.post(url, json=payload, headers={"x-goog-api-key": self._api_key})
            resp.raise_for_status()
            return resp.json()

    async def ask(self, query: str) -> str:
        if not self.configured:
            logger.info("advice requested but GEMINI_API_KEY is not set")
            return MISSING_KEY_MESSAGE
        try:
            raw = await self.generate(query)
        except httpx.HTTPStatusError as exc:
            logger.warning("Gemini returned HTTP %d: %s", exc.response.status_code, exc.response.text[:200])
            return ERROR_MESSAGE
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Gemini request failed: %s: %s", type(exc).__name__, exc)
            return ERROR_MESSAGE
        return _extract_text(raw) or EMPTY_ANSWER_MESSAGE
