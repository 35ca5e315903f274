"""
Language-model fallback for fields no heuristic recognizes.

Talks to any OpenAI-compatible /chat/completions endpoint:
  LLM_URL         -> local llama.cpp / Ollama compatible endpoint (preferred)
  OPENAI_API_KEY  -> OpenAI (default model: gpt-4o-mini)

LLM_MODEL overrides the model name, LLM_API_KEY is sent to a local endpoint
when set.
"""

import os
from dataclasses import dataclass

import httpx

_OPENAI_BASE = "https://api.openai.com/v1"
_TIMEOUT = 30  # seconds
_MAX_ANSWER_CHARS = 200

_SYSTEM_PROMPT = (
    "You fill in job application form fields. Reply with the exact text to "
    "type into the field and nothing else: no quotes, no explanation. "
    "For numeric fields reply with digits only."
)


@dataclass(frozen=True)
class LLMConfig:
    base_url: str
    model: str
    api_key: str


def resolve_llm_config(env=None):
    """Pick the endpoint from the environment; LLM_URL wins over OPENAI_API_KEY"""
    env = env if env is not None else os.environ

    local_url = (env.get("LLM_URL") or "").strip()
    openai_key = (env.get("OPENAI_API_KEY") or "").strip()
    model = (env.get("LLM_MODEL") or "").strip()

    if local_url:
        return LLMConfig(
            base_url=local_url.rstrip("/"),
            model=model or "local-model",
            api_key=(env.get("LLM_API_KEY") or "").strip(),
        )
    if openai_key:
        return LLMConfig(base_url=_OPENAI_BASE, model=model or "gpt-4o-mini", api_key=openai_key)

    raise RuntimeError("No LLM endpoint configured. Set LLM_URL or OPENAI_API_KEY.")


class LLMFallback:
    """Callable (label, input_type) -> answer, for resolve_field_value's fallback slot"""

    def __init__(self, config, profile, client=None):
        self.config = config
        self.profile = profile
        self._client = client or httpx.Client(timeout=_TIMEOUT)

    def _applicant_summary(self):
        p = self.profile
        return (
            f"Applicant: {p.years_experience} years of experience, lives in "
            f"{p.city}, {p.state}, desired salary {p.desired_salary}, "
            f"target positions: {', '.join(p.positions)}."
        )

    def __call__(self, label, input_type):
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"

        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": _SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": f"{self._applicant_summary()}\nField label: {label}\nInput type: {input_type or 'text'}",
                },
            ],
            "temperature": 0,
            "max_tokens": 64,
        }

        resp = self._client.post(f"{self.config.base_url}/chat/completions", json=payload, headers=headers)
        resp.raise_for_status()
        text = resp.json()["choices"][0]["message"]["content"] or ""

        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if not lines:
            return ""
        return lines[0].strip("\"'")[:_MAX_ANSWER_CHARS]

    def close(self):
        self._client.close()
