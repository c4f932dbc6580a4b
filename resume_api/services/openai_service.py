"""OpenAI wrapper.

One prompt in, one completion out. No retries: a failed call is reported to
the caller as CompletionError and the request fails.
"""
from __future__ import annotations

import threading
from typing import Any, Optional, Tuple

from openai import OpenAI

from ..errors import CompletionError


class CompletionClient:
    def __init__(self, api_key: Optional[str], model: str, timeout: float = 60, client: Any = None):
        self.api_key = (api_key or "").strip()
        self.model = model
        self.timeout = timeout
        self._client = client
        self._lock = threading.Lock()

    def ready(self) -> Tuple[bool, str]:
        if self._client is not None:
            return True, ""
        if not self.api_key:
            return False, "OPENAI_API_KEY is missing"
        return True, ""

    def get_client(self):
        with self._lock:
            if self._client is None:
                ok, msg = self.ready()
                if not ok:
                    raise CompletionError(msg)
                self._client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
            return self._client

    def complete(self, prompt: str) -> str:
        client = self.get_client()
        try:
            res = client.responses.create(model=self.model, input=prompt)
        except Exception as e:
            raise CompletionError(f"LLM request failed: {type(e).__name__}: {e}") from e
        return res.output_text
