import logging

from groq import AsyncGroq

from folderscope.ai.base import Provider, ProviderResult
from folderscope.ai.errors import EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)


class GroqProvider(Provider):
    name = "groq"

    def __init__(self, api_key):
        super().__init__(api_key)
        self.client = AsyncGroq(api_key=api_key)

    async def generate(self, prompt, model):
        try:
            completion = await self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            logger.warning("Groq error: %s", exc)
            raise ProviderError(str(exc), status_code=getattr(exc, "status_code", None)) from exc

        content = (completion.choices[0].message.content or "").strip()
        if not content:
            raise EmptyResponseError("Groq returned empty response")
        return ProviderResult(content=content, provider=self.name)
