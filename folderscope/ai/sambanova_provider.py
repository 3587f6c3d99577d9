import asyncio
import logging

from sambanova import SambaNova

from folderscope.ai.base import Provider, ProviderResult
from folderscope.ai.errors import EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)

SAMBANOVA_BASE_URL = "https://api.sambanova.ai/v1"


class SambaNovaProvider(Provider):
    name = "sambanova"

    def __init__(self, api_key):
        super().__init__(api_key)
        self.client = SambaNova(api_key=api_key, base_url=SAMBANOVA_BASE_URL)

    async def generate(self, prompt, model):
        try:
            completion = await asyncio.to_thread(
                self.client.chat.completions.create,
                model=model,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            logger.warning("SambaNova error: %s", exc)
            raise ProviderError(str(exc), status_code=getattr(exc, "status_code", None)) from exc

        content = (completion.choices[0].message.content or "").strip()
        if not content:
            raise EmptyResponseError("SambaNova returned empty response")
        return ProviderResult(content=content, provider=self.name)
