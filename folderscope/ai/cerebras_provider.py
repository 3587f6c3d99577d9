import asyncio
import logging

from cerebras.cloud.sdk import Cerebras

from folderscope.ai.base import Provider, ProviderResult
from folderscope.ai.errors import EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)


class CerebrasProvider(Provider):
    name = "cerebras"

    def __init__(self, api_key):
        super().__init__(api_key)
        self.client = Cerebras(api_key=api_key, warm_tcp_connection=False)

    async def generate(self, prompt, model):
        try:
            completion = await asyncio.to_thread(
                self.client.chat.completions.create,
                messages=[{"role": "user", "content": prompt}],
                model=model,
                stream=False,
            )
        except Exception as exc:
            logger.warning("Cerebras error: %s", exc)
            raise ProviderError(str(exc), status_code=getattr(exc, "status_code", None)) from exc

        content = (completion.choices[0].message.content or "").strip()
        if not content:
            raise EmptyResponseError("Cerebras returned empty response")
        return ProviderResult(content=content, provider=self.name)
