import logging

from google import genai

from folderscope.ai.base import Provider, ProviderResult
from folderscope.ai.errors import EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)


class GeminiProvider(Provider):
    name = "gemini"

    def __init__(self, api_key):
        super().__init__(api_key)
        self.client = genai.Client(api_key=api_key)

    async def generate(self, prompt, model):
        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=prompt,
            )
        except Exception as exc:
            logger.warning("Gemini error: %s", exc)
            raise ProviderError(str(exc), status_code=getattr(exc, "code", None)) from exc

        text = (response.text or "").strip()
        if not text:
            raise EmptyResponseError("Gemini returned empty response")
        return ProviderResult(content=text, provider=self.name)
