from dataclasses import dataclass


@dataclass
class ProviderResult:
    content: str
    provider: str


class Provider:
    """A client bound to a single API key.

    Building one must not touch the network; failures surface from generate().
    """

    name: str

    def __init__(self, api_key):
        self.api_key = api_key

    async def generate(self, prompt, model):
        raise NotImplementedError
