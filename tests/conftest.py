import base64
import pytest
from fastapi.testclient import TestClient

from recipe_lens.main import app
from recipe_lens.deps import get_gateway
from recipe_lens.core.ai_client import VisionGateway


class FakeGateway(VisionGateway):
    """Records calls and answers with a canned completion or error."""

    provider = "fake"
    model = "fake-vision"

    def __init__(self, completion: str = "", error: Exception = None, api_key: str = "test-key"):
        self.completion = completion
        self.error = error
        self.api_key = api_key
        self.calls = []

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, image_base64: str, prompt: str) -> str:
        self.calls.append((image_base64, prompt))
        if self.error is not None:
            raise self.error
        return self.completion


FENCED_RECIPE = """Sure! Here is your recipe:

```json
{
  "title": "Shakshuka",
  "description": "Eggs poached in a spiced tomato sauce.",
  "ingredients": ["2 tbsp olive oil", "1 onion, diced", "800 g crushed tomatoes", "4 eggs"],
  "instructions": ["Soften the onion in the oil.", "Add tomatoes and simmer 10 minutes.", "Crack in the eggs and cover until set."],
  "prepTime": "10 minutes",
  "cookTime": "25 minutes",
  "servings": "2 servings",
  "difficulty": "Easy"
}
```

Enjoy!"""


@pytest.fixture
def image_b64():
    # Not a real JPEG; only has to be valid base64
    return base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg-bytes").decode("ascii")


@pytest.fixture
def fenced_recipe():
    return FENCED_RECIPE


@pytest.fixture
def gateway():
    return FakeGateway(completion=FENCED_RECIPE)


@pytest.fixture
def client(gateway):
    """Test client with the model gateway swapped for a fake."""
    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_gateway():
    return FakeGateway
