import logging

from google import genai

MODEL_NAME = "gemini-2.5-flash"
FALLBACK_ADVICE = "No se pudo generar el consejo."

logger = logging.getLogger(__name__)


def build_prompt(description: str) -> str:
    return (
        "Dame un consejo breve para una persona que está en un clima con esta "
        f'descripción: "{description}". El consejo debe ser útil y específico. '
        "No más de 10 palabras"
    )


class AdviceGenerator:
    """
    Asks the model for a short tip about a weather description.

    The weather result is the point of the page, advice is a bonus: a missing
    key, a provider error or an empty answer all resolve to FALLBACK_ADVICE so
    the caller never has to handle an error here. The SDK client is built on
    first use and then reused for every later call.
    """

    def __init__(self, api_key: str | None = None, model: str = MODEL_NAME, client=None):
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def __call__(self, description: str) -> str:
        try:
            response = self.client.models.generate_content(model=self.model, contents=build_prompt(description))
            text = (getattr(response, "text", None) or "").strip()
            if not text:
                raise ValueError("empty response from model")
            return text
        except Exception:
            logger.exception("Error al generar consejo con Gemini")
            return FALLBACK_ADVICE


# One-off call; long-lived callers should keep an AdviceGenerator instead.
def get_advice(description: str, api_key: str | None = None, model: str = MODEL_NAME, client=None) -> str:
    return AdviceGenerator(api_key=api_key, model=model, client=client)(description)
