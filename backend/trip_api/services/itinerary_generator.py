# backend/trip_api/services/itinerary_generator.py

from trip_api.core.logger import logger


DEFAULT_MODEL = "llama-3.1-8b-instant"
DEFAULT_TEMPERATURE = 0.7


class ItineraryGenerationError(Exception):
    pass


class ItineraryGenerator:
    """
    Turns (destination, days, interest) into a plain-text itinerary using a
    chat completion model. Holds no state besides the client handle.
    """

    def __init__(self, client, model: str = DEFAULT_MODEL, temperature: float = DEFAULT_TEMPERATURE):
        self.client = client
        self.model = model
        self.temperature = temperature

    # ------------------------------------------------------------------
    # PROMPT
    # ------------------------------------------------------------------
    @staticmethod
    def build_prompt(destination: str, days: int, interest: str) -> str:
        return f"""
Create a {days}-day travel itinerary for {destination}
focused on {interest} activities.
Plain text only. Day-wise bullet points.
""".strip()

    # ------------------------------------------------------------------
    # GENERATE
    # ------------------------------------------------------------------
    def generate(self, destination: str, days: int, interest: str) -> str:
        prompt = self.build_prompt(destination, days, interest)

        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
            )
            content = completion.choices[0].message.content
        except Exception as e:
            logger.error(f"Completion call failed for destination={destination!r}: {e}")
            raise ItineraryGenerationError("AI generation failed") from e

        if not content:
            logger.warning(f"Completion returned empty content for destination={destination!r}")
            raise ItineraryGenerationError("AI generation failed")

        return content
