"""Prompt sent to Gemini alongside the sky photo."""

from src.api.forecast.schemas import WeatherData


FORECAST_PROMPT_TEMPLATE = """You are an expert meteorologist based in {location}.
Analyze the attached photo of the sky together with the current ground readings:
- Temperature: {temperature}°C
- Humidity: {humidity}%
- Cloud cover reported by the weather service: {cloud_cover}%

Instructions for the image:
- Ignore anything in the foreground such as buildings, trees, wires, people or vehicles.
- Focus only on the visible sky region.
- Judge the cloud type, cloud color and thickness, and the quality of the light.

Combine what you see with the readings to forecast the weather for the next few hours.

Respond with a single JSON object and nothing else, no prose and no markdown fences.
The object must have exactly these four fields:
- "prediction_text": a short human-readable forecast (string)
- "rain_probability_percent": chance of rain, a number from 0 to 100
- "cloud_coverage_percent": cloud coverage you observe in the image, a number from 0 to 100
- "confidence_score_percent": your confidence in this forecast, a number from 0 to 100
"""


def build_forecast_prompt(weather: WeatherData, location: str) -> str:
    """Render the prompt with the caller's readings substituted as-is."""
    return FORECAST_PROMPT_TEMPLATE.format(
        location=location,
        temperature=weather.temperature,
        humidity=weather.humidity,
        cloud_cover=weather.cloud_cover,
    )
