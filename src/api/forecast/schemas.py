"""Forecast API schemas (inbound request, result, and Gemini wire models)."""

from typing import Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    confloat,
    conint,
)


JPEG_MIME_TYPE = "image/jpeg"
JSON_MIME_TYPE = "application/json"

# Ints stay ints so the prompt echoes readings exactly as they were sent
Reading = StrictInt | StrictFloat
Percent = Union[
    conint(strict=True, ge=0, le=100), confloat(strict=True, ge=0, le=100)
]


class WeatherData(BaseModel):
    temperature: Reading
    humidity: Reading
    cloud_cover: Reading = Field(alias="cloudCover")

    model_config = ConfigDict(populate_by_name=True)


class ForecastRequest(BaseModel):
    """Body posted by the front-end."""

    image_data_base64: str = Field(alias="imageDataBase64", min_length=1)
    weather_data: WeatherData = Field(alias="weatherData")

    model_config = ConfigDict(populate_by_name=True)


class ForecastResult(BaseModel):
    prediction_text: str
    rain_probability_percent: Percent
    cloud_coverage_percent: Percent
    confidence_score_percent: Percent


# Gemini generateContent wire models


class InlineData(BaseModel):
    mime_type: str = JPEG_MIME_TYPE
    data: str


class Part(BaseModel):
    text: str | None = None
    inline_data: InlineData | None = None


class Content(BaseModel):
    parts: list[Part]
    role: str | None = None


class GenerationConfig(BaseModel):
    response_mime_type: str = Field(default=JSON_MIME_TYPE, alias="responseMimeType")

    model_config = ConfigDict(populate_by_name=True)


class GenerateContentRequest(BaseModel):
    contents: list[Content]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig, alias="generationConfig"
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_prompt_and_image(
        cls, prompt: str, image_data_base64: str
    ) -> "GenerateContentRequest":
        """Single-turn request: prompt text first, then the sky photo."""
        return cls(
            contents=[
                Content(
                    parts=[
                        Part(text=prompt),
                        Part(inline_data=InlineData(data=image_data_base64)),
                    ]
                )
            ]
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Candidate(BaseModel):
    content: Content


class GenerateContentResponse(BaseModel):
    candidates: list[Candidate] = Field(min_length=1)

    @property
    def first_text(self) -> str:
        """Text of the first part of the first candidate."""
        parts = self.candidates[0].content.parts
        if not parts or parts[0].text is None:
            raise ValueError("First candidate has no text part")
        return parts[0].text
