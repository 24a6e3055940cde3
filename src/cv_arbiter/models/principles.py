"""Pydantic models for the product-management principle catalogue."""

from __future__ import annotations

from pydantic import BaseModel


class ExampleFraming(BaseModel):
    weak: str
    strong: str


class PMPrinciple(BaseModel):
    id: str
    name: str
    description: str
    key_questions: list[str]
    application_tips: list[str]
    example_framing: ExampleFraming

    model_config = {"frozen": True}


class PMFramework(BaseModel):
    name: str
    description: str
    when_to_use: str
    components: list[str]

    model_config = {"frozen": True}


class CoachingContext(BaseModel):
    """Guidance bundle for one coaching use case (CV tailoring, interview prep)."""

    primary_principles: list[str]
    guidance: list[str]
    red_flags: list[str] = []
    common_questions: list[str] = []
    star_template: dict[str, str] = {}

    model_config = {"frozen": True}
