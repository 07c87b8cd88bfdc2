"""Testimonial content shown in the homepage carousel.

The carousel itself never reads slide content; the number of testimonials
sets its slide count.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.core.errors import InvalidConfigurationError

MIN_QUOTE_LENGTH = 51


class Testimonial(BaseModel):
    """A single customer testimonial slide."""

    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1, description="Job title and company")
    quote: str = Field(..., min_length=MIN_QUOTE_LENGTH)

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Alex Chen",
                "role": "CTO, TechStart Inc.",
                "quote": "Viving Mops turned our spaghetti code into a "
                "maintainable masterpiece.",
            }
        },
    )


DEFAULT_TESTIMONIALS: tuple[Testimonial, ...] = (
    Testimonial(
        name="Alex Chen",
        role="CTO, TechStart Inc.",
        quote=(
            "Our AI-generated React app was a complete disaster. 500+ components "
            "in one file, no state management, and zero tests. Viving Mops turned "
            "our spaghetti code into a maintainable masterpiece. Our team can "
            "actually work with it now!"
        ),
    ),
    Testimonial(
        name="Sarah Rodriguez",
        role="Product Manager, DataFlow",
        quote=(
            'We had a "working" AI-generated API with 200+ endpoints and no '
            "documentation. Every deployment was a prayer. Viving Mops not only "
            "fixed our broken CI/CD but also wrote actual documentation. Our "
            "developers stopped crying!"
        ),
    ),
    Testimonial(
        name="Marcus Johnson",
        role="Founder, ShopBot",
        quote=(
            "Our checkout flow was stitched together from a dozen prompts and "
            "failed one order in five. Viving Mops traced every broken pipeline, "
            "added real tests, and we have not had a failed checkout since."
        ),
    ),
    Testimonial(
        name="Priya Patel",
        role="Engineering Lead, HealthSync",
        quote=(
            "We inherited a vibe-coded backend nobody could explain. Viving Mops "
            "mapped it, untangled the spaghetti code, and left us with a test "
            "suite we trust. Releases went from terrifying to boring."
        ),
    ),
)


def load_testimonials(raw: list[dict[str, Any]]) -> list[Testimonial]:
    """Validate raw testimonial records.

    Args:
        raw: List of dicts with name, role, and quote keys.

    Returns:
        The validated testimonials, in order.

    Raises:
        InvalidConfigurationError: If the list is empty or any record is invalid.
    """
    if not raw:
        raise InvalidConfigurationError("At least one testimonial is required")

    testimonials = []
    for position, record in enumerate(raw):
        try:
            testimonials.append(Testimonial.model_validate(record))
        except ValidationError as ex:
            raise InvalidConfigurationError(
                f"Invalid testimonial at position {position}: {ex}"
            ) from ex
    return testimonials
