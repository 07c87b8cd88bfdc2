"""Web page client package."""

from src.clients.web.carousel_view import CarouselView

__all__ = ["CarouselView"]
