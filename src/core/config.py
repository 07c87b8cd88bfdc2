"""Environment-driven carousel settings.

Variables:
    CAROUSEL_AUTO_ADVANCE_MS: Auto-advance period in milliseconds (default 10000).
    CAROUSEL_AUTO_ADVANCE: "true" or "false" (default "true").
    CAROUSEL_ACTIVE_CLASS: Class toggled on the active dot (default "active").
"""

from dataclasses import dataclass
from os import getenv

from src.core.errors import InvalidConfigurationError

DEFAULT_AUTO_ADVANCE_MS = 10000
DEFAULT_ACTIVE_CLASS = "active"


@dataclass(frozen=True)
class CarouselSettings:
    """Settings for a mounted carousel view.

    Attributes:
        auto_advance_ms: Period between automatic slide advances.
        auto_advance_enabled: Whether the auto-advance timer runs at all.
        active_class: Class name marking the active dot indicator.
    """

    auto_advance_ms: int = DEFAULT_AUTO_ADVANCE_MS
    auto_advance_enabled: bool = True
    active_class: str = DEFAULT_ACTIVE_CLASS

    def __post_init__(self) -> None:
        if self.auto_advance_ms <= 0:
            raise InvalidConfigurationError(
                f"Auto-advance period must be positive, got {self.auto_advance_ms} ms"
            )
        if not self.active_class.strip():
            raise InvalidConfigurationError("Active class name must not be empty")

    @property
    def auto_advance_seconds(self) -> float:
        return self.auto_advance_ms / 1000


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    raise InvalidConfigurationError(f"{name} must be true or false, got {value!r}")


def _parse_positive_int(name: str, value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as ex:
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {value!r}"
        ) from ex
    if parsed <= 0:
        raise InvalidConfigurationError(f"{name} must be positive, got {parsed}")
    return parsed


def load_settings() -> CarouselSettings:
    """Build settings from the environment.

    Returns:
        The carousel settings.

    Raises:
        InvalidConfigurationError: If any variable holds a malformed value.
    """
    auto_advance_ms = _parse_positive_int(
        "CAROUSEL_AUTO_ADVANCE_MS",
        getenv("CAROUSEL_AUTO_ADVANCE_MS", str(DEFAULT_AUTO_ADVANCE_MS)),
    )
    auto_advance_enabled = _parse_bool(
        "CAROUSEL_AUTO_ADVANCE", getenv("CAROUSEL_AUTO_ADVANCE", "true")
    )
    active_class = getenv("CAROUSEL_ACTIVE_CLASS", DEFAULT_ACTIVE_CLASS)

    return CarouselSettings(
        auto_advance_ms=auto_advance_ms,
        auto_advance_enabled=auto_advance_enabled,
        active_class=active_class,
    )
