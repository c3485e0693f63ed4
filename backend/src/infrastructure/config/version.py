"""Shopify Admin API version handling."""

import re
from typing import ClassVar, Tuple

from shared.exceptions import ConfigurationError


class ApiVersion(str):
    """A validated Admin API version such as ``2025-10`` or ``unstable``.

    Known quarterly releases are listed in ``STABLE``; any other well-formed
    ``YYYY-MM`` string is accepted as a custom version.
    """

    STABLE: ClassVar[Tuple[str, ...]] = (
        "2024-01",
        "2024-04",
        "2024-07",
        "2024-10",
        "2025-01",
        "2025-04",
        "2025-07",
        "2025-10",
    )
    UNSTABLE: ClassVar[str] = "unstable"

    _FORMAT: ClassVar[re.Pattern] = re.compile(r"^(\d{4})-(\d{2})$")

    def __new__(cls, value: str) -> "ApiVersion":
        normalized = str(value).strip().lower()
        if normalized != cls.UNSTABLE and not cls._is_valid_format(normalized):
            raise ConfigurationError(
                config_key="api_version",
                message=f"Invalid API version '{normalized}'",
                details={"version": normalized}
            )
        return super().__new__(cls, normalized)

    @classmethod
    def latest(cls) -> "ApiVersion":
        """Newest stable version this SDK was built against."""
        return cls(cls.STABLE[-1])

    @property
    def is_stable(self) -> bool:
        return str(self) in self.STABLE

    @classmethod
    def _is_valid_format(cls, value: str) -> bool:
        match = cls._FORMAT.match(value)
        if not match:
            return False
        month = int(match.group(2))
        return 1 <= month <= 12
