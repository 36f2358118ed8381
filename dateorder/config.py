from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class ParserPolicy:
    """Which locale tables a parser is built with.

    - locales: language codes whose month names and ordinal markers are recognized.
    - provider: locale provider name (see locale.registry.build_provider).
    """

    locales: tuple[str, ...] = ("en",)
    provider: str = "builtin"

    @classmethod
    def from_env(cls) -> "ParserPolicy":
        """Read DATEORDER_LOCALES (comma-separated) and DATEORDER_LOCALE_PROVIDER.

        Also picks up a .env file; unset or blank values keep the defaults.
        """
        load_dotenv()
        raw_locales = os.environ.get("DATEORDER_LOCALES", "").strip()
        provider = os.environ.get("DATEORDER_LOCALE_PROVIDER", "").strip()

        locales = tuple(c.strip() for c in raw_locales.split(",") if c.strip())
        return cls(
            locales=locales or cls.locales,
            provider=provider or cls.provider,
        )
