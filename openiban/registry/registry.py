"""Read-only registry of IBAN country definitions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from types import MappingProxyType

from openiban.exceptions import RegistryError
from openiban.registry.countries import load_countries
from openiban.registry.models import IbanCountry
from openiban.utils.logging import get_logger

logger = get_logger(__name__)


class CountryRegistry:
    """Immutable mapping from country code to :class:`IbanCountry`.

    The registry never changes after construction, so a single instance can
    be shared between threads without locking.

    Usage:
        >>> registry = CountryRegistry.default()
        >>> registry.lookup("NL").length
        18
        >>> registry.lookup("XX") is None
        True
    """

    __slots__ = ("_countries",)

    def __init__(self, countries: Iterable[IbanCountry]) -> None:
        """Build a registry.

        Args:
            countries: Country definitions, one per code

        Raises:
            RegistryError: If two definitions share a country code
        """
        definitions: dict[str, IbanCountry] = {}
        for country in countries:
            if country.code in definitions:
                raise RegistryError(
                    f"Duplicate definition for country {country.code}",
                    country_code=country.code,
                )
            definitions[country.code] = country
        self._countries = MappingProxyType(definitions)

    @classmethod
    def default(cls) -> CountryRegistry:
        """Get the shared registry built from the SWIFT country table."""
        return get_default_registry()

    def lookup(self, country_code: str) -> IbanCountry | None:
        """Find the definition for a country code.

        Lookup is case-sensitive: callers pass normalized uppercase codes.

        Returns:
            The definition, or None when the code is not supported
        """
        return self._countries.get(country_code)

    def countries(self) -> list[IbanCountry]:
        """All definitions, sorted by country code."""
        return [self._countries[code] for code in sorted(self._countries)]

    def __contains__(self, country_code: object) -> bool:
        return country_code in self._countries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._countries))

    def __len__(self) -> int:
        return len(self._countries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(countries={len(self)})"


@lru_cache(maxsize=1)
def get_default_registry() -> CountryRegistry:
    """Build the process-wide registry once and return it on every call."""
    registry = CountryRegistry(load_countries())
    logger.debug("country_registry_loaded", countries=len(registry))
    return registry
