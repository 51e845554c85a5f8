"""Registry of supported documentation sites."""

from typing import Union

from sitedocs.core.exceptions import UnknownSiteError
from sitedocs.core.models import SiteDescriptor, SiteKey

DEFAULT_SITE = SiteKey.MODULE_FEDERATION


class SiteRegistry:
    """Lookup table from site key to descriptor."""

    # Registration order is the order sites are listed to callers
    _SITES: dict[SiteKey, SiteDescriptor] = {
        SiteKey.MODULE_FEDERATION: SiteDescriptor(
            key=SiteKey.MODULE_FEDERATION,
            name="Module Federation",
            base_url="https://module-federation.io",
            index_path="/llms.txt",
        ),
        SiteKey.MODERNJS: SiteDescriptor(
            key=SiteKey.MODERNJS,
            name="Modern.js",
            base_url="https://modernjs.dev",
            index_path="/llms.txt",
        ),
        SiteKey.FIREBASE: SiteDescriptor(
            key=SiteKey.FIREBASE,
            name="Firebase",
            base_url="https://firebase.google.com/docs",
            index_path="/llms.txt",
        ),
    }

    @classmethod
    def resolve(cls, key: Union[str, SiteKey]) -> SiteDescriptor:
        """Get the descriptor for a site.

        Args:
            key: Site key, as enum member or its string value.

        Returns:
            Descriptor for the site.

        Raises:
            UnknownSiteError: If the key is not registered.
        """
        try:
            site_key = SiteKey(key)
        except ValueError:
            raise UnknownSiteError(str(key), cls.list_valid_keys()) from None
        return cls._SITES[site_key]

    @classmethod
    def list_valid_keys(cls) -> list[str]:
        """List all registered site keys."""
        return [key.value for key in cls._SITES]

    @classmethod
    def list_sites(cls) -> list[SiteDescriptor]:
        """List all registered site descriptors."""
        return list(cls._SITES.values())
