"""Domain models: regions, locales, hosts and request values."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, TypedDict

from domain.errors import ConfigurationError


class Region(str, Enum):
    """Supported Blizzard API regions."""

    US = "us"
    EU = "eu"
    KR = "kr"
    TW = "tw"
    CN = "cn"


class Locale(str, Enum):
    """Locales accepted by the Blizzard API."""

    EN_US = "en_US"
    ES_MX = "es_MX"
    PT_BR = "pt_BR"
    EN_GB = "en_GB"
    ES_ES = "es_ES"
    FR_FR = "fr_FR"
    RU_RU = "ru_RU"
    DE_DE = "de_DE"
    IT_IT = "it_IT"
    KO_KR = "ko_KR"
    ZH_TW = "zh_TW"
    ZH_CN = "zh_CN"


@dataclass(frozen=True)
class RegionHosts:
    """REST and OAuth hosts serving one region."""

    api: str
    oauth: str


HOSTS: Mapping[str, RegionHosts] = MappingProxyType(
    {
        Region.US.value: RegionHosts(api="https://us.api.blizzard.com", oauth="https://us.battle.net"),
        Region.EU.value: RegionHosts(api="https://eu.api.blizzard.com", oauth="https://eu.battle.net"),
        Region.KR.value: RegionHosts(api="https://kr.api.blizzard.com", oauth="https://apac.battle.net"),
        Region.TW.value: RegionHosts(api="https://tw.api.blizzard.com", oauth="https://apac.battle.net"),
        Region.CN.value: RegionHosts(api="https://gateway.battlenet.com.cn", oauth="https://www.battlenet.com.cn"),
    }
)

LOCALES: tuple[str, ...] = tuple(locale.value for locale in Locale)


class ApiRequestData(TypedDict, total=False):
    """Optional data accepted by ``BlizzardClient.api``.

    Keys:
        replacement: Placeholder name to literal value.
        namespace: Namespace prefix; the region is appended (``static`` -> ``static-eu``).
        search: Pre-encoded ``key=value`` fragments, sent verbatim before the other parameters.
    """

    replacement: Mapping[str, Any]
    namespace: str
    search: Sequence[str]


@dataclass(frozen=True)
class RequestSpec:
    """One outgoing HTTP call."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    data: Optional[dict[str, Any]] = None
    auth: Optional[tuple[str, str]] = None


class OAuthEndpoint(str, Enum):
    """OAuth endpoints understood by ``BlizzardClient.oauth``."""

    AUTHORIZE = "/oauth/authorize"
    TOKEN = "/oauth/token"
    USERINFO = "/oauth/userinfo"
    CHECK_TOKEN = "/oauth/check_token"

    @classmethod
    def from_path(cls, endpoint: str) -> "OAuthEndpoint":
        """Look up an endpoint by its path.

        Raises:
            ConfigurationError: If the path is not a known OAuth endpoint.
        """
        try:
            return cls(endpoint)
        except ValueError:
            raise ConfigurationError(
                "endpoint", f"endpoint not valid, expected one of {', '.join(e.value for e in cls)}"
            ) from None

    @property
    def required_keys(self) -> tuple[str, ...]:
        """Data keys of which one must be present; empty when nothing is required."""
        return _REQUIRED_KEYS[self]

    def require(self, data: Mapping[str, Any]) -> Any:
        """Return the required value from ``data``.

        Raises:
            ConfigurationError: If none of the accepted keys is present.
        """
        if not self.required_keys:
            return None
        for key in self.required_keys:
            if key in data:
                return data[key]
        raise ConfigurationError(self.required_keys[0], f"'{self.required_keys[0]}' key is required for {self.value}")


_REQUIRED_KEYS: dict[OAuthEndpoint, tuple[str, ...]] = {
    OAuthEndpoint.AUTHORIZE: (),
    OAuthEndpoint.TOKEN: ("code",),
    OAuthEndpoint.USERINFO: ("accessToken", "access_token"),
    OAuthEndpoint.CHECK_TOKEN: ("accessToken", "access_token"),
}
