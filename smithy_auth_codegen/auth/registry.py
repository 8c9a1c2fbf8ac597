#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Final, Protocol

from ..shapes import ShapeID
from ..traits import (
    NO_AUTH_SCHEME_ID,
    HTTPAPIKeyAuthTrait,
    HTTPBearerAuthTrait,
    SigV4Trait,
)
from .schemes import (
    AuthScheme,
    AuthTraitInstance,
    Computed,
    OptionProperty,
    ParameterValue,
    PropertyType,
    SchemeParameter,
)

logger: Final = logging.getLogger(__name__)


class SupportedAuthSchemes:
    """The auth schemes the generator knows how to configure, keyed by scheme id.

    Schemes are registered at startup, then the registry is only read.
    """

    def __init__(self, schemes: Iterable[AuthScheme] = ()) -> None:
        self._schemes: dict[ShapeID, AuthScheme] = {}
        for scheme in schemes:
            self.register(scheme)

    def register(self, scheme: AuthScheme) -> None:
        """Register an auth scheme, replacing any scheme with the same id."""
        if scheme.scheme_id in self._schemes:
            logger.debug("Replacing registered auth scheme %s.", scheme.scheme_id)
        self._schemes[scheme.scheme_id] = scheme

    def lookup(self, scheme_id: ShapeID) -> AuthScheme | None:
        """Get a registered auth scheme.

        Scheme ids used by a model but never registered are expected, so absence
        isn't an error.
        """
        return self._schemes.get(scheme_id)

    def __contains__(self, scheme_id: object) -> bool:
        return scheme_id in self._schemes

    def __iter__(self) -> Iterator[AuthScheme]:
        return iter(self._schemes.values())

    def __len__(self) -> int:
        return len(self._schemes)


class AuthIntegration(Protocol):
    """A plug-in that contributes auth schemes to the registry."""

    def customize_supported_auth_schemes(
        self, supported: SupportedAuthSchemes
    ) -> None: ...


def _api_key_name(trait: AuthTraitInstance) -> str:
    return repr(trait.name) if isinstance(trait, HTTPAPIKeyAuthTrait) else "None"


def _api_key_location(trait: AuthTraitInstance) -> str:
    if isinstance(trait, HTTPAPIKeyAuthTrait):
        return repr(trait.location.value)
    return "None"


def _api_key_scheme(trait: AuthTraitInstance) -> str:
    return repr(trait.scheme) if isinstance(trait, HTTPAPIKeyAuthTrait) else "None"


def _sigv4_name(trait: AuthTraitInstance) -> str:
    return repr(trait.name) if isinstance(trait, SigV4Trait) else "None"


HTTP_API_KEY_AUTH = AuthScheme(
    scheme_id=HTTPAPIKeyAuthTrait.id,
    properties=(
        OptionProperty("name", PropertyType.SIGNING, Computed(_api_key_name)),
        OptionProperty("in", PropertyType.SIGNING, Computed(_api_key_location)),
        OptionProperty("scheme", PropertyType.SIGNING, Computed(_api_key_scheme)),
    ),
)

HTTP_BEARER_AUTH = AuthScheme(scheme_id=HTTPBearerAuthTrait.id)

NO_AUTH = AuthScheme(scheme_id=NO_AUTH_SCHEME_ID)

SIGV4 = AuthScheme(
    scheme_id=SigV4Trait.id,
    parameters=(SchemeParameter("region", "str", 'getattr(config, "region", None)'),),
    properties=(
        OptionProperty("name", PropertyType.SIGNING, Computed(_sigv4_name)),
        OptionProperty("region", PropertyType.SIGNING, ParameterValue("region")),
    ),
)

DEFAULT_AUTH_SCHEMES: Sequence[AuthScheme] = (
    HTTP_API_KEY_AUTH,
    HTTP_BEARER_AUTH,
    NO_AUTH,
    SIGV4,
)


def create_supported_auth_schemes(
    integrations: Iterable[AuthIntegration] = (),
    *,
    include_defaults: bool = True,
) -> SupportedAuthSchemes:
    """Build the registry from the built-in schemes and integrations.

    Integrations run in order, so a later integration can replace a scheme an
    earlier one or the defaults registered.
    """
    supported = SupportedAuthSchemes(DEFAULT_AUTH_SCHEMES if include_defaults else ())
    for integration in integrations:
        integration.customize_supported_auth_schemes(supported)
    logger.debug(
        "Supported auth schemes: %s", ", ".join(str(s.scheme_id) for s in supported)
    )
    return supported
