#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
import re
from dataclasses import dataclass, field
from typing import Final

from ..knowledge import ServiceIndex
from ..shapes import ShapeID
from .registry import SupportedAuthSchemes
from .schemes import PropertyType

logger: Final = logging.getLogger(__name__)

_SEGMENT_SEPARATORS = re.compile(r"[.#]")


@dataclass(kw_only=True, frozen=True)
class ResolvedOption:
    """An auth scheme with its property values rendered as Python expressions."""

    scheme_id: ShapeID
    """The ID of the auth scheme."""

    identity_properties: dict[str, str] = field(default_factory=dict)
    """Expressions for the identity properties, keyed by property name."""

    signing_properties: dict[str, str] = field(default_factory=dict)
    """Expressions for the signing properties, keyed by property name."""


def normalize_auth_scheme_name(scheme_id: ShapeID) -> str:
    """Create a name for a scheme id that is usable within an identifier.

    Each namespace and name segment has its first character capitalized, then the
    segments are joined. For example, ``smithy.api#httpApiKeyAuth`` becomes
    ``SmithyApiHttpApiKeyAuth``.
    """
    return "".join(
        segment[:1].upper() + segment[1:]
        for segment in _SEGMENT_SEPARATORS.split(str(scheme_id))
    )


class OptionSynthesizer:
    """Renders the options for the auth schemes of a service."""

    def __init__(
        self,
        index: ServiceIndex,
        service: ShapeID,
        supported: SupportedAuthSchemes,
    ) -> None:
        self._index = index
        self._service = service
        self._supported = supported

    def synthesize(self, scheme_id: ShapeID) -> ResolvedOption:
        """Render the option for a scheme id.

        If the scheme isn't registered, the option only carries the scheme id.
        Otherwise, every property is rendered from the scheme's trait as applied to
        the service, which may be absent.
        """
        if (scheme := self._supported.lookup(scheme_id)) is None:
            logger.debug(
                "Auth scheme %s is not registered, so its option has no properties.",
                scheme_id,
            )
            return ResolvedOption(scheme_id=scheme_id)

        assert scheme.trait_id is not None  # noqa: S101
        trait = self._index.trait_instance(self._service, scheme.trait_id)
        return ResolvedOption(
            scheme_id=scheme_id,
            identity_properties={
                prop.name: prop.source.render(trait)
                for prop in scheme.properties_by_type(PropertyType.IDENTITY)
            },
            signing_properties={
                prop.name: prop.source.render(trait)
                for prop in scheme.properties_by_type(PropertyType.SIGNING)
            },
        )
