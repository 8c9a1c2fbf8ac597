#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import keyword
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from ..exceptions import ConfigurationError
from ..shapes import ShapeID
from ..traits import DynamicTrait, Trait

logger: Final = logging.getLogger(__name__)

type AuthTraitInstance = Trait | DynamicTrait | None
"""The scheme's trait as applied to the service, or None if it isn't applied."""


class PropertyType(Enum):
    """Where an auth option property is passed."""

    IDENTITY = "identity"
    """The property is passed to the identity resolver."""

    SIGNING = "signing"
    """The property is passed to the signer."""


@dataclass(frozen=True)
class Constant:
    """A literal value that doesn't depend on the trait."""

    value: str | int | float | bool | None

    def render(self, trait: AuthTraitInstance) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class TraitValue:
    """Reads a key from the trait's object value.

    Renders ``default`` when the trait isn't applied or doesn't set the key.
    """

    key: str
    default: str | int | float | bool | None = None

    def render(self, trait: AuthTraitInstance) -> str:
        if trait is None or not isinstance(trait.document_value, Mapping):
            return repr(self.default)
        return repr(trait.document_value.get(self.key, self.default))


@dataclass(frozen=True)
class ParameterValue:
    """Reads an auth scheme parameter from the parameter bag at resolution time.

    The trait is never read.
    """

    name: str

    def render(self, trait: AuthTraitInstance) -> str:
        return f"auth_parameters.{self.name}"


@dataclass(frozen=True)
class Computed:
    """Renders an expression with an arbitrary function of the trait.

    The function must tolerate a trait of None.
    """

    function: Callable[[AuthTraitInstance], str]

    def render(self, trait: AuthTraitInstance) -> str:
        return self.function(trait)


type PropertySource = Constant | TraitValue | ParameterValue | Computed


def _require(owner: str, **values: Any) -> None:
    for name, value in values.items():
        if value is None or value == "":
            raise ConfigurationError(f"{owner} is missing required state: {name}")


@dataclass(frozen=True)
class SchemeParameter:
    """An input the generated parameters provider resolves for auth resolution."""

    name: str
    """The field name on the generated parameters class."""

    type_hint: str
    """The Python type of the field, as source text."""

    source: str
    """An expression over ``config``, ``context``, and ``input`` resolving the
    value."""

    def __post_init__(self) -> None:
        _require(
            "SchemeParameter",
            name=self.name,
            type_hint=self.type_hint,
            source=self.source,
        )
        if not self.name.isidentifier() or keyword.iskeyword(self.name):
            raise ConfigurationError(
                f"SchemeParameter name must be an identifier: {self.name!r}"
            )
        if self.name == "operation":
            raise ConfigurationError(
                "SchemeParameter name 'operation' is reserved for the operation "
                "being invoked."
            )


@dataclass(frozen=True)
class OptionProperty:
    """A property of an auth option, sourced from the scheme's trait or the
    parameters."""

    name: str
    type: PropertyType
    source: PropertySource

    def __post_init__(self) -> None:
        _require(
            "OptionProperty", name=self.name, type=self.type, source=self.source
        )


@dataclass(frozen=True)
class AuthScheme:
    """A registered auth scheme and the properties its options carry."""

    scheme_id: ShapeID
    """The ID of the auth scheme."""

    trait_id: ShapeID | None = None
    """The ID of the trait configuring the scheme. Defaults to the scheme id."""

    parameters: Sequence[SchemeParameter] = field(default_factory=tuple)
    """Parameters the scheme needs resolved into the parameter bag."""

    properties: Sequence[OptionProperty] = field(default_factory=tuple)
    """Identity and signing properties, in declaration order."""

    def __post_init__(self) -> None:
        _require("AuthScheme", scheme_id=self.scheme_id)
        if self.trait_id is None:
            object.__setattr__(self, "trait_id", self.scheme_id)
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "properties", tuple(self.properties))

    def properties_by_type(self, type: PropertyType) -> list[OptionProperty]:
        """Get the properties of one type.

        Properties keep their declaration order. If a name is declared twice, the
        later declaration replaces the earlier one in the earlier one's position.
        """
        properties: dict[str, OptionProperty] = {}
        for prop in self.properties:
            if prop.type is not type:
                continue
            if prop.name in properties:
                logger.warning(
                    "Auth scheme %s declares %s property %r more than once. The "
                    "last declaration is used.",
                    self.scheme_id,
                    type.value,
                    prop.name,
                )
            properties[prop.name] = prop
        return list(properties.values())
