#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

# This ruff check warns against using the assert statement, which can be stripped out
# when running Python with certain (common) optimization settings. Assert is used here
# for trait values. Since these are read from a validated Smithy model, we can be
# fairly confident that they're correct regardless, so it's okay if the checks are
# stripped out.
# ruff: noqa: S101

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .shapes import ShapeID

type DocumentValue = (
    Mapping[str, "DocumentValue"]
    | Sequence["DocumentValue"]
    | str
    | int
    | float
    | bool
    | None
)


NO_AUTH_SCHEME_ID = ShapeID("smithy.api#noAuth")
"""The reserved scheme id used when no authentication is required."""


@dataclass(kw_only=True, frozen=True, slots=True)
class DynamicTrait:
    """A component that can be attached to a shape to describe additional information
    about it.

    Typed traits can be used by creating a :py:class:`Trait` subclass.
    """

    id: ShapeID
    """The ID of the trait."""

    document_value: DocumentValue = None
    """The value of the trait."""


@dataclass(init=False, frozen=True)
class Trait:
    """A component that can be attached to a shape to describe additional information
    about it.

    This is a base class that registers subclasses. Any known subclasses will
    automatically be used when loading a model. Any unknown traits may instead be
    created as a :py:class:`DynamicTrait`.

    The `id` property of subclasses is set during subclass creation by
    `__init_subclass__`, so it is not necessary for subclasses to set it manually.
    """

    _REGISTRY: ClassVar[dict[ShapeID, type["Trait"]]] = {}

    id: ClassVar[ShapeID]
    """The ID of the trait."""

    document_value: DocumentValue = None
    """The value of the trait as a DocumentValue."""

    def __init_subclass__(cls, id: ShapeID) -> None:
        cls.id = id
        Trait._REGISTRY[id] = cls

    def __init__(self, value: DocumentValue | DynamicTrait = None):
        if type(self) is Trait:
            raise TypeError(
                "Only subclasses of Trait may be directly instantiated. "
                "Use DynamicTrait for traits without a concrete class."
            )

        if isinstance(value, DynamicTrait):
            if value.id != self.id:
                raise ValueError(
                    f"Attempted to instantiate an instance of {type(self)} from an "
                    f"invalid ID. Expected {self.id} but found {value.id}."
                )
            # Note that setattr is needed because it's a frozen (read-only) dataclass
            object.__setattr__(self, "document_value", value.document_value)
        else:
            object.__setattr__(self, "document_value", value)
        self.__post_init__()

    def __post_init__(self) -> None:
        pass

    @staticmethod
    def new(id: ShapeID, value: DocumentValue = None) -> "Trait | DynamicTrait":
        """Dynamically create a new trait of the given ID.

        If the ID corresponds to a known Trait class, that class will be instantiated
        and returned. Otherwise, a :py:class:`DynamicTrait` will be returned.

        :returns: A trait of the given ID with the given value.
        """
        if (cls := Trait._REGISTRY.get(id, None)) is not None:
            return cls(value)
        return DynamicTrait(id=id, document_value=value)


@dataclass(init=False, frozen=True)
class AuthTrait(Trait, id=ShapeID("smithy.api#auth")):
    """The ordered auth schemes a service or operation supports, in priority order."""

    values: tuple[ShapeID, ...] = field(repr=False, hash=False, compare=False)

    def __post_init__(self) -> None:
        assert isinstance(self.document_value, Sequence)
        values: list[ShapeID] = []
        for value in self.document_value:
            assert isinstance(value, str)
            # Duplicate entries are ignored, the first occurrence sets priority.
            if (shape_id := ShapeID(value)) not in values:
                values.append(shape_id)
        object.__setattr__(self, "values", tuple(values))


@dataclass(init=False, frozen=True)
class OptionalAuthTrait(Trait, id=ShapeID("smithy.api#optionalAuth")):
    pass


@dataclass(init=False, frozen=True)
class AuthDefinitionTrait(Trait, id=ShapeID("smithy.api#authDefinition")):
    pass


class APIKeyLocation(Enum):
    """The locations that the api key could be placed in the signed request."""

    HEADER = "header"
    QUERY = "query"


@dataclass(init=False, frozen=True)
class HTTPAPIKeyAuthTrait(Trait, id=ShapeID("smithy.api#httpApiKeyAuth")):
    def __post_init__(self) -> None:
        assert isinstance(self.document_value, Mapping)
        assert isinstance(self.document_value["name"], str)
        assert isinstance(self.document_value["in"], str)

    @property
    def name(self) -> str:
        return self.document_value["name"]  # type: ignore

    @property
    def location(self) -> APIKeyLocation:
        return APIKeyLocation(self.document_value["in"])  # type: ignore

    @property
    def scheme(self) -> str | None:
        return self.document_value.get("scheme")  # type: ignore


@dataclass(init=False, frozen=True)
class HTTPBearerAuthTrait(Trait, id=ShapeID("smithy.api#httpBearerAuth")):
    pass


@dataclass(init=False, frozen=True)
class HTTPBasicAuthTrait(Trait, id=ShapeID("smithy.api#httpBasicAuth")):
    pass


@dataclass(init=False, frozen=True)
class HTTPDigestAuthTrait(Trait, id=ShapeID("smithy.api#httpDigestAuth")):
    pass


@dataclass(init=False, frozen=True)
class SigV4Trait(Trait, id=ShapeID("aws.auth#sigv4")):
    def __post_init__(self) -> None:
        assert isinstance(self.document_value, Mapping)
        assert isinstance(self.document_value["name"], str)

    @property
    def name(self) -> str:
        return self.document_value["name"]  # type: ignore


PRELUDE_AUTH_TRAITS: tuple[ShapeID, ...] = (
    HTTPAPIKeyAuthTrait.id,
    HTTPBasicAuthTrait.id,
    HTTPBearerAuthTrait.id,
    HTTPDigestAuthTrait.id,
    SigV4Trait.id,
    ShapeID("aws.auth#sigv4a"),
)
"""Trait ids that are auth definitions without being defined in a loaded model."""
