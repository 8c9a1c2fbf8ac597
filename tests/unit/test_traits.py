#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass

import pytest
from smithy_auth_codegen.shapes import ShapeID
from smithy_auth_codegen.traits import (
    APIKeyLocation,
    AuthTrait,
    DynamicTrait,
    HTTPAPIKeyAuthTrait,
    OptionalAuthTrait,
    SigV4Trait,
    Trait,
)


def test_trait_factory_constructs_dynamic_trait():
    trait_id = ShapeID("com.example#foo")
    trait = Trait.new(id=trait_id, value="bar")
    assert isinstance(trait, DynamicTrait)
    assert trait.id == trait_id
    assert trait.document_value == "bar"


def test_trait_factory_constructs_prelude_trait():
    trait = Trait.new(OptionalAuthTrait.id, {})
    assert isinstance(trait, OptionalAuthTrait)


def test_trait_factory_constructs_new_trait():
    trait_id = ShapeID("com.example#customAuth")

    @dataclass(init=False, frozen=True)
    class CustomAuthTrait(Trait, id=trait_id):
        pass

    trait = Trait.new(trait_id, {})
    assert isinstance(trait, CustomAuthTrait)
    assert CustomAuthTrait.id is trait_id


def test_cant_construct_base_trait():
    with pytest.raises(TypeError):
        Trait("foo")


def test_cant_construct_trait_from_non_matching_dynamic_trait():
    dynamic = DynamicTrait(id=SigV4Trait.id, document_value={"name": "weather"})
    with pytest.raises(ValueError):
        HTTPAPIKeyAuthTrait(dynamic)


def test_auth_trait_keeps_priority_order():
    trait = AuthTrait(["smithy.api#httpBearerAuth", "aws.auth#sigv4"])
    assert trait.values == (
        ShapeID("smithy.api#httpBearerAuth"),
        ShapeID("aws.auth#sigv4"),
    )


def test_auth_trait_ignores_duplicates():
    trait = AuthTrait(["aws.auth#sigv4", "smithy.api#httpBearerAuth", "aws.auth#sigv4"])
    assert trait.values == (
        ShapeID("aws.auth#sigv4"),
        ShapeID("smithy.api#httpBearerAuth"),
    )


def test_api_key_trait():
    trait = HTTPAPIKeyAuthTrait({"name": "X-Api-Key", "in": "query", "scheme": "Key"})
    assert trait.name == "X-Api-Key"
    assert trait.location is APIKeyLocation.QUERY
    assert trait.scheme == "Key"


def test_api_key_trait_without_scheme():
    trait = HTTPAPIKeyAuthTrait({"name": "X-Api-Key", "in": "header"})
    assert trait.scheme is None


def test_sigv4_trait():
    assert SigV4Trait({"name": "weather"}).name == "weather"
