#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging

import pytest
from smithy_auth_codegen.auth.schemes import (
    AuthScheme,
    Computed,
    Constant,
    OptionProperty,
    ParameterValue,
    PropertyType,
    SchemeParameter,
    TraitValue,
)
from smithy_auth_codegen.exceptions import ConfigurationError
from smithy_auth_codegen.shapes import ShapeID
from smithy_auth_codegen.traits import HTTPAPIKeyAuthTrait, SigV4Trait

API_KEY_TRAIT = HTTPAPIKeyAuthTrait({"name": "X-Api-Key", "in": "header"})


@pytest.mark.parametrize(
    "source, trait, expected",
    [
        (Constant("Bearer"), None, "'Bearer'"),
        (Constant(None), API_KEY_TRAIT, "None"),
        (TraitValue("name"), API_KEY_TRAIT, "'X-Api-Key'"),
        (TraitValue("name"), None, "None"),
        (TraitValue("scheme", "Key"), API_KEY_TRAIT, "'Key'"),
        (TraitValue("name", "default"), None, "'default'"),
        (ParameterValue("region"), None, "auth_parameters.region"),
        (ParameterValue("region"), SigV4Trait({"name": "x"}), "auth_parameters.region"),
        (
            Computed(lambda t: "'unset'" if t is None else repr(str(t.id))),
            None,
            "'unset'",
        ),
        (
            Computed(lambda t: "'unset'" if t is None else repr(str(t.id))),
            API_KEY_TRAIT,
            "'smithy.api#httpApiKeyAuth'",
        ),
    ],
)
def test_render_sources(source, trait, expected):
    assert source.render(trait) == expected


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "type_hint": "str", "source": "config.region"},
        {"name": "region", "type_hint": "", "source": "config.region"},
        {"name": "region", "type_hint": "str", "source": None},
        {"name": "not valid", "type_hint": "str", "source": "config.region"},
        {"name": "class", "type_hint": "str", "source": "config.region"},
        {"name": "operation", "type_hint": "str", "source": "config.region"},
    ],
)
def test_scheme_parameter_requires_state(kwargs):
    with pytest.raises(ConfigurationError):
        SchemeParameter(**kwargs)


@pytest.mark.parametrize(
    "name, type, source",
    [
        ("", PropertyType.SIGNING, Constant("x")),
        ("name", None, Constant("x")),
        ("name", PropertyType.SIGNING, None),
    ],
)
def test_option_property_requires_state(name, type, source):
    with pytest.raises(ConfigurationError):
        OptionProperty(name, type, source)


def test_auth_scheme_requires_scheme_id():
    with pytest.raises(ConfigurationError):
        AuthScheme(scheme_id=None)  # type: ignore


def test_trait_id_defaults_to_scheme_id():
    scheme = AuthScheme(scheme_id=ShapeID("com.example#auth"))
    assert scheme.trait_id == ShapeID("com.example#auth")

    scheme = AuthScheme(
        scheme_id=ShapeID("com.example#auth"),
        trait_id=ShapeID("com.example#authTrait"),
    )
    assert scheme.trait_id == ShapeID("com.example#authTrait")


def test_properties_by_type_keeps_declaration_order():
    scheme = AuthScheme(
        scheme_id=ShapeID("com.example#auth"),
        properties=[
            OptionProperty("zeta", PropertyType.SIGNING, Constant(1)),
            OptionProperty("user", PropertyType.IDENTITY, Constant(2)),
            OptionProperty("alpha", PropertyType.SIGNING, Constant(3)),
        ],
    )

    signing = scheme.properties_by_type(PropertyType.SIGNING)
    identity = scheme.properties_by_type(PropertyType.IDENTITY)

    assert [p.name for p in signing] == ["zeta", "alpha"]
    assert [p.name for p in identity] == ["user"]


def test_duplicate_property_names_use_last_declaration(caplog):
    scheme = AuthScheme(
        scheme_id=ShapeID("com.example#auth"),
        properties=[
            OptionProperty("name", PropertyType.SIGNING, Constant("first")),
            OptionProperty("other", PropertyType.SIGNING, Constant("other")),
            OptionProperty("name", PropertyType.SIGNING, Constant("second")),
        ],
    )

    with caplog.at_level(logging.WARNING):
        signing = scheme.properties_by_type(PropertyType.SIGNING)

    assert [(p.name, p.source) for p in signing] == [
        ("name", Constant("second")),
        ("other", Constant("other")),
    ]
    assert "more than once" in caplog.text
