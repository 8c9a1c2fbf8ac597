#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import copy
from collections.abc import Callable, Mapping
from typing import Any

import pytest
from smithy_auth_codegen.model import Model

API_KEY = "smithy.api#httpApiKeyAuth"
BEARER = "smithy.api#httpBearerAuth"
SIGV4 = "aws.auth#sigv4"

WEATHER_MODEL: dict[str, Any] = {
    "smithy": "2.0",
    "shapes": {
        "example.weather#Weather": {
            "type": "service",
            "version": "2006-03-01",
            "operations": [{"target": "example.weather#GetCurrentTime"}],
            "resources": [{"target": "example.weather#City"}],
            "traits": {
                API_KEY: {"name": "X-Api-Key", "in": "header"},
                BEARER: {},
                SIGV4: {"name": "weather"},
                "smithy.api#auth": [SIGV4, API_KEY],
            },
        },
        "example.weather#City": {
            "type": "resource",
            "read": {"target": "example.weather#GetCity"},
            "list": {"target": "example.weather#ListCities"},
            "resources": [{"target": "example.weather#Forecast"}],
        },
        "example.weather#Forecast": {
            "type": "resource",
            "read": {"target": "example.weather#GetForecast"},
        },
        "example.weather#GetCurrentTime": {
            "type": "operation",
            "traits": {"smithy.api#optionalAuth": {}},
        },
        "example.weather#GetCity": {
            "type": "operation",
            "traits": {"smithy.api#auth": [API_KEY, SIGV4]},
        },
        "example.weather#ListCities": {"type": "operation"},
        "example.weather#GetForecast": {
            "type": "operation",
            "traits": {"smithy.api#auth": [BEARER]},
        },
    },
}


def build_model(
    service_traits: Mapping[str, Any],
    operations: Mapping[str, Mapping[str, Any]] | None = None,
    extra_shapes: Mapping[str, Any] | None = None,
) -> Model:
    """Build a model with a single ``com.example#Service`` service.

    :param service_traits: The traits applied to the service.
    :param operations: Operation names in ``com.example`` mapped to their traits.
    :param extra_shapes: Additional raw AST shapes.
    """
    operations = operations or {}
    shapes: dict[str, Any] = {
        "com.example#Service": {
            "type": "service",
            "operations": [{"target": f"com.example#{name}"} for name in operations],
            "traits": dict(service_traits),
        }
    }
    for name, traits in operations.items():
        shapes[f"com.example#{name}"] = {"type": "operation", "traits": dict(traits)}
    shapes.update(extra_shapes or {})
    return Model.from_json({"smithy": "2.0", "shapes": shapes})


@pytest.fixture
def weather_ast() -> dict[str, Any]:
    return copy.deepcopy(WEATHER_MODEL)


@pytest.fixture
def weather_model(weather_ast: dict[str, Any]) -> Model:
    return Model.from_json(weather_ast)


@pytest.fixture
def model_factory() -> Callable[..., Model]:
    return build_model
