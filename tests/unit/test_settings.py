#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json
from pathlib import Path

import pytest
from smithy_auth_codegen.exceptions import ConfigurationError
from smithy_auth_codegen.knowledge import AuthSchemeMode
from smithy_auth_codegen.settings import CodegenSettings
from smithy_auth_codegen.shapes import ShapeID


def test_from_dict_defaults():
    settings = CodegenSettings.from_dict({"service": "example.weather#Weather"})

    assert settings.service == ShapeID("example.weather#Weather")
    assert settings.service_name is None
    assert settings.effective_service_name == "Weather"
    assert settings.output is None
    assert settings.auth_scheme_mode is AuthSchemeMode.NO_AUTH_AWARE


def test_from_dict_all_values():
    settings = CodegenSettings.from_dict(
        {
            "service": "example.weather#Weather",
            "serviceName": "Forecasts",
            "output": "out/auth.py",
            "authSchemeMode": "standard",
        }
    )

    assert settings.effective_service_name == "Forecasts"
    assert settings.output == Path("out/auth.py")
    assert settings.auth_scheme_mode is AuthSchemeMode.STANDARD


@pytest.mark.parametrize(
    "value, match",
    [
        ({}, "service"),
        ({"service": 1}, "service"),
        ({"service": "Weather"}, "Invalid shape id"),
        ({"service": "a#B", "authSchemeMode": "strict"}, "authSchemeMode"),
        ({"service": "a#B", "serviceName": "not-valid"}, "serviceName"),
        ({"service": "a#B", "serviceName": 5}, "serviceName"),
        ({"service": "a#B", "output": ["out"]}, "output"),
    ],
)
def test_invalid_settings(value, match):
    with pytest.raises(ConfigurationError, match=match):
        CodegenSettings.from_dict(value)


def test_from_file(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"service": "example.weather#Weather"}))

    assert CodegenSettings.from_file(path).service == ShapeID(
        "example.weather#Weather"
    )


def test_from_file_must_be_object(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text("[]")

    with pytest.raises(ConfigurationError):
        CodegenSettings.from_file(path)
