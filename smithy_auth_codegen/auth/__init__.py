#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from .options import OptionSynthesizer, ResolvedOption, normalize_auth_scheme_name
from .parameters import collect_auth_scheme_parameters
from .provider import AuthSchemeProviderGenerator
from .registry import AuthIntegration, SupportedAuthSchemes, create_supported_auth_schemes
from .resolver import EffectiveSchemeResolver, EffectiveSchemeSet
from .schemes import (
    AuthScheme,
    Computed,
    Constant,
    OptionProperty,
    ParameterValue,
    PropertySource,
    PropertyType,
    SchemeParameter,
    TraitValue,
)

__all__ = (
    "AuthIntegration",
    "AuthScheme",
    "AuthSchemeProviderGenerator",
    "Computed",
    "Constant",
    "EffectiveSchemeResolver",
    "EffectiveSchemeSet",
    "OptionProperty",
    "OptionSynthesizer",
    "ParameterValue",
    "PropertySource",
    "PropertyType",
    "ResolvedOption",
    "SchemeParameter",
    "SupportedAuthSchemes",
    "TraitValue",
    "collect_auth_scheme_parameters",
    "create_supported_auth_schemes",
    "normalize_auth_scheme_name",
)
