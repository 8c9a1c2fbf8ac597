#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from collections.abc import Iterable
from typing import Final

from .schemes import AuthScheme, SchemeParameter

logger: Final = logging.getLogger(__name__)


def collect_auth_scheme_parameters(
    schemes: Iterable[AuthScheme | None],
) -> dict[str, SchemeParameter]:
    """Merge the parameters declared by every auth scheme.

    Parameters are keyed by name and keep the order their name was first seen in. If
    two schemes declare a parameter with the same name, the later declaration
    replaces the earlier one.

    :param schemes: The schemes to collect from. None entries are skipped, so the
        results of registry lookups can be passed directly.
    """
    parameters: dict[str, SchemeParameter] = {}
    owners: dict[str, AuthScheme] = {}
    for scheme in schemes:
        if scheme is None:
            continue
        for parameter in scheme.parameters:
            if (existing := parameters.get(parameter.name)) is not None and (
                existing != parameter
            ):
                logger.warning(
                    "Auth scheme parameter %r declared by %s replaces the one "
                    "declared by %s.",
                    parameter.name,
                    scheme.scheme_id,
                    owners[parameter.name].scheme_id,
                )
            parameters[parameter.name] = parameter
            owners[parameter.name] = scheme
    return parameters
