#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""Types used by generated auth scheme providers at runtime."""

from dataclasses import dataclass, field
from typing import Any

from .shapes import ShapeID


@dataclass(kw_only=True)
class AuthSchemeParameters:
    """Base parameters passed to a generated auth scheme provider.

    Generated providers subclass this with the parameters their auth schemes need.
    """

    operation: str
    """The name of the operation being invoked."""


@dataclass(kw_only=True)
class AuthOption:
    """Auth scheme used for signing and identity resolution."""

    scheme_id: ShapeID
    """The ID of the auth scheme to use."""

    identity_properties: dict[str, Any] = field(default_factory=dict)
    """Parameters to pass to the identity resolver method."""

    signer_properties: dict[str, Any] = field(default_factory=dict)
    """Parameters to pass to the signing method."""

