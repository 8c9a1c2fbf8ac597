#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Self

from .exceptions import ConfigurationError, InvalidShapeIDError
from .knowledge import AuthSchemeMode
from .shapes import ShapeID


@dataclass(kw_only=True, frozen=True)
class CodegenSettings:
    """Settings for generating an auth scheme provider."""

    service: ShapeID
    """The ID of the service to generate for."""

    service_name: str | None = None
    """The name used to prefix generated types. Defaults to the service's shape
    name."""

    output: Path | None = None
    """Where to write the generated module. If not set, it's written to stdout."""

    auth_scheme_mode: AuthSchemeMode = AuthSchemeMode.NO_AUTH_AWARE
    """How effective auth schemes are resolved."""

    def __post_init__(self) -> None:
        if self.service_name is not None and not self.service_name.isidentifier():
            raise ConfigurationError(
                f"serviceName must be a valid identifier: {self.service_name!r}"
            )

    @property
    def effective_service_name(self) -> str:
        return self.service_name or self.service.name

    @classmethod
    def from_dict(cls, value: Mapping[str, Any]) -> Self:
        """Create settings from a parsed settings document.

        :raises ConfigurationError: If a required setting is missing or invalid.
        """
        if not isinstance(service := value.get("service"), str):
            raise ConfigurationError("The 'service' setting must be a shape id string.")
        try:
            service_id = ShapeID(service)
        except InvalidShapeIDError as e:
            raise ConfigurationError(str(e)) from e

        mode = value.get("authSchemeMode", AuthSchemeMode.NO_AUTH_AWARE.value)
        try:
            auth_scheme_mode = AuthSchemeMode(mode)
        except ValueError as e:
            choices = ", ".join(m.value for m in AuthSchemeMode)
            raise ConfigurationError(
                f"Invalid authSchemeMode {mode!r}, expected one of: {choices}"
            ) from e

        service_name = value.get("serviceName")
        if service_name is not None and not isinstance(service_name, str):
            raise ConfigurationError("The 'serviceName' setting must be a string.")
        output = value.get("output")
        if output is not None and not isinstance(output, str):
            raise ConfigurationError("The 'output' setting must be a path string.")
        return cls(
            service=service_id,
            service_name=service_name,
            output=Path(output) if output is not None else None,
            auth_scheme_mode=auth_scheme_mode,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        with open(path, encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Unable to parse settings file {path}: {e}"
                ) from e
        if not isinstance(document, Mapping):
            raise ConfigurationError(f"Settings file {path} must contain an object.")
        return cls.from_dict(document)
