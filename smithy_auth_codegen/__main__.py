#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""
Generate an auth scheme provider module from a Smithy JSON AST model.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .auth import AuthSchemeProviderGenerator, create_supported_auth_schemes
from .exceptions import ConfigurationError, SmithyError
from .knowledge import AuthSchemeMode
from .model import Model
from .settings import CodegenSettings

logger = logging.getLogger("smithy_auth_codegen")


def load_settings(args: argparse.Namespace) -> CodegenSettings:
    if args.settings is not None:
        settings = CodegenSettings.from_file(args.settings)
    elif args.service is not None:
        settings = CodegenSettings.from_dict({"service": args.service})
    else:
        raise ConfigurationError("Either --settings or --service must be provided.")

    # Explicit flags take precedence over the settings file.
    overrides = {
        "service": args.service or settings.service,
        "serviceName": args.service_name or settings.service_name,
        "output": args.output or settings.output,
        "authSchemeMode": args.mode or settings.auth_scheme_mode.value,
    }
    return CodegenSettings.from_dict(
        {key: str(value) for key, value in overrides.items() if value is not None}
    )


def generate(model_paths: Sequence[Path], settings: CodegenSettings) -> str:
    model = Model.from_files(*model_paths)
    generator = AuthSchemeProviderGenerator(
        model, settings, create_supported_auth_schemes()
    )
    return generator.run()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate an auth scheme provider from a Smithy JSON AST model"
    )
    parser.add_argument(
        "-m",
        "--model",
        type=Path,
        nargs="+",
        required=True,
        help="Paths to the JSON AST model files",
    )
    parser.add_argument("-s", "--settings", type=Path, help="Path to a settings file")
    parser.add_argument("--service", help="Shape id of the service to generate for")
    parser.add_argument("--service-name", help="Prefix for generated type names")
    parser.add_argument(
        "-o", "--output", type=Path, help="Output file, defaults to stdout"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in AuthSchemeMode],
        help="Auth scheme resolution mode",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args)
        source = generate(args.model, settings)
    except (SmithyError, OSError) as e:
        logger.error("Code generation failed: %s", e)
        return 1

    if settings.output is None:
        sys.stdout.write(source)
    else:
        settings.output.parent.mkdir(parents=True, exist_ok=True)
        settings.output.write_text(source, encoding="utf-8")
        logger.info("Wrote auth scheme provider to %s", settings.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
