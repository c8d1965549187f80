#!/usr/bin/env python3
"""Carga inicial do catálogo Recombee a partir de um content type do Kontent.ai.

Declara as propriedades de item (idempotente) e importa todos os items
publicados do tipo no idioma informado.

Uso:
    python scripts/initialize_catalog.py --environment-id <id> \
        --content-type article --language en

Credenciais do Recombee vêm de RECOMBEE_API_ID, RECOMBEE_API_KEY,
RECOMBEE_REGION e RECOMBEE_BASE_URI.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from api.connectors.kontent import KontentConfiguration
from app.bootstrap import initialize_app
from app.bootstrap.dependencies import create_initialize_catalog_use_case
from config.settings import get_kontent_settings, get_recombee_settings
from utils.errors import InfrastructureError

logger = logging.getLogger("initialize_catalog")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--environment-id", required=True, help="ID do ambiente Kontent.ai")
    parser.add_argument("--content-type", required=True, help="Codename do content type")
    parser.add_argument("--language", required=True, help="Codename do idioma")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    initialize_app()

    recombee_settings = get_recombee_settings()
    recombee_errors = recombee_settings.validate()
    if recombee_errors:
        for error in recombee_errors:
            print(f"erro: {error}", file=sys.stderr)
        return 2

    use_case = create_initialize_catalog_use_case(
        KontentConfiguration(
            environment_id=args.environment_id,
            content_type=args.content_type,
            language=args.language,
        ),
        recombee_settings=recombee_settings,
        kontent_settings=get_kontent_settings(),
    )
    try:
        report = asyncio.run(use_case.execute())
    except InfrastructureError as exc:
        logger.error("catalog_initialization_failed", extra={"error": str(exc)})
        return 1

    print(
        f"content_type={report.content_type} "
        f"elements={report.element_count} "
        f"imported_items={report.imported_items}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
