"""Interface en ligne de commande de WalkAround Checks."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence
from uuid import UUID

from walkaround_checks.core import services
from walkaround_checks.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _parse_record_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Identifiant de relevé invalide : {value}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="walkaround-checks",
        description="Contrôles quotidiens des véhicules : historique, export PDF et API",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("history", help="Lister les relevés enregistrés")
    subparsers.add_parser("catalog", help="Afficher les points de contrôle")

    show = subparsers.add_parser("show", help="Afficher un relevé")
    show.add_argument("record_id", type=_parse_record_id)

    delete = subparsers.add_parser("delete", help="Supprimer un relevé")
    delete.add_argument("record_id", type=_parse_record_id)

    export = subparsers.add_parser("export", help="Exporter un relevé en PDF")
    export.add_argument("record_id", type=_parse_record_id)
    export.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Dossier de destination (défaut: WALKAROUND_EXPORT_DIR)",
    )

    serve = subparsers.add_parser("serve", help="Lancer l'API avec uvicorn")
    serve.add_argument("--host", default="127.0.0.1", help="Adresse d'écoute (défaut: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Port d'écoute (défaut: 8000)")
    return parser


def _print_history() -> int:
    records = services.view_history()
    if not records:
        print("Aucun relevé enregistré.")
        return 0
    for index, record in enumerate(records):
        print(f"[{index}] {record.id}  " + " | ".join(record.summary_lines()))
    return 0


def _print_catalog() -> int:
    for category in services.list_catalog():
        print(category.name)
        for item in category.items:
            print(f"  - {item}")
    return 0


def _print_record(record_id: UUID) -> int:
    detail = services.view_record(record_id)
    for line in detail.record.summary_lines():
        print(line)
    print("Completed Checklist Items:")
    for category in detail.categories:
        print(f"  {category.name}")
        for item in category.items:
            print(f"    - {item}")
    if detail.record.comments:
        print("Comments:")
        print(detail.record.comments)
    return 0


def _serve(host: str, port: int) -> int:
    import uvicorn

    uvicorn.run("walkaround_checks.app:app", host=host, port=port, log_config=None)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    configure_logging()
    logger.debug("Commande demandée : %s", args.command)
    try:
        if args.command == "history":
            return _print_history()
        if args.command == "catalog":
            return _print_catalog()
        if args.command == "show":
            return _print_record(args.record_id)
        if args.command == "delete":
            services.delete_record(args.record_id)
            print(f"Relevé {args.record_id} supprimé.")
            return 0
        if args.command == "export":
            target = services.export_record_to_directory(args.record_id, args.output_dir)
            if target is None:
                print("Erreur : le PDF n'a pas pu être écrit.")
                return 1
            print(target)
            return 0
        if args.command == "serve":
            return _serve(args.host, args.port)
    except ValueError as exc:
        print(f"Erreur : {exc}")
        return 1
    return 2
