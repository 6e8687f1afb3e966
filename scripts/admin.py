from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import pandas as pd

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.ingest.base import POSTS_RESOURCE, SCHOLARSHIPS_RESOURCE
from src.ingest.registry import resolve_baseline_source
from src.records.fallback import FALLBACK_POSTS, FALLBACK_SCHOLARSHIPS
from src.repository.records import RecordRepository
from src.store.backends import DirectoryBackend, resolve_store_dir
from src.store.keyed_store import KeyedStore

logger = logging.getLogger("admin")

SUBMISSION_COLUMNS = ["id", "title", "country", "level", "sponsor", "deadline"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Administer a ScholarLink record store.")
    parser.add_argument("--store-dir", type=Path, default=None, help="Directory holding the store files.")
    parser.add_argument(
        "--baseline",
        type=str,
        default=None,
        help="Baseline directory or base URL. Defaults to data/baseline.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("submissions", help="List pending submissions.")
    commands.add_parser("catalog", help="List the merged catalog.")
    for name, help_text in (
        ("approve", "Promote a submission into the catalog."),
        ("discard", "Delete a pending submission."),
        ("delete", "Delete an approved scholarship."),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("id")

    commands.add_parser("accounts", help="List accounts.")
    for name, help_text in (
        ("grant-admin", "Give an account the admin flag."),
        ("revoke-admin", "Remove the admin flag from an account."),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("email")

    commands.add_parser("newsletter", help="List newsletter subscribers.")
    commands.add_parser("messages", help="List contact messages.")
    export = commands.add_parser("export-baseline", help="Write the built-in catalog as baseline files.")
    export.add_argument("output_dir", type=Path)
    return parser.parse_args(argv)


def build_repository(store_dir: Path | None, baseline: str | None) -> RecordRepository:
    store = KeyedStore(DirectoryBackend(root=resolve_store_dir(store_dir)))
    return RecordRepository(store=store, baseline_source=resolve_baseline_source(baseline))


def _print_table(rows: list[dict], columns: list[str], empty_message: str) -> None:
    if not rows:
        print(empty_message)
        return
    print(pd.DataFrame(rows, columns=columns).to_string(index=False))


def export_baseline(output_dir: Path) -> tuple[Path, Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    scholarships_path = output_dir / SCHOLARSHIPS_RESOURCE
    posts_path = output_dir / POSTS_RESOURCE
    scholarships_path.write_text(
        json.dumps([record.to_dict() for record in FALLBACK_SCHOLARSHIPS], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    posts_path.write_text(
        json.dumps([post.to_dict() for post in FALLBACK_POSTS], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return scholarships_path, posts_path


def run_command(args: argparse.Namespace, repository: RecordRepository) -> int:
    command = args.command
    if command == "submissions":
        rows = [record.to_dict() for record in repository.list_submissions()]
        _print_table(rows, SUBMISSION_COLUMNS, "No pending submissions.")
    elif command == "catalog":
        rows = [record.to_dict() for record in repository.merged_scholarships()]
        _print_table(rows, SUBMISSION_COLUMNS, "The catalog is empty.")
    elif command in {"approve", "discard", "delete"}:
        action = {
            "approve": repository.promote_submission,
            "discard": repository.remove_submission,
            "delete": repository.remove_approved_scholarship,
        }[command]
        if not action(args.id):
            print(f"No matching record for id {args.id!r}.")
            return 1
        print(f"{command.capitalize()}: {args.id}")
    elif command == "accounts":
        rows = [
            {"email": account.email, "admin": account.is_admin, "bookmarks": len(account.bookmarks)}
            for account in repository.list_accounts()
        ]
        _print_table(rows, ["email", "admin", "bookmarks"], "No users registered.")
    elif command in {"grant-admin", "revoke-admin"}:
        if not repository.set_admin(args.email, is_admin=command == "grant-admin"):
            print(f"No account for {args.email!r}.")
            return 1
        print(f"Updated admin flag for {args.email}.")
    elif command == "newsletter":
        rows = [{"email": email} for email in repository.list_newsletter()]
        _print_table(rows, ["email"], "No newsletter subscriptions yet.")
    elif command == "messages":
        rows = [message.to_dict() for message in repository.list_contact_messages()]
        _print_table(rows, ["date", "name", "email", "message"], "No contact messages yet.")
    elif command == "export-baseline":
        for path in export_baseline(args.output_dir):
            print(f"Wrote {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    repository = build_repository(args.store_dir, args.baseline)
    return run_command(args, repository)


if __name__ == "__main__":
    raise SystemExit(main())
