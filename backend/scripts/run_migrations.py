#!/usr/bin/env python
"""
scripts/run_migrations.py
--------------------------
Creates the `trips` / `places` tables (db/schema.sql) in the configured
Postgres database.

Usage:
    python scripts/run_migrations.py [--dry-run]

Exit codes:
    0  schema applied (or dry-run listed the statements)
    1  connection failed or a statement was rejected

Connection settings are the POSTGRES_* variables read by config.py.
All statements share one transaction, and the schema guards every CREATE,
so re-running is safe.
"""

from __future__ import annotations

import argparse
import pathlib
import re
import sys

import psycopg2

import config
from db.connection import connect_kwargs


SQL_FILE = pathlib.Path(__file__).resolve().parent.parent / "db" / "schema.sql"

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"--[^\n]*")


def strip_comments(sql: str) -> str:
    """Remove /* ... */ block comments and -- line comments."""
    return _LINE_COMMENT.sub("", _BLOCK_COMMENT.sub("", sql))


def split_statements(sql: str) -> list[str]:
    """
    Split on semicolons outside $$-quoted bodies; return non-empty statements.

    Text between an odd and even "$$" belongs to a DO / function body and
    its semicolons are kept.
    """
    statements: list[str] = []
    current: list[str] = []
    for i, chunk in enumerate(sql.split("$$")):
        if i:
            current.append("$$")
        if i % 2:
            current.append(chunk)
            continue
        pieces = chunk.split(";")
        current.append(pieces[0])
        for piece in pieces[1:]:
            statements.append("".join(current))
            current = [piece]
    statements.append("".join(current))
    return [s.strip() for s in statements if s.strip()]


def load_statements(path: pathlib.Path = SQL_FILE) -> list[str]:
    if not path.exists():
        raise FileNotFoundError(f"SQL file not found: {path}")
    return split_statements(strip_comments(path.read_text(encoding="utf-8")))


def _preview(stmt: str, width: int) -> str:
    return " ".join(stmt.split())[:width]


def apply(statements: list[str]) -> None:
    """Execute every statement in one transaction; roll back on the first failure."""
    conn = psycopg2.connect(**connect_kwargs())
    try:
        with conn:  # commits on success, rolls back on exception
            with conn.cursor() as cur:
                for i, stmt in enumerate(statements, 1):
                    try:
                        cur.execute(stmt)
                    except psycopg2.Error as exc:
                        print(f"  [✗] {i:03d} {exc.pgerror or exc}")
                        raise
                    print(f"  [✓] {i:03d} {_preview(stmt, 60)}")
    finally:
        conn.close()


def run(dry_run: bool = False) -> None:
    statements = load_statements()

    print(f"[migrations] SQL file   : {SQL_FILE}")
    print(f"[migrations] Statements : {len(statements)}")
    print(f"[migrations] Target DB  : {config.POSTGRES_DB} @ "
          f"{config.POSTGRES_HOST}:{config.POSTGRES_PORT}")

    if dry_run:
        print("[migrations] DRY-RUN, no changes applied.")
        for i, stmt in enumerate(statements, 1):
            print(f"  [{i:03d}] {_preview(stmt, 80)}...")
        return

    try:
        apply(statements)
    except Exception:
        print("[migrations] ROLLED BACK due to error.")
        raise
    print(f"[migrations] Done: {len(statements)} statements applied.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Apply the Trip Planner Postgres schema.")
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print statements without executing them.",
    )
    args = parser.parse_args()
    try:
        run(dry_run=args.dry_run)
    except Exception as exc:
        print(f"[migrations] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
