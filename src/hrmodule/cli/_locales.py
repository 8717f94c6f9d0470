"""``hrmodule locales`` — print merged translation keys per locale."""

import argparse
import sys
from collections.abc import Iterator, Mapping
from typing import Any

from hrmodule.cli._host import registered_host
from hrmodule.config import ModuleConfig


def flatten(messages: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, str]]:
    """Yield ``(dotted_key, text)`` pairs from a nested message mapping."""
    for key, value in messages.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            yield from flatten(value, dotted)
        else:
            yield dotted, str(value)


def run_locales(args: argparse.Namespace, config: ModuleConfig) -> None:
    _, i18n = registered_host(config)

    tags = [args.locale] if args.locale else i18n.locales
    for tag in tags:
        if tag not in i18n.locales:
            print(f"Error: no messages for locale {tag!r}", file=sys.stderr)
            raise SystemExit(1)
        print(f"[{tag}]")
        for key, text in flatten(i18n.messages(tag)):
            print(f"  {key} = {text}")
