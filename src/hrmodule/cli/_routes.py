"""``hrmodule routes`` — list the routes the module registers.

Registers the module into a fresh host and prints a table of NAME,
PATH, and translated menu title.
"""

import argparse

from hrmodule.cli._host import registered_host
from hrmodule.config import ModuleConfig


def run_routes(args: argparse.Namespace, config: ModuleConfig) -> None:
    router, i18n = registered_host(config, strict=args.strict)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (name, path, title)
    rows: list[tuple[str, str, str]] = []
    for record in routes:
        title_key = record.meta.get("title")
        title = i18n.translate(title_key) if isinstance(title_key, str) else ""
        rows.append((record.name or "-", record.path, title))

    # Column widths
    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "PATH", "TITLE"))
    sep_len = max_name + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for name, path, title in rows:
        print(fmt.format(name, path, title))
