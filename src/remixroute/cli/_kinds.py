"""``remixroute kinds`` — list the route kinds and what they generate."""

import argparse

from remixroute.templates import TEMPLATES


def run_kinds(args: argparse.Namespace) -> None:
    """Print a table of KIND, LABEL, and DESCRIPTION."""
    rows = [(kind.value, t.label, t.description) for kind, t in TEMPLATES.items()]

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_label = max(max(len(r[1]) for r in rows), 5)  # "LABEL" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_label}}}  {{}}"
    print(fmt.format("KIND", "LABEL", "DESCRIPTION"))
    sep_len = max_kind + max_label + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
