# topmark:header:start
#
#   project      : Nestprint
#   file         : __main__.py
#   file_relpath : src/nestprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Nestprint via ``python -m nestprint``.

Delegates to `nestprint.cli.main.cli`, the same entry point as the
``nestprint`` console script.

Examples:
    Render a literal::

        python -m nestprint render "(5, 10, 15)"
"""

from __future__ import annotations

from nestprint.cli.main import cli

if __name__ == "__main__":
    cli()
