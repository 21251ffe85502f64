# topmark:header:start
#
#   project      : Nestprint
#   file         : __init__.py
#   file_relpath : src/nestprint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the Nestprint CLI (``render``, ``classify``, ``version``)."""
