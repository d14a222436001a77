# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : tests/block/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
