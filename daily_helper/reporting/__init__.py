"""
Reporting layer — plain-text formatting of engine results for the CLI.

Submodules:
  formatters — recommendation, history, top-todo and week-stats blocks
"""
