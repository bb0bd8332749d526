"""Core parsing modules.

WHY: The core package holds the stable heart of argscan: the record
types that describe option tables and parse results, the typed error
hierarchy, and the token scanner itself. Everything else (table loading,
formatters, CLI) is a consumer of these modules.

HOW: ir.py defines the data structures, errors.py the exceptions raised
on failure, parser.py the single-pass scanner that turns a ParseConfig
into an ordered list of ParsedArgument records.

RULES:
- IR dataclasses are the contract; change with care
- The parser performs no I/O and keeps no module-level state
"""
