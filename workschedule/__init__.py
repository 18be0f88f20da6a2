"""Weekly shift-assignment scheduler.

Modules:
- config: load and validate configuration (JSON or YAML)
- domain: workers, templates, parsed shifts and results
- services: time-range parsing, hard eligibility rules, scoring, restriction helpers
- engine: greedy scarcity-first assignment and the ``generate`` entry point
- diagnostics: status message for unfilled slots
- validator: post-generation validations and summaries
- data_io: CSV / YAML / JSON input helpers
- cli: command-line interface entrypoints
"""

from .engine.orchestrator import build_week_schedule, generate

__all__ = [
    "build_week_schedule",
    "generate",
    "config",
    "domain",
    "services",
    "engine",
    "diagnostics",
    "validator",
    "data_io",
    "cli",
]
