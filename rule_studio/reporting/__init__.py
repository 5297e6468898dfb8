"""
rule_studio.reporting — Text rendering of evaluation and recommendation output.

Everything here is presentational: no decisions are made, only formatted.

Modules:
  narrative  — Plain-English narrative of a simulation + rule preview lines.
  diff       — Before/after profile comparison (scores and tags).
  formatters — ASCII terminal tables for Typer CLI commands.
"""
