"""Command registrations for the Typer CLI.

`denominator/cli.py` stays the entrypoint module (pyproject points the
`denominator` script at `denominator.cli:main`); commands live here and are
registered from there.
"""
