"""Command-line interface adapters.

Provides CLI commands for the agespan calculator:
- age: Years, months, weeks and days between two dates
"""
