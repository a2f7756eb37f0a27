"""Adapters connecting the agespan core to the outside world.

- parsing: DateParserPort implementations
- cli: Command-line front end over AgeCalculationPort
"""
