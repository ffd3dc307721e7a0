"""
Core calendar primitives: units, Gregorian arithmetic, calendar points and
serialization contracts.
"""
