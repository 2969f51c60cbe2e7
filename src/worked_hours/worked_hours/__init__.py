"""Worked Hours package.

Worked-time reconciliation (normal / overtime / nocturnal split, late arrival,
costing) and weekly schedule-slot decoding, organized by feature modules with a
thin Flask controller layer on top.
"""
