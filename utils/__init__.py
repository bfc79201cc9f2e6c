"""
utils package
-------------

Contains utility modules used throughout the court plan application.

Includes the configuration constants, the shared logger and the plan store
adapters used to persist game plans.
"""
