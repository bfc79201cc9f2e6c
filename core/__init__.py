"""
core
----

Court plan data model:

- Player, PlayerTimeSegment, Schedule, GamePlan:
  The roster and the quarter x position x segment schedule of a game plan.

- Diagnostic & Outcome:
  Non-fatal messages returned next to every mutation result.
"""
