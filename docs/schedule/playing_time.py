playing_time_description = """
Playing time table for the roster of the current game plan.

One record per player, most minutes first:

```json
[
    {"id": "p1", "name": "Alice", "jerseyNumber": "7",
     "Q1": 10, "Q2": 4, "Q3": 0, "Q4": 10, "total": 24, "onCourt": true}
]
```

`onCourt` is true when the player is the last occupant of at least one position.
"""
