assign_player_description = """
Assign a player to a court position in a quarter of the current game plan.

### Request Body

- `targetQuarter` (String): Quarter key, one of `Q1`, `Q2`, `Q3`, `Q4`.
- `targetPositionIndex` (Integer): Court position, `0` to `4`.
- `dragged` (Object): Where the player was dragged from.
    - `playerId`: Roster player id
    - `sourceType`: `"list"` when dragged from the roster, `"timeline"` when moving an existing segment
    - `sourceQuarter`, `sourcePositionIndex`, `sourceSegmentId`: The segment being moved (timeline only)

    ```json
    {
        "targetQuarter": "Q1",
        "targetPositionIndex": 3,
        "dragged": {
            "playerId": "p1",
            "sourceType": "timeline",
            "sourceQuarter": "Q1",
            "sourcePositionIndex": 0,
            "sourceSegmentId": "8d3c..."
        }
    }
    ```

### Behaviour

- A moved segment is removed from its old position.
- The player is removed from every other position of the target quarter, unless the
  segment was dropped back onto its own position.
- The new segment gets the full quarter when the position was empty, otherwise the
  default substitute minutes.

### Response

- `plan`: The updated game plan.
- `diagnostics`: Warnings such as a position planned for more minutes than the quarter lasts.
"""

update_minutes_description = """
Set the minutes of one segment. Values are clamped to `0` .. quarter duration.

A position whose segments add up to more than the quarter is allowed; a `position_overflow`
warning is returned in `diagnostics`. Unknown segment ids leave the plan unchanged.
"""

unassign_segment_description = """
Remove one segment from a court position, e.g. when a player is dragged from the timeline
back to the roster. Unknown segment ids leave the plan unchanged.
"""
