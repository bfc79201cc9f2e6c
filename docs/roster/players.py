add_player_description = """
Add a player to the roster of the current game plan.

### Request Body

- `id` (String, optional): Player id. Generated when omitted.
- `name` (String): Player name.
- `jerseyNumber` (String, optional): Also accepted as `jersey` or `number`.
- `position` (String, optional): Preferred position, e.g. `"PG"`.
"""

delete_player_description = """
Remove a player from the roster. Every segment of that player, in every quarter and
position, is removed as well.
"""
