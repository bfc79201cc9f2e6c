"""
scheduler
---------

Court plan engine. Pure operations over the core data model:

- `roster`: Add, edit and delete players (deletion cascades into the schedule).
- `assignment`: Assign, move, unassign and retime player segments.
- `aggregation`: Playing time totals and on-court status.
- `plans`: The plan book lifecycle (create, save as, rename, load, delete).
- `normalize`: Repair stored plan records on load.
- `service`: Session object that owns the plan book and persists every command.
"""
