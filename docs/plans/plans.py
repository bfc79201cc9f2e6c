plans_description = """
Game plans bundle a roster and a schedule under a name. One plan is always current;
roster and schedule endpoints work on it.

- `POST /plans`: Create an empty plan and make it current.
- `POST /plans/save-as`: Copy the current plan under a new name; the copy becomes current.
- `PATCH /plans/{plan_id}`: Rename a plan.
- `POST /plans/{plan_id}/load`: Make a plan current.
- `DELETE /plans/{plan_id}`: Delete a plan. The last remaining plan cannot be deleted (409).

Unknown plan ids return 404.
"""
