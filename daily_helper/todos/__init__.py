"""
Todo prioritisation.

Modules
-------
scorer : factor scores + calculate_todo_score() with reason strings.
ranker : get_top_priority_todos() — stable top-N of open todos.
stats  : completion rates (today / week / month) and week / month breakdowns.
"""
