"""
Menu recommendation engine: rule-based weighting plus weighted random draws.

Modules
-------
sampling    : weighted_random_select() + uniform_random_select() — injectable
              random source, no I/O.
rule_engine : check_rule_conditions() + apply_rule_action() +
              calculate_menu_weights() — pure functions.
recommender : filter_menus() + recommend_menu() + RecommendationHistory.
"""
