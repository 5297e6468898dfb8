"""
Recommendation engine: ranks and filters the product catalog against a
(typically rule-evolved) customer profile, with human-readable explanations.

Modules
-------
scorer   : ProductScore dataclass + find_exclusion() + check_thresholds()
           + compute_rank_score() + score_product() — pure functions, no I/O.
ranker   : score_catalog() + order_scores() + recommend().
reporter : write_recommendation_csv() + write_simulation_json() — file output.
"""
