"""
Analytics Package
=================
Pure computations behind analytics_engine.compute_analytics().

Modules:
  models       - input/output value records and enums
  correlation  - Pearson pairs with per-pair significance thresholds
  health_score - five sub-scores, overall score, trend
  insights     - goal prediction, pattern detection, optimisation tips
  performance  - best training weekdays, recovery profile
  metabolic    - caloric efficiency, macro sensitivity
"""
