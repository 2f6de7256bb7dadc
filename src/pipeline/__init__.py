"""
Pipeline Package
================
Post-processing of engine results for presentation.

Modules:
  summary_builder - three-bullet summary text for UI cards
"""
