"""
Terrain engines — deterministic market-sizing components.

Pipeline: indication_resolver -> patient_funnel, pricing, competitive_context
-> geography -> revenue_projection -> output_assembler, orchestrated by
market_sizing.calculate_market_sizing().
"""
