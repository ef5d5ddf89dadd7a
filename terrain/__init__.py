"""
Terrain — Market Opportunity Sizing Engine.

Deterministic market sizing for life-sciences indications: patient funnel,
TAM/SAM/SOM by geography, pricing analysis, and a ten-year bear/base/bull
revenue projection.
"""
