"""
Dining-hall recommendation queries.

Responsibilities:
- Hold the fixed GraphQL documents and the default preference payload.
- Validate `recommend` / `diningHalls` results into typed models.
- Render recommended items as console lines.
"""
