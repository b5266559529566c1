"""LifeScore engine: score calculation, global standing estimation and caching."""
