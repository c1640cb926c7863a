"""Backend - renders GenExpr text."""
