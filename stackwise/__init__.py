"""Stackwise: enterprise-aware technology selection for architecture graphs."""
