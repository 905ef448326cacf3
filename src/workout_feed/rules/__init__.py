"""Classifier rules, discovered automatically by the RuleRegistry."""
