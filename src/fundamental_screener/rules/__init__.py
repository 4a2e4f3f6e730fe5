"""
Rules Package - Fundamental Rule Evaluation.

    - FundamentalChecker: Default RuleEvaluator for the good-company screen
"""

from fundamental_screener.rules.checker import FundamentalChecker, is_strictly_increasing

__all__ = ["FundamentalChecker", "is_strictly_increasing"]
