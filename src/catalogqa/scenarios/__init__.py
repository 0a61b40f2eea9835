"""Scenario pipelines composed from page objects."""

from catalogqa.scenarios.brand_filter import run_brand_filter_scenario

__all__ = ["run_brand_filter_scenario"]
