"""Carbon footprint tracker."""
