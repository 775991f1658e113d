"""Command line front end for the calorie estimator."""
