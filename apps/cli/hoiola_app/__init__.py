"""Command-line app for the hoiola snapshot tool."""
