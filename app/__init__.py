"""Command-line and watch-mode front ends."""
