"""Command line tools for inspecting autobackup configuration files."""
