"""Create-if-absent scaffolding of profile target files."""
