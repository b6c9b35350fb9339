"""Capital weather dashboard built on Django."""
