"""Recipe extraction and tag inference services."""
