"""Reading config lines from files and streams."""
